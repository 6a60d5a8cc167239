"""View helpers mapping form elements to HTML markup."""

from .button import FormButton
from .captcha import FormCaptcha, FormCaptchaDumb
from .checkbox import FormCheckbox, FormMultiCheckbox, FormRadio
from .collection import FormCollection
from .element import FormElement
from .input import FormFile, FormHidden, FormImage, FormInput, FormText
from .label import FormElementErrors, FormLabel
from .row import FormRow
from .select import FormSelect
from .textarea import FormTextarea

__all__ = [
    "FormButton",
    "FormCaptcha",
    "FormCaptchaDumb",
    "FormCheckbox",
    "FormCollection",
    "FormElement",
    "FormElementErrors",
    "FormFile",
    "FormHidden",
    "FormImage",
    "FormInput",
    "FormLabel",
    "FormMultiCheckbox",
    "FormRadio",
    "FormRow",
    "FormSelect",
    "FormText",
    "FormTextarea",
]
