"""Form element view helpers for Django projects."""
