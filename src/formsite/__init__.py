"""Django project for running and testing formkit."""
