"""Portfolio site backend exposing the validated project dataset."""

from .main import app, create_application

__all__ = ("app", "create_application")
