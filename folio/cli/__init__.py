# folio/cli/__init__.py
from .cli import app, main

__all__ = ["app", "main"]
