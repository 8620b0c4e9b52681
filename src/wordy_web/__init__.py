"""Flask front end for wordy: POST text, get the top groupings back as JSON."""
from .web import app, main

__all__ = ["app", "main"]
