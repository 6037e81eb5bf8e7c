"""Easing, guifont parsing, redraw scheduling, cursor blink and effects, frame statistics and crash reports for an editor front end."""

__version__ = "0.1.0"