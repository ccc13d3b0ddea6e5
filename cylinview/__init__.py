"""Screens, drawing, effects and device protocol helpers for a rotating ring of monochrome panels."""

__version__ = "0.1.0"