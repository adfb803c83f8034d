"""Handheld game console logic: snake, menus, joystick input and a monochrome canvas."""

__version__ = "0.1.0"