"""System information banner and shell/app launcher for hosting panel containers."""

__version__ = "1.0.0"
