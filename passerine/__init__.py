"""Core tools for the Passerine programming language."""

__version__ = "0.1.0"