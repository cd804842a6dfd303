"""Ollama HTTP client and immutable state objects for a terminal chat interface."""

__version__ = "0.1.0"