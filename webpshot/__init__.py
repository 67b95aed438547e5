"""Data model for screenshot capture and WebP encoding."""

__version__ = "1.0.0"
__all__ = ["models"]