"""A small threaded HTTP server for static files and URL arithmetic."""

__version__ = "0.1.0"