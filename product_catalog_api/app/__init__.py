"""
Application package initializer.

The package is organised into ``core`` (configuration, logging, error
handling and JSON storage), ``services`` (rules applied to the product
collection), ``schemas`` (API payload models) and ``api`` (HTTP routes).
"""

from .main import app  # noqa: F401
