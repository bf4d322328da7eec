"""
Internal DTOs

DTOs passed between layers inside the backend. These are not exposed to
external APIs.
"""

from .full_request import FullRequest

__all__ = ["FullRequest"]
