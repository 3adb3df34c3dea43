"""
Base controller class.
Controllers coordinate multiple services and return Pydantic schemas.
"""

from abc import ABC


class BaseController(ABC):
    """Base controller class for all controllers."""
    pass
