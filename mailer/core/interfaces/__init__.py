"""
Core interfaces and abstract base classes for the mailer client.
"""

from .base_api_client import BaseAPIClient

__all__ = [
    "BaseAPIClient",
]
