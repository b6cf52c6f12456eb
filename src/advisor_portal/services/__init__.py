"""Service layer for business logic."""

from .auth_service import AuthService
from .proxy_service import ProxyService

__all__ = [
    "AuthService",
    "ProxyService",
]
