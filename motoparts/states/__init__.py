"""
Application states.

This module exports the decorators shared by the state mixins.
"""
from .mixin_state import require_admin, require_login

__all__ = [
    "require_admin",
    "require_login",
]
