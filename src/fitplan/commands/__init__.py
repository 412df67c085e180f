"""CLI commands for fitplan."""

from .accounts import register
from .admin import admin
from .generate import generate
from .history import history
from .init import init
from .serve import serve

__all__ = [
    "admin",
    "generate",
    "history",
    "init",
    "register",
    "serve",
]
