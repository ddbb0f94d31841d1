"""Blueprints for the bblex web API."""

from .errors import errors_bp
from .tokens import tokens_bp

BLUEPRINTS = [tokens_bp, errors_bp]

__all__ = ['BLUEPRINTS', 'errors_bp', 'tokens_bp']
