"""Common - Shared functionality across bblex components."""

from . import base

__all__ = ["base"]
