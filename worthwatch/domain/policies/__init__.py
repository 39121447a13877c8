"""Domain policies package."""

from .visibility import is_visible_to

__all__ = ["is_visible_to"]
