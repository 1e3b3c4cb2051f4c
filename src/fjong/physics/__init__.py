"""
Collision primitives and contact responses.
"""

from __future__ import annotations

from .collision import Collision, collide, reflect

__all__ = [
    "Collision",
    "collide",
    "reflect",
]
