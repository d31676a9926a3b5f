"""
Data models for calbump.

This package defines the immutable value types exchanged between the
format interpreter and the increment resolver.
"""

from __future__ import annotations

from calbump.models.component import Component, Role, VersionComponents

__all__ = [
    "Component",
    "Role",
    "VersionComponents",
]
