"""
Version component data model for calbump.

A version such as ``2021.1.1.0-alpha.0`` interpreted against the format
``yyyy.mm.minor.patch`` becomes a :class:`VersionComponents` value: one
:class:`Component` per format token, in format order, plus the optional
prerelease label and counter. All models are immutable; the resolver
builds modified copies.
"""

from __future__ import annotations

from enum import Enum
from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple

from calbump.constants import COMPONENT_SEPARATOR, PRERELEASE_SEPARATOR


class Role(str, Enum):
    """Semantic role of a positional version component.

    The value of each member is the token used in format specifications.
    """

    YEAR_FULL = "yyyy"
    YEAR_SHORT = "yy"
    YEAR_SHORT_PADDED = "0y"
    MONTH = "mm"
    MONTH_PADDED = "0m"
    WEEK = "ww"
    WEEK_PADDED = "0w"
    DAY = "dd"
    DAY_PADDED = "0d"
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"

    @property
    def is_calendar(self) -> bool:
        """Whether the component encodes a calendar unit."""
        return self not in _SEMANTIC_ROLES

    @property
    def is_padded(self) -> bool:
        """Whether the component renders with a leading zero below 10."""
        return self.value.startswith("0")

    @property
    def kind(self) -> str:
        """Short label used in diagnostics: ``"calendar"`` or ``"semantic"``."""
        return "calendar" if self.is_calendar else "semantic"

    @classmethod
    def from_token(cls, token: str) -> Optional["Role"]:
        """Return the role for a format token, or ``None`` if unknown."""
        return _ROLES_BY_TOKEN.get(token)


_SEMANTIC_ROLES = frozenset({Role.MAJOR, Role.MINOR, Role.PATCH})
_ROLES_BY_TOKEN: Dict[str, Role] = {role.value: role for role in Role}


@dataclass(frozen=True)
class Component:
    """A single positional component of a version.

    Attributes:
        role: Role declared for this position by the format.
        value: Non-negative numeric value.
    """

    role: Role
    value: int

    def render(self) -> str:
        """Render the value, zero-padding two-digit calendar roles."""
        if self.role.is_padded:
            return f"{self.value:02d}"
        return str(self.value)


@dataclass(frozen=True)
class VersionComponents:
    """A version broken down into role-tagged components.

    Attributes:
        components: Main components in format order.
        label: Prerelease label (``"alpha"``), or ``None`` when the
            version is not on a prerelease track.
        counter: Prerelease counter, or ``None`` when absent.
    """

    components: Tuple[Component, ...]
    label: Optional[str] = None
    counter: Optional[int] = None

    @property
    def roles(self) -> Tuple[Role, ...]:
        """Roles of the main components, in order."""
        return tuple(component.role for component in self.components)

    def index_of(self, role: Role) -> Optional[int]:
        """Return the position of ``role``, or ``None`` if not declared."""
        for index, component in enumerate(self.components):
            if component.role is role:
                return index
        return None

    def with_values(
        self,
        values: Tuple[int, ...],
        *,
        counter: Optional[int] = None,
    ) -> "VersionComponents":
        """Return a copy with new main values and prerelease counter.

        The counter is only kept when a label is set.
        """
        components = tuple(
            replace(component, value=value)
            for component, value in zip(self.components, values)
        )
        return replace(
            self,
            components=components,
            counter=counter if self.label is not None else None,
        )

    def render(self) -> str:
        """Render back to a version string in format order."""
        main = COMPONENT_SEPARATOR.join(c.render() for c in self.components)
        if self.label is None:
            return main

        prerelease = self.label
        if self.counter is not None:
            prerelease += f"{COMPONENT_SEPARATOR}{self.counter}"
        return f"{main}{PRERELEASE_SEPARATOR}{prerelease}"
