"""
Format interpretation.

Maps the positional parts of a version string onto the roles declared by
a format specification. Every format implicitly allows a trailing
prerelease segment of the form ``-label`` or ``-label.counter``.

Example::

    >>> parsed = interpret("yyyy.mm.minor.patch", "2021.1.1.0-alpha.0")
    >>> parsed.roles
    (<Role.YEAR_FULL: 'yyyy'>, <Role.MONTH: 'mm'>, <Role.MINOR: 'minor'>, <Role.PATCH: 'patch'>)
    >>> parsed.label, parsed.counter
    ('alpha', 0)
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from calbump.core.normalizer import is_numeric
from calbump.exceptions import FormatMismatchError
from calbump.models import Component, Role, VersionComponents
from calbump.constants import COMPONENT_SEPARATOR, PRERELEASE_SEPARATOR


def parse_format(fmt: str) -> Tuple[Role, ...]:
    """Tokenize a format specification into roles.

    Args:
        fmt: Format such as ``"yy.mm.minor"``.

    Returns:
        Roles in positional order.

    Raises:
        FormatMismatchError: The format is empty, declares an unknown
            token, or declares the same role twice.
    """
    if not fmt:
        raise FormatMismatchError("Format specification is empty", format=fmt)

    roles: List[Role] = []
    for token in fmt.split(COMPONENT_SEPARATOR):
        role = Role.from_token(token.strip().lower())
        if role is None:
            raise FormatMismatchError(
                f"Unknown format token {token!r}",
                format=fmt,
            )
        if role in roles:
            raise FormatMismatchError(
                f"Format token {token!r} is declared more than once",
                format=fmt,
            )
        roles.append(role)
    return tuple(roles)


def interpret(fmt: str, version: str) -> VersionComponents:
    """Interpret ``version`` against the format ``fmt``.

    The version should already be normalized (see
    :func:`calbump.core.normalizer.normalize_version`).

    Args:
        fmt: Format specification.
        version: Version string to break down.

    Returns:
        The role-tagged components, in format order.

    Raises:
        FormatMismatchError: The format is invalid, the number of main
            parts differs from the number of format tokens, a part is not a
            non-negative integer, or the prerelease segment is malformed.
    """
    roles = parse_format(fmt)

    if not version:
        raise FormatMismatchError("Version is empty", format=fmt, version=version)

    main, separator, prerelease = version.partition(PRERELEASE_SEPARATOR)
    parts = main.split(COMPONENT_SEPARATOR)

    if len(parts) != len(roles):
        raise FormatMismatchError(
            f"Version has {len(parts)} components but the format declares "
            f"{len(roles)}",
            format=fmt,
            version=version,
        )

    components: List[Component] = []
    for role, part in zip(roles, parts):
        if not is_numeric(part):
            raise FormatMismatchError(
                f"Component {part!r} at {role.value!r} is not a non-negative integer",
                format=fmt,
                version=version,
            )
        components.append(
            Component(role=role, value=_to_int(part, fmt=fmt, version=version))
        )

    label: Optional[str] = None
    counter: Optional[int] = None
    if separator:
        label, counter = _parse_prerelease(prerelease, fmt=fmt, version=version)

    return VersionComponents(
        components=tuple(components),
        label=label,
        counter=counter,
    )


def _parse_prerelease(
    prerelease: str,
    *,
    fmt: str,
    version: str,
) -> Tuple[str, Optional[int]]:
    """Split ``label[.counter]`` into its label and counter."""
    parts = prerelease.split(COMPONENT_SEPARATOR)
    label = parts[0]

    if not label or is_numeric(label) or len(parts) > 2:
        raise FormatMismatchError(
            f"Prerelease segment {prerelease!r} is not of the form label.counter",
            format=fmt,
            version=version,
        )

    if len(parts) == 1:
        return label, None

    if not is_numeric(parts[1]):
        raise FormatMismatchError(
            f"Prerelease counter {parts[1]!r} is not a non-negative integer",
            format=fmt,
            version=version,
        )
    return label, _to_int(parts[1], fmt=fmt, version=version)


def _to_int(part: str, *, fmt: str, version: str) -> int:
    """Convert a digit run, rejecting ones beyond the interpreter's digit limit."""
    try:
        return int(part)
    except ValueError as exc:
        raise FormatMismatchError(
            f"Component of {len(part)} digits is too long to interpret",
            format=fmt,
            version=version,
        ) from exc
