"""
Increment resolution.

Applies an increment directive to an interpreted version. A directive is
a dot-separated chain of sub-directives tried left to right until one of
them applies:

- ``calendar`` moves every calendar component to today's date and resets
  the semantic components positioned after them. It is a no-op when the
  calendar is already current, in which case the next sub-directive is
  tried.
- ``major``, ``minor`` and ``patch`` bump that component by one and reset
  every semantic component positioned after it.
- Any other name is a prerelease track: ``alpha`` bumps the counter of a
  version labelled ``alpha`` and fails for any other version.

Resets also zero an active prerelease counter; the label is kept.

Directive names are matched case-insensitively, prerelease tracks included:
``Alpha`` bumps a version labelled ``alpha``. The rendered version keeps
the label as spelled in the input.

Formats that declare an ISO week (``ww``, ``0w``) take their year from the
ISO calendar too, so ``yyyy.ww`` never pairs week 53 with the following
year.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Dict, List, Optional, Tuple

from calbump.models import Role, VersionComponents
from calbump.utils.logger import get_logger
from calbump.constants import (
    CALENDAR_DIRECTIVE,
    COMPONENT_SEPARATOR,
    SHORT_YEAR_BASE,
)
from calbump.exceptions import (
    DirectiveExhaustedError,
    FormatMismatchError,
    IncrementError,
    LabelMismatchError,
    UnknownRoleError,
)

logger = get_logger("core.resolver")


_YEAR_ROLES = frozenset({Role.YEAR_FULL, Role.YEAR_SHORT, Role.YEAR_SHORT_PADDED})
_WEEK_ROLES = frozenset({Role.WEEK, Role.WEEK_PADDED})

_CALENDAR_VALUES: Dict[Role, Callable[[date], int]] = {
    Role.MONTH: lambda today: today.month,
    Role.MONTH_PADDED: lambda today: today.month,
    Role.WEEK: lambda today: today.isocalendar()[1],
    Role.WEEK_PADDED: lambda today: today.isocalendar()[1],
    Role.DAY: lambda today: today.day,
    Role.DAY_PADDED: lambda today: today.day,
}


def calendar_value(role: Role, today: date, *, week_based: bool = False) -> int:
    """Return the value a calendar ``role`` takes on ``today``.

    With ``week_based`` set, year roles use the ISO year, which differs from
    the calendar year in the first and last days of some years.
    """
    if role in _YEAR_ROLES:
        year = today.isocalendar()[0] if week_based else today.year
        return year if role is Role.YEAR_FULL else year - SHORT_YEAR_BASE
    return _CALENDAR_VALUES[role](today)


def resolve(parsed: VersionComponents, directive: str, today: date) -> str:
    """Apply ``directive`` to ``parsed`` and render the next version.

    Args:
        parsed: Version interpreted against its format.
        directive: Increment directive, e.g. ``"calendar.minor"``.
        today: Date used for calendar components.

    Returns:
        The incremented version string.

    Raises:
        UnknownRoleError: A single-step directive names a role the format
            does not declare.
        LabelMismatchError: A single-step prerelease directive does not
            match the version's label.
        DirectiveExhaustedError: No sub-directive of the chain applied.
        FormatMismatchError: The incremented version cannot be rendered.
    """
    steps = directive.split(COMPONENT_SEPARATOR) if directive else []
    reasons: List[str] = []
    failure: Optional[IncrementError] = None

    for step in steps:
        try:
            result = _apply_step(parsed, step, today)
        except IncrementError as exc:
            logger.debug("Directive step %r not applicable: %s", step, exc)
            reasons.append(f"{step}: {exc.message}")
            failure = exc
            continue

        if result is None:
            logger.debug("Calendar already current for %s", today.isoformat())
            reasons.append(f"{step}: calendar is already current")
            continue

        logger.debug("Directive step %r applied", step)
        try:
            return result.render()
        except ValueError as exc:
            raise FormatMismatchError(
                "Incremented component is too long to render",
                format=_format_of(parsed),
            ) from exc

    # A lone failing step keeps its specific signal
    if len(steps) == 1 and failure is not None:
        raise failure

    raise DirectiveExhaustedError(
        f"No step of directive {directive!r} could be applied",
        directive=directive,
        reasons=reasons,
    )


def _apply_step(
    parsed: VersionComponents,
    step: str,
    today: date,
) -> Optional[VersionComponents]:
    """Apply one sub-directive; ``None`` means the calendar is current."""
    name = step.strip()
    if name.lower() == CALENDAR_DIRECTIVE:
        return _advance_calendar(parsed, today)

    role = Role.from_token(name.lower())
    if role is None:
        return _bump_prerelease(parsed, name)
    if role.is_calendar:
        raise UnknownRoleError(
            f"Calendar component {name!r} cannot be bumped directly; "
            f"use {CALENDAR_DIRECTIVE!r}",
            role=name,
        )
    return _bump_semantic(parsed, role)


def _advance_calendar(
    parsed: VersionComponents,
    today: date,
) -> Optional[VersionComponents]:
    positions = [
        index
        for index, component in enumerate(parsed.components)
        if component.role.is_calendar
    ]
    if not positions:
        raise UnknownRoleError(
            "Format declares no calendar components",
            role=CALENDAR_DIRECTIVE,
            format=_format_of(parsed),
        )

    week_based = any(role in _WEEK_ROLES for role in parsed.roles)
    values = [component.value for component in parsed.components]
    current = {
        i: calendar_value(parsed.components[i].role, today, week_based=week_based)
        for i in positions
    }
    if all(values[i] == value for i, value in current.items()):
        return None

    for index, value in current.items():
        values[index] = value
    return _reset_after(parsed, values, positions[0])


def _bump_semantic(parsed: VersionComponents, role: Role) -> VersionComponents:
    index = parsed.index_of(role)
    if index is None:
        raise UnknownRoleError(
            f"Format does not declare {role.value!r}",
            role=role.value,
            format=_format_of(parsed),
        )

    values = [component.value for component in parsed.components]
    values[index] += 1
    return _reset_after(parsed, values, index)


def _bump_prerelease(parsed: VersionComponents, track: str) -> VersionComponents:
    if parsed.label is None:
        raise LabelMismatchError(
            f"Version has no prerelease segment to bump on track {track!r}",
            track=track,
        )
    if parsed.label.lower() != track.lower():
        raise LabelMismatchError(
            f"Prerelease track {track!r} does not match label {parsed.label!r}",
            track=track,
            label=parsed.label,
        )

    values = tuple(component.value for component in parsed.components)
    return parsed.with_values(values, counter=(parsed.counter or 0) + 1)


def _reset_after(
    parsed: VersionComponents,
    values: List[int],
    position: int,
) -> VersionComponents:
    """Zero every semantic component after ``position`` and the counter."""
    reset: Tuple[int, ...] = tuple(
        0 if index > position and not component.role.is_calendar else value
        for index, (component, value) in enumerate(zip(parsed.components, values))
    )
    return parsed.with_values(reset, counter=0)


def _format_of(parsed: VersionComponents) -> str:
    return COMPONENT_SEPARATOR.join(role.value for role in parsed.roles)
