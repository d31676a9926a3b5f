"""Unit tests for calbump.core.resolver.

Test Coverage:
- Calendar reset vs. fall-through
- Semantic bumps and the reset of later components
- Prerelease tracks
- Composite directives and failure signals
"""

from __future__ import annotations

import sys
from datetime import date

import pytest

from calbump.models import Role
from calbump.core.interpreter import interpret
from calbump.core.resolver import calendar_value, resolve
from calbump.exceptions import (
    DirectiveExhaustedError,
    FormatMismatchError,
    LabelMismatchError,
    UnknownRoleError,
)

INT_DIGIT_LIMIT = getattr(sys, "get_int_max_str_digits", lambda: 0)()


@pytest.mark.unit
class TestCalendarValue:
    """Tests for calendar_value."""

    def test_years(self, today: date) -> None:
        assert calendar_value(Role.YEAR_FULL, today) == 2026
        assert calendar_value(Role.YEAR_SHORT, today) == 26
        assert calendar_value(Role.YEAR_SHORT_PADDED, today) == 26

    def test_month_and_day(self, today: date) -> None:
        assert calendar_value(Role.MONTH, today) == 10
        assert calendar_value(Role.DAY, today) == 18

    def test_week_is_iso_week(self, today: date) -> None:
        assert calendar_value(Role.WEEK, today) == today.isocalendar()[1]

    def test_short_year_is_relative_to_2000(self) -> None:
        assert calendar_value(Role.YEAR_SHORT, date(2005, 1, 1)) == 5

    def test_week_based_year_follows_iso_calendar(self) -> None:
        """Test 2027-01-01 falls in ISO week 53 of 2026."""
        new_year = date(2027, 1, 1)

        assert calendar_value(Role.YEAR_FULL, new_year, week_based=True) == 2026
        assert calendar_value(Role.YEAR_SHORT, new_year, week_based=True) == 26
        assert calendar_value(Role.WEEK, new_year) == 53

    def test_year_without_weeks_is_calendar_year(self) -> None:
        assert calendar_value(Role.YEAR_FULL, date(2027, 1, 1)) == 2027

    def test_week_format_never_moves_backwards_at_year_end(self) -> None:
        parsed = interpret("yyyy.ww.minor", "2026.52.3")
        first = resolve(parsed, "calendar", date(2027, 1, 1))

        assert first == "2026.53.0"

        second = resolve(interpret("yyyy.ww.minor", first), "calendar", date(2027, 1, 4))

        assert second == "2027.1.0"

    def test_month_format_uses_calendar_year_on_new_year(self) -> None:
        parsed = interpret("yyyy.mm.minor", "2026.12.3")
        assert resolve(parsed, "calendar", date(2027, 1, 1)) == "2027.1.0"


@pytest.mark.unit
class TestCalendarDirective:
    """Tests for the calendar group directive."""

    def test_stale_month_resets_to_today(self, today: date) -> None:
        parsed = interpret("yy.mm.minor", "26.8.4")
        assert resolve(parsed, "calendar", today) == "26.10.0"

    def test_stale_year_resets_to_today(self, today: date) -> None:
        parsed = interpret("yyyy.mm.minor.patch", "2025.10.3.7")
        assert resolve(parsed, "calendar", today) == "2026.10.0.0"

    def test_current_calendar_alone_is_exhausted(self, today: date) -> None:
        """Test an up-to-date calendar is a no-op, not a success."""
        parsed = interpret("yy.mm.minor", "26.10.4")

        with pytest.raises(DirectiveExhaustedError) as exc_info:
            resolve(parsed, "calendar", today)

        assert "already current" in str(exc_info.value)

    def test_format_without_calendar_roles(self, today: date) -> None:
        parsed = interpret("major.minor.patch", "1.2.3")

        with pytest.raises(UnknownRoleError) as exc_info:
            resolve(parsed, "calendar", today)

        assert exc_info.value.role == "calendar"

    def test_semantic_component_before_calendar_is_kept(self, today: date) -> None:
        parsed = interpret("major.yyyy.mm.minor", "3.2025.1.9")
        assert resolve(parsed, "calendar", today) == "3.2026.10.0"

    def test_padded_calendar_roles(self, today: date) -> None:
        parsed = interpret("yyyy.0m.0d.minor", "2026.3.1.5")
        assert resolve(parsed, "calendar", today) == "2026.10.18.0"

    def test_day_role_triggers_reset(self) -> None:
        parsed = interpret("yyyy.mm.dd.minor", "2026.10.17.2")
        assert resolve(parsed, "calendar", date(2026, 10, 18)) == "2026.10.18.0"

    def test_resets_prerelease_counter(self, today: date) -> None:
        parsed = interpret("yyyy.mm.minor.patch", "2021.1.1.0-alpha.3")
        assert resolve(parsed, "calendar", today) == "2026.10.0.0-alpha.0"

    def test_directive_is_case_insensitive(self, today: date) -> None:
        parsed = interpret("yy.mm.minor", "26.8.4")
        assert resolve(parsed, "Calendar", today) == "26.10.0"


@pytest.mark.unit
class TestSemanticDirective:
    """Tests for major / minor / patch directives."""

    def test_minor_bump(self, today: date) -> None:
        parsed = interpret("yyyy.mm.minor", "2025.7.5")
        assert resolve(parsed, "minor", today) == "2025.7.6"

    def test_minor_bump_ignores_stale_calendar(self, today: date) -> None:
        parsed = interpret("yy.mm.minor", "26.8.0")
        assert resolve(parsed, "minor", today) == "26.8.1"

    def test_minor_bump_resets_patch(self, today: date) -> None:
        parsed = interpret("yyyy.mm.minor.patch", "2021.1.1.7")
        assert resolve(parsed, "minor", today) == "2021.1.2.0"

    def test_major_bump_resets_minor_and_patch(self, today: date) -> None:
        parsed = interpret("major.minor.patch", "1.4.2")
        assert resolve(parsed, "major", today) == "2.0.0"

    def test_patch_bump(self, today: date) -> None:
        parsed = interpret("yyyy.mm.minor.patch", "2021.1.1.0")
        assert resolve(parsed, "patch", today) == "2021.1.1.1"

    def test_bump_keeps_calendar_after_role(self, today: date) -> None:
        parsed = interpret("minor.yy.mm", "4.26.1")
        assert resolve(parsed, "minor", today) == "5.26.1"

    def test_bump_resets_prerelease_counter(self, today: date) -> None:
        parsed = interpret("yyyy.mm.minor.patch", "2021.1.1.0-alpha.3")
        assert resolve(parsed, "minor", today) == "2021.1.2.0-alpha.0"

    def test_undeclared_role_raises(self, today: date) -> None:
        parsed = interpret("yy.mm.minor", "26.10.1")

        with pytest.raises(UnknownRoleError) as exc_info:
            resolve(parsed, "patch", today)

        assert exc_info.value.role == "patch"
        assert exc_info.value.format == "yy.mm.minor"

    def test_calendar_role_cannot_be_bumped_directly(self, today: date) -> None:
        parsed = interpret("yy.mm.minor", "26.10.1")

        with pytest.raises(UnknownRoleError, match="calendar"):
            resolve(parsed, "mm", today)


@pytest.mark.unit
class TestPrereleaseDirective:
    """Tests for prerelease track directives."""

    def test_matching_track_bumps_counter(self, today: date) -> None:
        parsed = interpret("yyyy.mm.minor.patch", "2021.1.1.0-alpha.0")
        assert resolve(parsed, "alpha", today) == "2021.1.1.0-alpha.1"

    def test_missing_counter_counts_from_zero(self, today: date) -> None:
        parsed = interpret("yyyy.mm.minor", "2021.1.1-beta")
        assert resolve(parsed, "beta", today) == "2021.1.1-beta.1"

    def test_other_label_raises(self, today: date) -> None:
        parsed = interpret("yyyy.mm.minor.patch", "2021.1.1.0-beta.2")

        with pytest.raises(LabelMismatchError) as exc_info:
            resolve(parsed, "alpha", today)

        assert exc_info.value.track == "alpha"
        assert exc_info.value.label == "beta"

    def test_no_prerelease_raises(self, today: date) -> None:
        parsed = interpret("yyyy.mm.minor", "2025.7.5")

        with pytest.raises(LabelMismatchError) as exc_info:
            resolve(parsed, "nonexistent", today)

        assert exc_info.value.label is None

    def test_track_is_case_insensitive(self, today: date) -> None:
        parsed = interpret("yyyy.mm.minor.patch", "2021.1.1.0-alpha.0")
        assert resolve(parsed, "Alpha", today) == "2021.1.1.0-alpha.1"

    def test_label_spelling_is_kept(self, today: date) -> None:
        parsed = interpret("yyyy.mm.minor", "2021.1.1-RC.1")
        assert resolve(parsed, "rc", today) == "2021.1.1-RC.2"


@pytest.mark.unit
class TestCompositeDirective:
    """Tests for dot-separated directive chains."""

    def test_calendar_minor_resets_when_stale(self, today: date) -> None:
        parsed = interpret("yy.mm.minor", "21.1.5")
        assert resolve(parsed, "calendar.minor", today) == "26.10.0"

    def test_calendar_minor_falls_through_when_current(self, today: date) -> None:
        parsed = interpret("yy.mm.minor", "26.10.0")
        assert resolve(parsed, "calendar.minor", today) == "26.10.1"

    def test_first_applicable_step_wins(self, today: date) -> None:
        parsed = interpret("yyyy.mm.minor.patch", "2026.10.1.0-rc.1")
        assert resolve(parsed, "alpha.rc.minor", today) == "2026.10.1.0-rc.2"

    def test_all_steps_failing_raises_exhausted(self, today: date) -> None:
        parsed = interpret("yy.mm.minor", "26.10.0")

        with pytest.raises(DirectiveExhaustedError) as exc_info:
            resolve(parsed, "calendar.patch", today)

        assert exc_info.value.directive == "calendar.patch"
        assert len(exc_info.value.reasons) == 2

    def test_empty_directive_raises_exhausted(self, today: date) -> None:
        parsed = interpret("yy.mm.minor", "26.10.0")

        with pytest.raises(DirectiveExhaustedError):
            resolve(parsed, "", today)

    def test_resolve_does_not_mutate_input(self, today: date) -> None:
        parsed = interpret("yy.mm.minor", "26.10.0")
        resolve(parsed, "minor", today)
        assert parsed.render() == "26.10.0"

    @pytest.mark.skipif(
        not INT_DIGIT_LIMIT,
        reason="interpreter has no integer string conversion limit",
    )
    def test_unrenderable_result_raises_format_mismatch(self, today: date) -> None:
        parsed = interpret("yy.mm.minor", "26.10." + "9" * INT_DIGIT_LIMIT)

        with pytest.raises(FormatMismatchError, match="too long"):
            resolve(parsed, "minor", today)
