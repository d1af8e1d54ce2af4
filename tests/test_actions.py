"""Tests for built-in actions."""

import re
from datetime import datetime, timedelta, timezone

import pytest

from valpipe.core.errors import Err, ErrorCode, Ok
from valpipe.validation import ErrorMessage, floats, ints, strings, times


def failure(result):
    assert isinstance(result, Err), f"expected Err, got {result!r}"
    return result.error


class TestActionContract:
    """Behavior shared by every action family."""

    def test_success_is_ok_none(self):
        assert ints.gt(1).run(2) == Ok(None)

    def test_default_message(self):
        error = failure(ints.gt(18).run(18))
        assert error.message == "value must be greater than specified value"

    def test_string_message_promoted(self):
        action = ints.gt(18, message="too young")
        assert action.message == ErrorMessage("too young")
        assert failure(action.run(1)).message == "too young"

    def test_template_message(self):
        action = ints.min_value(18, message="must be at least 18, but is {VALUE}")
        assert failure(action.run(15)).message == "must be at least 18, but is 15"

    def test_constraint_in_metadata(self):
        error = failure(ints.gte(18).run(3))
        assert error.metadata["constraint"] == ">=18"

    def test_predicate_exception_becomes_failure(self):
        def boom(value):
            raise RuntimeError("kaboom")

        error = failure(ints.custom(boom).run(1))
        assert error.message == "invalid integer"
        assert error.metadata["exception"] == "kaboom"
        assert isinstance(error.cause, RuntimeError)

    def test_failure_metadata_carries_constraint_only(self):
        error = failure(ints.gt(18).run(3))
        assert error.metadata == {"constraint": ">18"}
        assert error.context.origin == ""
        assert error.cause is None

    def test_callable(self):
        assert ints.is_zero()(0) == Ok(None)

    def test_frozen(self):
        action = ints.gt(1)
        with pytest.raises(AttributeError):
            action.bound = 5

    def test_equal_configuration_equal_actions(self):
        assert floats.gt(1) == floats.gt(1.0)
        assert strings.has_prefix("a") == strings.has_prefix("a")


class TestIntActions:
    def test_strict_boundary(self):
        assert ints.gt(18).run(18).is_err()
        assert ints.lt(18).run(18).is_err()

    def test_inclusive_boundary(self):
        assert ints.gte(18).run(18).is_ok()
        assert ints.lte(18).run(18).is_ok()
        assert ints.min_value(18).run(18).is_ok()
        assert ints.max_value(18).run(18).is_ok()

    def test_bounds_messages(self):
        assert failure(ints.min_value(5).run(4)).message == "value must be at least specified minimum"
        assert failure(ints.max_value(5).run(6)).message == "value exceeds maximum"

    def test_range_code(self):
        assert failure(ints.lt(0).run(1)).code is ErrorCode.E2003_OUT_OF_RANGE

    def test_signs(self):
        assert ints.is_positive().run(0).is_err()
        assert ints.is_positive().run(1).is_ok()
        assert ints.is_negative().run(0).is_err()
        assert ints.is_negative().run(-1).is_ok()
        assert ints.is_zero().run(0).is_ok()
        assert ints.non_zero().run(0).is_err()

    def test_sign_message(self):
        assert failure(ints.is_positive().run(-3)).message == "value must be positive"

    def test_custom(self):
        even = ints.custom(lambda n: n % 2 == 0)
        assert even.run(4).is_ok()
        error = failure(even.run(3))
        assert error.message == "invalid integer"
        assert error.code is ErrorCode.E2000_VALIDATION_GENERIC


class TestFloatActions:
    def test_positive_is_strict(self):
        assert floats.is_positive().run(0.0).is_err()
        assert floats.is_positive().run(-0.0).is_err()
        assert floats.is_positive().run(0.1).is_ok()

    def test_comparisons(self):
        assert floats.gt(1.5).run(1.5).is_err()
        assert floats.gte(1.5).run(1.5).is_ok()
        assert floats.lt(1.5).run(1.4).is_ok()
        assert floats.lte(1.5).run(1.6).is_err()

    def test_template_renders_float(self):
        action = floats.max_value(10, message="{VALUE} is over the limit")
        assert failure(action.run(12.5)).message == "12.5 is over the limit"
        assert failure(action.run(11.0)).message == "11 is over the limit"

    def test_custom_message(self):
        assert failure(floats.custom(lambda v: False).run(1.0)).message == "invalid float"


class TestStringActions:
    def test_not_empty(self):
        error = failure(strings.not_empty().run(""))
        assert error.message == "cannot be empty"
        assert error.code is ErrorCode.E2001_REQUIRED_FIELD_MISSING
        assert strings.not_empty().run(" ").is_ok()

    def test_lengths_count_code_points(self):
        assert strings.max_length(2).run("éé").is_ok()
        assert strings.max_length(2).run("ééé").is_err()
        assert strings.min_length(3).run("日本語").is_ok()

    def test_length_messages(self):
        assert failure(strings.max_length(1).run("ab")).message == "string length exceeds maximum"
        assert (
            failure(strings.min_length(3).run("ab")).message
            == "string length must be at least specified minimum"
        )

    def test_length_between(self):
        action = strings.length_between(2, 4)
        assert action.run("ab").is_ok()
        assert action.run("abcd").is_ok()
        assert action.run("a").is_err()
        assert action.run("abcde").is_err()

    def test_length_between_rejects_inverted_bounds(self):
        with pytest.raises(ValueError):
            strings.length_between(5, 1)

    def test_pattern(self):
        action = strings.pattern(r"^\d{3}$")
        assert action.run("123").is_ok()
        error = failure(action.run("12a"))
        assert error.message == r"string doesn't follow the pattern ^\d{3}$"
        assert error.code is ErrorCode.E2002_INVALID_FORMAT

    def test_pattern_searches(self):
        assert strings.pattern(r"\d").run("abc1").is_ok()

    def test_pattern_compiled_once(self):
        action = strings.pattern("a+")
        assert isinstance(action.regex, re.Pattern)

    def test_bad_pattern_raises_at_construction(self):
        with pytest.raises(re.error):
            strings.pattern("(")

    def test_one_of(self):
        action = strings.one_of("red", "green")
        assert action.run("red").is_ok()
        assert failure(action.run("blue")).message == "value is not allowed"

    def test_affixes(self):
        assert strings.has_prefix("foo").run("foobar").is_ok()
        assert failure(strings.has_prefix("foo").run("bar")).message == "must start with foo"
        assert strings.has_suffix("bar").run("foobar").is_ok()
        assert failure(strings.has_suffix("bar").run("foo")).message == "must end with bar"
        assert strings.contains("ob").run("foobar").is_ok()
        assert failure(strings.contains("zz").run("foo")).message == "must contain zz"

    def test_equal_fold(self):
        assert strings.equal_fold("Straße").run("STRASSE").is_ok()
        error = failure(strings.equal_fold("Go").run("rust"))
        assert error.message == "must be equal to Go (case-insensitive)"

    def test_format_actions(self):
        assert strings.is_email().run("user@example.com").is_ok()
        error = failure(strings.is_email().run("not-an-email"))
        assert error.message == "not a valid email"
        assert error.code is ErrorCode.E2002_INVALID_FORMAT
        assert error.metadata["constraint"] == "email"

    def test_format_check_with_stand_in(self, accept_all, reject_all):
        assert strings.format_check(accept_all, "never shown").run("x").is_ok()
        assert failure(strings.format_check(reject_all, "rejected").run("x")).message == "rejected"

    def test_time_layout_action(self):
        assert strings.is_rfc3339().run("2024-06-12T12:00:00Z").is_ok()
        assert strings.is_rfc3339().run("yesterday").is_err()

    def test_custom(self):
        assert failure(strings.custom(str.isupper).run("abc")).message == "invalid string"

    def test_template_renders_string(self):
        action = strings.is_uuid(message="{VALUE} is not a UUID")
        assert failure(action.run("abc")).message == "abc is not a UUID"


class TestTimeActions:
    def test_before_after_strict(self, fixed_now):
        assert times.before(fixed_now).run(fixed_now).is_err()
        assert times.after(fixed_now).run(fixed_now).is_err()
        assert times.before(fixed_now).run(fixed_now - timedelta(seconds=1)).is_ok()
        assert times.after(fixed_now).run(fixed_now + timedelta(seconds=1)).is_ok()

    def test_before_message(self, fixed_now):
        error = failure(times.before(fixed_now).run(fixed_now))
        assert error.message == f"time must be before {fixed_now}"

    def test_between_is_exclusive(self, fixed_now):
        start, end = fixed_now, fixed_now + timedelta(days=1)
        action = times.between(start, end)
        assert action.run(start).is_err()
        assert action.run(end).is_err()
        assert action.run(start + timedelta(hours=1)).is_ok()

    def test_min_max_inclusive(self, fixed_now):
        assert times.min_date(fixed_now).run(fixed_now).is_ok()
        assert times.max_date(fixed_now).run(fixed_now).is_ok()
        assert times.min_date(fixed_now).run(fixed_now - timedelta(days=1)).is_err()

    def test_equal_compares_instants(self, fixed_now):
        shifted = fixed_now.astimezone(timezone(timedelta(hours=5)))
        assert times.equal(fixed_now).run(shifted).is_ok()
        assert times.not_equal(fixed_now).run(shifted).is_err()

    def test_naive_against_aware_fails(self, fixed_now):
        error = failure(times.before(fixed_now).run(datetime(2020, 1, 1)))
        assert "exception" in error.metadata

    def test_before_after_now(self, clock, fixed_now):
        assert times.before_now(clock=clock).run(fixed_now - timedelta(minutes=1)).is_ok()
        assert failure(times.before_now(clock=clock).run(fixed_now)).message == "time must be in the past"
        assert times.after_now(clock=clock).run(fixed_now + timedelta(minutes=1)).is_ok()

    def test_now_read_in_value_zone(self, clock, fixed_now):
        naive = fixed_now.replace(tzinfo=None) - timedelta(minutes=1)
        assert times.before_now(clock=clock).run(naive).is_ok()

    def test_old_of(self, clock, fixed_now):
        action = times.old_of(3, clock=clock)
        assert action.run(fixed_now - timedelta(days=4)).is_ok()
        error = failure(action.run(fixed_now - timedelta(days=2)))
        assert error.message == "time must be at least 3 days old"

    def test_old_of_boundary_is_exclusive(self, clock, fixed_now):
        action = times.old_of(3, clock=clock)
        assert action.run(fixed_now - timedelta(days=3)).is_err()
        assert action.run(fixed_now - timedelta(days=3, seconds=1)).is_ok()

    def test_new_of_boundary_is_exclusive(self, clock, fixed_now):
        action = times.new_of(3, clock=clock)
        assert action.run(fixed_now + timedelta(days=3)).is_err()
        assert action.run(fixed_now + timedelta(days=3, seconds=1)).is_ok()

    def test_new_of(self, clock, fixed_now):
        action = times.new_of(2, clock=clock)
        assert action.run(fixed_now + timedelta(days=3)).is_ok()
        assert failure(action.run(fixed_now + timedelta(days=1))).message == "time must be at least 2 days in the future"

    def test_negative_days_clamp_to_zero(self, clock):
        assert times.old_of(-5, clock=clock).days == 0
        assert times.new_of(-1, clock=clock).description == "time must be at least 0 days in the future"

    def test_same_day_uses_calendar_fields(self):
        reference = datetime(2024, 6, 12, 0, 5)
        assert times.same_day(reference).run(datetime(2024, 6, 12, 23, 59)).is_ok()
        assert times.same_day(reference).run(datetime(2024, 6, 13, 0, 0)).is_err()

    def test_same_week_is_iso(self):
        # ISO week 2025-W01 starts on Monday 2024-12-30
        reference = datetime(2024, 12, 30)
        assert times.same_week(reference).run(datetime(2025, 1, 1)).is_ok()
        assert times.same_week(reference).run(datetime(2024, 12, 29)).is_err()

    def test_same_month_and_year(self):
        reference = datetime(2024, 6, 1)
        assert times.same_month(reference).run(datetime(2024, 6, 30)).is_ok()
        assert times.same_month(reference).run(datetime(2023, 6, 1)).is_err()
        assert times.same_year(reference).run(datetime(2024, 12, 31)).is_ok()

    def test_is_weekday(self, fixed_now):
        assert times.is_weekday().run(fixed_now).is_ok()
        saturday = fixed_now + timedelta(days=3)
        assert failure(times.is_weekday().run(saturday)).message == "time must fall on a weekday (Monday-Friday)"

    def test_not_zero(self, fixed_now):
        assert times.not_zero().run(datetime.min).is_err()
        assert times.not_zero().run(fixed_now).is_ok()

    def test_valid_timezone(self):
        assert times.valid_timezone().run(datetime(2024, 1, 1)).is_ok()
        east = datetime(2024, 1, 1, tzinfo=timezone(timedelta(hours=14)))
        assert times.valid_timezone().run(east).is_ok()
        too_far = datetime(2024, 1, 1, tzinfo=timezone(timedelta(hours=14, minutes=30)))
        assert times.valid_timezone().run(too_far).is_err()
        west = datetime(2024, 1, 1, tzinfo=timezone(timedelta(hours=-12)))
        assert times.valid_timezone().run(west).is_ok()

    def test_template_keeps_placeholder_for_datetime(self, fixed_now):
        action = times.after(fixed_now, message="{VALUE} is too early")
        assert failure(action.run(fixed_now)).message == "{VALUE} is too early"

    def test_custom(self, fixed_now):
        assert failure(times.custom(lambda t: False).run(fixed_now)).message == "invalid time"
