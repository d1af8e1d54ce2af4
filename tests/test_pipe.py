"""Tests for typed pipes."""

from datetime import datetime

import pytest

from valpipe.core.errors import ErrorCode
from valpipe.validation import (
    Entry,
    ErrorMessage,
    FloatPipe,
    IntPipe,
    StringPipe,
    TimePipe,
    ValidationError,
    ints,
    strings,
)


class TestConstruction:
    def test_string_pipe_rejects_non_str(self):
        with pytest.raises(TypeError):
            StringPipe(1)

    def test_int_pipe_rejects_bool(self):
        with pytest.raises(TypeError):
            IntPipe(True)

    def test_int_pipe_rejects_float(self):
        with pytest.raises(TypeError):
            IntPipe(1.5)

    def test_float_pipe_accepts_int(self):
        pipe = FloatPipe(3)
        assert pipe.value == 3.0
        assert isinstance(pipe.value, float)

    def test_time_pipe_rejects_string(self):
        with pytest.raises(TypeError):
            TimePipe("2024-01-01")

    def test_key_defaults_to_empty(self):
        assert StringPipe("x").key == ""

    def test_actions_are_a_tuple(self):
        pipe = IntPipe(1, ints.gt(0), ints.lt(5))
        assert isinstance(pipe.actions, tuple)
        assert len(pipe.actions) == 2


class TestValidate:
    def test_no_actions_never_fails(self):
        assert StringPipe("").validate() is None
        assert IntPipe(-1).validate() is None

    def test_all_pass(self):
        assert IntPipe(10, ints.gt(0), ints.lt(20)).validate() is None

    def test_reports_first_failure_only(self):
        error = IntPipe(50, ints.gt(0), ints.lt(20), ints.max_value(10)).validate()
        assert isinstance(error, ValidationError)
        assert error.message == "value must be less than specified value"

    def test_stops_at_first_failure(self, call_log):
        pipe = IntPipe(5, ints.custom(call_log(False)), ints.custom(call_log(True)))
        pipe.validate()
        assert call_log.seen == [5]

    def test_runs_every_action_when_passing(self, call_log):
        IntPipe(5, ints.custom(call_log()), ints.custom(call_log())).validate()
        assert call_log.seen == [5, 5]

    def test_error_carries_key(self):
        error = Entry("age").int(3, ints.min_value(18)).validate()
        assert error.key == "age"
        assert error.code is ErrorCode.E2003_OUT_OF_RANGE

    def test_unkeyed_error_has_empty_key(self):
        assert IntPipe(3, ints.min_value(18)).validate().key == ""

    def test_message_policy_is_noop_action(self):
        assert StringPipe("x", ErrorMessage("never")).validate() is None

    def test_repeatable(self):
        pipe = StringPipe("", strings.not_empty())
        first, second = pipe.validate(), pipe.validate()
        assert first.to_dict() == second.to_dict()


class TestScenarios:
    def test_valid_email(self):
        pipe = StringPipe("user@example.com", strings.not_empty(), strings.is_email())
        assert pipe.validate() is None

    def test_empty_email_reports_not_empty_only(self, call_log):
        pipe = StringPipe("", strings.not_empty(), strings.format_check(call_log(False), "bad address"))
        error = pipe.validate()
        assert error.message == "cannot be empty"
        assert call_log.seen == []


class TestEntry:
    def test_builders_key_pipes(self):
        assert isinstance(Entry("a").string("x"), StringPipe)
        assert isinstance(Entry("b").int(1), IntPipe)
        assert isinstance(Entry("c").float(1.0), FloatPipe)
        assert isinstance(Entry("d").time(datetime(2024, 1, 1)), TimePipe)
        assert Entry("c").float(2).key == "c"

    def test_builder_type_checks(self):
        with pytest.raises(TypeError):
            Entry("a").string(None)
