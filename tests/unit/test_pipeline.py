"""
Unit tests for record pipelines (transcoder.pipeline).

Includes the end-to-end person example: a record constructor is started
with transcode_to, ``name`` is supplied directly and ``age`` goes through a
string-to-int parse that may fail.
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from transcoder.core import and_then, attempt, fail, record, run, succeed, transcode_to
from transcoder.pipeline import (
    field,
    hardcoded,
    optional_field,
    supply,
    supply_maybe,
    supply_result,
)
from transcoder.result import Failure, Success


def _identity(value):
    return value


@dataclass(frozen=True)
class Person:
    name: str
    age: int


def _parse_age(value):
    return run(attempt(int), value["age"])


def _person_pipeline(constructor=None):
    if constructor is None:
        constructor = record(dict, "name", "age")
    return supply_result(
        _parse_age,
        supply(field("name"), transcode_to(constructor)),
    )


# ---------------------------------------------------------------------------
# End-to-end
# ---------------------------------------------------------------------------

class TestPersonPipeline:
    """The person example, end to end."""

    def test_success(self):
        result = run(_person_pipeline(), {"name": "Alice", "age": "22"})
        assert result == Success({"name": "Alice", "age": 22})

    def test_parse_failure(self):
        result = run(_person_pipeline(), {"name": "Alice", "age": "twenty"})
        assert result.is_failure()
        assert "twenty" in result.error

    def test_dataclass_constructor(self):
        t = _person_pipeline(record(Person, "name", "age"))
        assert run(t, {"name": "Bob", "age": "40"}) == Success(Person("Bob", 40))

    def test_pipeline_is_reusable(self):
        t = _person_pipeline()
        assert run(t, {"name": "A", "age": "1"}) == Success({"name": "A", "age": 1})
        assert run(t, {"name": "B", "age": "2"}) == Success({"name": "B", "age": 2})

    def test_first_supplied_failure_wins(self):
        t = supply_result(
            fail("age is bad"),
            supply_result(fail("name is bad"), transcode_to(record(dict, "name", "age"))),
        )
        assert run(t, {}) == Failure("name is bad")


# ---------------------------------------------------------------------------
# Individual steps
# ---------------------------------------------------------------------------

class TestSupply:
    """Tests for supply()."""

    def test_supplies_extracted_value(self):
        assert run(supply(len, succeed(_identity)), "abc") == Success(3)

    def test_fails_only_when_pipeline_fails(self):
        assert run(supply(len, fail("pipeline")), "abc") == Failure("pipeline")

    def test_extractor_not_called_when_pipeline_fails(self):
        calls = []
        run(supply(calls.append, fail("pipeline")), "abc")
        assert calls == []


class TestHardcoded:
    """Tests for hardcoded()."""

    def test_supplies_constant(self):
        t = hardcoded("KR", supply(field("name"), transcode_to(record(dict, "name", "country"))))
        assert run(t, {"name": "Alice"}) == Success({"name": "Alice", "country": "KR"})

    def test_ignores_input(self):
        t = hardcoded(7, succeed(_identity))
        assert run(t, None) == run(t, "x") == Success(7)


class TestSupplyResult:
    """Tests for supply_result()."""

    def test_success(self):
        assert run(supply_result(succeed(5), succeed(_identity)), None) == Success(5)

    def test_argument_failure(self):
        assert run(supply_result(fail("bad"), succeed(_identity)), None) == Failure("bad")

    def test_accepts_and_then_chains(self):
        non_empty = and_then(
            lambda name: succeed(name) if name else fail("name is empty"),
            lambda d: Success(d["name"]),
        )
        t = supply_result(non_empty, succeed(_identity))
        assert run(t, {"name": ""}) == Failure("name is empty")
        assert run(t, {"name": "Al"}) == Success("Al")


class TestSupplyMaybe:
    """Tests for supply_maybe()."""

    def test_absent_maps_to_error(self):
        t = supply_maybe(optional_field("nick"), "E", succeed(_identity))
        assert run(t, {}) == Failure("E")

    def test_present_value_is_supplied(self):
        t = supply_maybe(optional_field("nick"), "E", succeed(_identity))
        assert run(t, {"nick": "Al"}) == Success("Al")

    def test_explicit_none_is_absent(self):
        t = supply_maybe(optional_field("nick"), "E", succeed(_identity))
        assert run(t, {"nick": None}) == Failure("E")

    @pytest.mark.parametrize("falsy", ["", 0, False])
    def test_falsy_values_are_present(self, falsy):
        t = supply_maybe(lambda d: d, "E", succeed(_identity))
        assert run(t, falsy) == Success(falsy)

    def test_pipeline_failure_wins(self):
        t = supply_maybe(lambda d: None, "absent", fail("pipeline"))
        assert run(t, None) == Failure("pipeline")


class TestExtractors:
    """Tests for field() and optional_field()."""

    def test_field(self):
        assert field("a")({"a": 1}) == 1

    def test_field_sequence_index(self):
        assert field(1)(["x", "y"]) == "y"

    def test_field_missing_key_raises(self):
        with pytest.raises(KeyError):
            field("a")({})

    def test_optional_field_default(self):
        assert optional_field("a")({}) is None
        assert optional_field("a", 0)({}) == 0
