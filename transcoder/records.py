"""
Record spec compiler for transcoder.

Turns a validated ``RecordSpec`` into a ``Transcoder[Mapping, dict]`` using
the pipeline steps. The compiled pipeline is:

1. ``transcode_to(record(dict, *field_names))`` -- curried dict builder.
2. One step per field, in declaration order:
   - constant field -> ``hardcoded``
   - required field -> ``supply_maybe`` on the input key, then parse
   - optional field -> the default when absent, otherwise parse

Errors surface in field declaration order, one message per record.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from transcoder.config import FieldSpec, RecordSpec
from transcoder.core import Transcoder, and_then, from_result, map_error, record, transcode_to
from transcoder.pipeline import hardcoded, optional_field, supply_maybe, supply_result
from transcoder.result import Failure, Result, Success

logger = logging.getLogger(__name__)

_TRUE_WORDS = frozenset({"true", "yes", "y", "1", "on"})
_FALSE_WORDS = frozenset({"false", "no", "n", "0", "off"})


# ---------------------------------------------------------------------------
# Scalar parsers
# ---------------------------------------------------------------------------

def _parse_raw(value: Any) -> Result[Any]:
    return Success(value)


def _parse_str(value: Any) -> Result[str]:
    return Success(value if isinstance(value, str) else str(value))


def _parse_int(value: Any) -> Result[int]:
    if isinstance(value, bool):
        return Failure("booleans are not integers")
    if isinstance(value, int):
        return Success(value)
    if isinstance(value, float):
        if value.is_integer():
            return Success(int(value))
        return Failure("float has a fractional part")
    try:
        return Success(int(str(value).strip()))
    except ValueError:
        return Failure("not an integer")


def _parse_float(value: Any) -> Result[float]:
    if isinstance(value, bool):
        return Failure("booleans are not numbers")
    try:
        return Success(float(value if isinstance(value, (int, float)) else str(value).strip()))
    except ValueError:
        return Failure("not a number")


def _parse_bool(value: Any) -> Result[bool]:
    if isinstance(value, bool):
        return Success(value)
    word = str(value).strip().lower()
    if word in _TRUE_WORDS:
        return Success(True)
    if word in _FALSE_WORDS:
        return Success(False)
    return Failure(f"expected one of {sorted(_TRUE_WORDS | _FALSE_WORDS)}")


SCALAR_PARSERS: dict[str, Callable[[Any], Result[Any]]] = {
    "raw": _parse_raw,
    "str": _parse_str,
    "int": _parse_int,
    "float": _parse_float,
    "bool": _parse_bool,
}


def parse_value(spec: FieldSpec, value: Any) -> Result[Any]:
    """Parse one raw input value according to ``spec.parse``.

    Parser failures are rewritten to name the field::

        Field 'age': cannot parse 'twenty' as int: not an integer
    """
    result = SCALAR_PARSERS[spec.parse](value)
    if isinstance(result, Failure):
        return Failure(
            f"Field '{spec.name}': cannot parse {value!r} as {spec.parse}: {result.error}"
        )
    return result


# ---------------------------------------------------------------------------
# Compilation
# ---------------------------------------------------------------------------

def _field_transcoder(spec: FieldSpec) -> Transcoder:
    """Transcoder reading and parsing a single input-driven field."""
    key = spec.input_key

    def _parse(raw: Any) -> Transcoder:
        return from_result(parse_value(spec, raw))

    if spec.required:
        present = supply_maybe(optional_field(key), spec.absence_error, transcode_to(lambda raw: raw))
        return and_then(_parse, present)

    def _optional(value: Any) -> Result[Any]:
        raw = value.get(key)
        if raw is None:
            return Success(spec.default)
        return parse_value(spec, raw)

    return _optional


def compile_field(spec: FieldSpec, pipeline: Transcoder) -> Transcoder:
    """Supply one field of a record into *pipeline*."""
    if spec.is_constant:
        return hardcoded(spec.constant, pipeline)
    return supply_result(_field_transcoder(spec), pipeline)


def compile_record(spec: RecordSpec) -> Transcoder:
    """Compile a RecordSpec into a ``Transcoder[Mapping, dict]``.

    Non-mapping inputs fail with a message naming the record instead of
    raising ``AttributeError`` inside a field step.
    """
    pipeline = transcode_to(record(dict, *spec.field_names))
    for field_spec in spec.fields:
        pipeline = compile_field(field_spec, pipeline)
    logger.debug("Compiled record '%s' with fields %s", spec.name, spec.field_names)

    body = map_error(lambda error: f"{spec.name}: {error}", pipeline)

    def _record(value: Any) -> Result[dict[str, Any]]:
        if not hasattr(value, "get"):
            return Failure(f"{spec.name}: expected a mapping, got {type(value).__name__}")
        return body(value)

    return _record
