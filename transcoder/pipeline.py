"""
Record-building pipelines for transcoder.

A pipeline starts from a curried constructor wrapped in ``transcode_to`` and
fills one argument per step::

    to_person = supply_result(
        parse_age,
        supply(field("name"), transcode_to(record(Person, "name", "age"))),
    )

Every step is ``and_map`` underneath. The pipeline built so far is evaluated
before the value being supplied, so failures surface in the order the
fields were supplied: the first supplied field that fails wins.

Step kinds:
- supply: a total extractor that cannot fail.
- hardcoded: a constant not derived from the input.
- supply_result: a transcoder that may fail.
- supply_maybe: an extractor returning ``None`` for absence, with the error
  message to report when the value is missing.
"""

from __future__ import annotations

from typing import Any, Callable, Hashable

from transcoder.core import Transcoder, and_map, succeed
from transcoder.result import Success, from_optional


def supply(extractor: Callable[[Any], Any], pipeline: Transcoder) -> Transcoder:
    """Supply the next argument from a total, always-succeeding *extractor*."""
    return and_map(lambda value: Success(extractor(value)), pipeline)


def hardcoded(value: Any, pipeline: Transcoder) -> Transcoder:
    """Supply a constant argument that ignores the input."""
    return and_map(succeed(value), pipeline)


def supply_result(arg_transcoder: Transcoder, pipeline: Transcoder) -> Transcoder:
    """Supply the next argument from a transcoder that may itself fail."""
    return and_map(arg_transcoder, pipeline)


def supply_maybe(
    to_optional: Callable[[Any], Any],
    error: str,
    pipeline: Transcoder,
) -> Transcoder:
    """Supply the next argument from an extractor that may find nothing.

    ``None`` returned by *to_optional* means absence and fails the pipeline
    with *error*; any other value is supplied as-is.
    """
    return supply_result(lambda value: from_optional(to_optional(value), error), pipeline)


# ---------------------------------------------------------------------------
# Extractors for mapping-shaped inputs
# ---------------------------------------------------------------------------

def field(key: Hashable) -> Callable[[Any], Any]:
    """Total extractor reading ``value[key]``; use with ``supply``.

    The key must be present: a missing key is a programming error and
    raises ``KeyError``. Use ``optional_field`` with ``supply_maybe`` for
    keys that may be absent.
    """
    return lambda value: value[key]


def optional_field(key: Hashable, default: Any = None) -> Callable[[Any], Any]:
    """Extractor reading ``value.get(key, default)``; use with ``supply_maybe``."""
    return lambda value: value.get(key, default)
