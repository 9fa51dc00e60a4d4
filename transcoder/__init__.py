"""
transcoder: applicative combinators for pure structure-to-structure transforms.

A transcoder is a plain callable ``I -> Result[O]`` where ``Result`` is
either ``Success(value)`` or ``Failure(message)``. Transcoders never raise
for bad input; they return exactly one error string per run.

Public API surface:

- ``run``, ``succeed`` / ``transcode_to``, ``fail``, ``map``, ``and_map``,
  ``and_then`` -- the core combinators.
- ``map2`` .. ``map7`` -- fixed-arity combination, failing left-to-right.
- ``supply``, ``hardcoded``, ``supply_result``, ``supply_maybe`` -- record
  pipelines built on ``and_map``.
- ``load_record_spec`` + ``compile_record`` -- declarative record
  transcoders from YAML.
- ``transcode_frame`` -- apply a transcoder row by row to a DataFrame.

Example::

    from transcoder import attempt, field, record, run, supply, supply_result, transcode_to

    to_person = supply_result(
        lambda d: run(attempt(int), d["age"]),
        supply(field("name"), transcode_to(record(dict, "name", "age"))),
    )
    run(to_person, {"name": "Alice", "age": "22"})
    # Success(value={'name': 'Alice', 'age': 22})
"""

from __future__ import annotations

from transcoder.combine import map2, map3, map4, map5, map6, map7
from transcoder.config import (
    FieldSpec,
    RecordSpec,
    load_record_spec,
    record_spec_from_dict,
    save_record_spec,
)
from transcoder.core import (
    Transcoder,
    and_map,
    and_then,
    attempt,
    curry,
    fail,
    from_result,
    map,
    map_error,
    record,
    run,
    succeed,
    transcode_to,
)
from transcoder.exceptions import ConfigValidationError, TranscoderError, UnwrapError
from transcoder.frame import BatchResult, FrameResult, transcode_frame, transcode_many
from transcoder.pipeline import (
    field,
    hardcoded,
    optional_field,
    supply,
    supply_maybe,
    supply_result,
)
from transcoder.records import compile_record
from transcoder.result import Failure, Result, Success, from_optional

__version__ = "0.1.0"

__all__ = [
    "BatchResult",
    "ConfigValidationError",
    "Failure",
    "FieldSpec",
    "FrameResult",
    "RecordSpec",
    "Result",
    "Success",
    "Transcoder",
    "TranscoderError",
    "UnwrapError",
    "and_map",
    "and_then",
    "attempt",
    "compile_record",
    "curry",
    "fail",
    "field",
    "from_optional",
    "from_result",
    "hardcoded",
    "load_record_spec",
    "map",
    "map2",
    "map3",
    "map4",
    "map5",
    "map6",
    "map7",
    "map_error",
    "optional_field",
    "record",
    "record_spec_from_dict",
    "run",
    "save_record_spec",
    "succeed",
    "supply",
    "supply_maybe",
    "supply_result",
    "transcode_frame",
    "transcode_many",
    "transcode_to",
]
