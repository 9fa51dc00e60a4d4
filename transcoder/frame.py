"""
Batch application of transcoders for transcoder.

Runs a transcoder over many inputs, each invocation independent of the
others. Failures are collected per input and never raised, so one bad row
does not stop a batch.

- transcode_many(): any iterable of inputs -> BatchResult.
- transcode_frame(): a pandas DataFrame, row by row -> FrameResult, with the
  successful outputs as a new DataFrame and the failures as another.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

import pandas as pd

from transcoder.core import Transcoder
from transcoder.result import Failure

logger = logging.getLogger(__name__)

FAILURE_COLUMNS = ["row", "error"]


@dataclass
class BatchResult:
    """Output of ``transcode_many``.

    Attributes:
        outputs: Successful outputs, in input order.
        failures: ``(position, message)`` for every failed input.
        total: Number of inputs processed.
    """

    outputs: list[Any] = field(default_factory=list)
    failures: list[tuple[int, str]] = field(default_factory=list)
    total: int = 0

    @property
    def ok(self) -> bool:
        return not self.failures


@dataclass
class FrameResult:
    """Output of ``transcode_frame``.

    Attributes:
        df: One row per successful input row, original index kept.
        failures: DataFrame with columns ``row`` (original index label) and
            ``error``. Empty when every row succeeded.
        rows_total: Number of input rows.
        rows_failed: Number of rows that failed.
    """

    df: pd.DataFrame
    failures: pd.DataFrame
    rows_total: int
    rows_failed: int


def transcode_many(transcoder: Transcoder, inputs: Iterable[Any]) -> BatchResult:
    """Run *transcoder* on every input and collect successes and failures."""
    result = BatchResult()
    for position, value in enumerate(inputs):
        outcome = transcoder(value)
        if isinstance(outcome, Failure):
            result.failures.append((position, outcome.error))
        else:
            result.outputs.append(outcome.value)
        result.total += 1

    logger.info(
        "Transcoded %d input(s): %d ok, %d failed",
        result.total,
        len(result.outputs),
        len(result.failures),
    )
    return result


def transcode_frame(transcoder: Transcoder, df: pd.DataFrame) -> FrameResult:
    """Run a mapping transcoder over each row of *df*.

    Each row is passed as a ``dict`` of column -> value. Missing cells
    (``NaN``/``None``) are passed as ``None`` so that ``supply_maybe`` and
    optional record fields treat them as absent.

    The transcoder must produce mappings (e.g. a compiled record spec) for
    the outputs to form a DataFrame.

    Args:
        transcoder: A ``Transcoder[Mapping, Mapping]``.
        df: Input rows.

    Returns:
        FrameResult with the output rows, failures and row counts.
    """
    cleaned = df.astype(object).where(df.notna(), None)
    labels = list(cleaned.index)
    batch = transcode_many(transcoder, cleaned.to_dict(orient="records"))

    failed_positions = {position for position, _error in batch.failures}
    ok_labels = [label for position, label in enumerate(labels) if position not in failed_positions]

    if batch.outputs:
        out = pd.DataFrame(batch.outputs, index=ok_labels)
    else:
        out = pd.DataFrame(index=pd.Index(ok_labels, dtype=df.index.dtype))

    failures = pd.DataFrame(
        [(labels[position], error) for position, error in batch.failures],
        columns=FAILURE_COLUMNS,
    )

    if batch.failures:
        logger.info(
            "  Rows: %d total, %d failed (first: row %s -- %s)",
            batch.total,
            len(batch.failures),
            failures["row"].iloc[0],
            failures["error"].iloc[0],
        )

    return FrameResult(
        df=out,
        failures=failures,
        rows_total=batch.total,
        rows_failed=len(batch.failures),
    )
