"""
Demo script: transcode a CSV file with a YAML record spec.

Usage:
    python scripts/run_transcode.py SPEC.yaml INPUT.csv [OUTPUT.csv]

Every CSV cell is read as a string; the record spec decides how each field
is parsed. Successful rows are written to OUTPUT.csv (or printed), failed
rows are logged with their error message.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pandas as pd

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_transcode")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str]) -> int:
    from transcoder import compile_record, load_record_spec, transcode_frame

    if len(argv) not in (2, 3):
        log.error("usage: run_transcode.py SPEC.yaml INPUT.csv [OUTPUT.csv]")
        return 2

    spec_path, input_path = argv[0], argv[1]
    output_path = argv[2] if len(argv) == 3 else None

    if not Path(input_path).exists():
        log.error("Input file not found: %s", input_path)
        return 1

    spec = load_record_spec(spec_path)
    to_record = compile_record(spec)

    log.info("=" * 70)
    log.info("Record spec : %s (%s)", spec.name, spec_path)
    log.info("Input       : %s", input_path)
    log.info("=" * 70)

    df = pd.read_csv(input_path, dtype=str, keep_default_na=False, na_values=[""])
    result = transcode_frame(to_record, df)

    for row, error in result.failures.itertuples(index=False):
        log.warning("  row %s: %s", row, error)

    if output_path is not None:
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        result.df.to_csv(output_path, index=False)
        log.info("Wrote %d row(s) to %s", len(result.df), output_path)
    else:
        print(result.df.to_string())

    log.info("Done: %d/%d row(s) ok", result.rows_total - result.rows_failed, result.rows_total)
    return 0 if result.rows_failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
