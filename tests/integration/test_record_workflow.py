"""
Integration tests: record spec workflow.

Tests the full cycle: YAML spec on disk -> compile_record() -> apply to a
CSV-derived DataFrame -> edit spec -> recompile. Everything is written to
pytest's tmp_path, so no input files are required.
"""

from __future__ import annotations

import pandas as pd
import pytest

PEOPLE_CSV = """\
name,age,nick
Alice,22,
Bob,twenty,Bobby
,31,
Dana,45,D
"""


def _read_people(tmp_path) -> pd.DataFrame:
    path = tmp_path / "people.csv"
    path.write_text(PEOPLE_CSV, encoding="utf-8")
    return pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[""])


@pytest.mark.integration
class TestRecordWorkflow:
    """Tests for the spec-first workflow via the public API."""

    def test_yaml_to_frame(self, tmp_path, person_spec_path):
        from transcoder import compile_record, load_record_spec, transcode_frame

        to_person = compile_record(load_record_spec(person_spec_path))
        result = transcode_frame(to_person, _read_people(tmp_path))

        assert result.rows_total == 4
        assert result.rows_failed == 2
        assert result.df.to_dict(orient="records") == [
            {"name": "Alice", "age": 22, "nickname": "n/a", "country": "KR"},
            {"name": "Dana", "age": 45, "nickname": "D", "country": "KR"},
        ]
        assert result.failures.to_dict(orient="records") == [
            {"row": 1, "error": "person: Field 'age': cannot parse 'twenty' as int: not an integer"},
            {"row": 2, "error": "person: Missing required field 'name'"},
        ]

    def test_edit_spec_and_recompile(self, tmp_path, person_spec_path):
        """Relaxing a field in the YAML changes the compiled transcoder."""
        from transcoder import (
            FieldSpec,
            compile_record,
            load_record_spec,
            save_record_spec,
            transcode_frame,
        )

        spec = load_record_spec(person_spec_path)
        spec.fields[0] = FieldSpec(name="name", required=False, default="anonymous")
        spec.fields[1] = FieldSpec(name="age", parse="str")
        edited_path = tmp_path / "person_relaxed.yaml"
        save_record_spec(spec, edited_path)

        to_person = compile_record(load_record_spec(edited_path))
        result = transcode_frame(to_person, _read_people(tmp_path))

        assert result.rows_failed == 0
        assert result.df["name"].tolist() == ["Alice", "Bob", "anonymous", "Dana"]
        assert result.df["age"].tolist() == ["22", "twenty", "31", "45"]

    def test_compiled_record_matches_hand_written_pipeline(self, person_spec_path):
        """A compiled spec behaves like the equivalent hand-written pipeline."""
        from transcoder import (
            Success,
            and_then,
            compile_record,
            field,
            from_result,
            hardcoded,
            load_record_spec,
            optional_field,
            record,
            run,
            supply,
            supply_result,
            transcode_to,
        )
        from transcoder.records import SCALAR_PARSERS

        hand_written = hardcoded(
            "KR",
            supply(
                lambda row: row.get("nick") or "n/a",
                supply_result(
                    and_then(
                        lambda raw: from_result(SCALAR_PARSERS["int"](raw)),
                        lambda row: Success(optional_field("age")(row)),
                    ),
                    supply(
                        field("name"),
                        transcode_to(record(dict, "name", "age", "nickname", "country")),
                    ),
                ),
            ),
        )
        compiled = compile_record(load_record_spec(person_spec_path))

        row = {"name": "Alice", "age": "22", "nick": None}
        assert run(compiled, row) == run(hand_written, row)
