"""
Shared test fixtures for transcoder tests.

The record spec and rows below describe the "person" example used across
unit and integration tests: ``{"name": "Alice", "age": "22"}`` becomes
``{"name": "Alice", "age": 22}``.
"""

from __future__ import annotations

import pytest

PERSON_SPEC = {
    "name": "person",
    "description": "A person record read from string-valued input",
    "fields": [
        {"name": "name"},
        {"name": "age", "parse": "int"},
        {"name": "nickname", "source": "nick", "required": False, "default": "n/a"},
        {"name": "country", "constant": "KR"},
    ],
}

PERSON_YAML = """\
name: person
description: A person record read from string-valued input
fields:
  - name: name
  - name: age
    parse: int
  - name: nickname
    source: nick
    required: false
    default: n/a
  - name: country
    constant: KR
"""


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs the YAML -> DataFrame workflow)",
    )


@pytest.fixture
def person_spec_dict() -> dict:
    """A fresh copy of the person spec mapping."""
    return {**PERSON_SPEC, "fields": [dict(f) for f in PERSON_SPEC["fields"]]}


@pytest.fixture
def person_spec_path(tmp_path):
    """The person spec written to a YAML file."""
    path = tmp_path / "person.yaml"
    path.write_text(PERSON_YAML, encoding="utf-8")
    return path
