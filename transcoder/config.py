"""
Record spec models and YAML I/O for transcoder.

A record spec is a declarative description of a mapping-to-dict transcoder:
which output fields exist, which input key each one reads, how the raw value
is parsed, and what happens when it is missing. ``records.compile_record``
turns a validated spec into a transcoder built from pipeline steps.

Key models:
- RecordSpec: Top-level spec (name + ordered list of fields).
- FieldSpec: One output field.

Key functions:
- load_record_spec(path) -> RecordSpec: Load and validate from YAML.
- save_record_spec(spec, path): Serialize to YAML.
- record_spec_from_dict(raw) -> RecordSpec: Validate an in-memory mapping.

Example ``person.yaml``::

    name: person
    fields:
      - name: name
      - name: age
        parse: int
      - name: nickname
        source: nick
        required: false
      - name: country
        constant: KR
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, model_validator

from transcoder.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

ParseKind = Literal["raw", "str", "int", "float", "bool"]


class FieldSpec(BaseModel):
    """One output field of a record.

    A field is either **input-driven** (``source`` / ``parse`` /
    ``required`` / ``default`` / ``missing_error``) or a **constant**
    (``constant`` only). ``constant: null`` is a valid constant, so the
    distinction is made on which keys were given, not on their values.
    """

    name: str = Field(..., min_length=1, description="Output key")
    source: str | None = Field(None, description="Input key; defaults to name")
    parse: ParseKind = Field("raw", description="How to parse the raw input value")
    required: bool = Field(True, description="If True, absence fails the record")
    default: Any = Field(None, description="Value used when an optional field is absent")
    missing_error: str | None = Field(
        None, description="Failure message for a missing required field"
    )
    constant: Any = Field(None, description="Hardcoded value; ignores the input")

    @model_validator(mode="after")
    def _check_constant_is_exclusive(self) -> FieldSpec:
        """A constant field must not also configure how to read the input."""
        if "constant" not in self.model_fields_set:
            return self
        clashing = sorted(
            self.model_fields_set & {"source", "parse", "required", "default", "missing_error"}
        )
        if clashing:
            raise ValueError(
                f"Field '{self.name}' sets 'constant' together with {clashing}. "
                "A constant field ignores the input."
            )
        return self

    @model_validator(mode="after")
    def _check_options_match_required(self) -> FieldSpec:
        """``default`` only applies to optional fields, ``missing_error`` only to required ones."""
        if self.required and "default" in self.model_fields_set:
            raise ValueError(
                f"Field '{self.name}' is required but sets 'default'. "
                "Set 'required: false' to fall back to a default."
            )
        if not self.required and "missing_error" in self.model_fields_set:
            raise ValueError(
                f"Field '{self.name}' is optional but sets 'missing_error'. "
                "An optional field never fails when absent."
            )
        return self

    @property
    def is_constant(self) -> bool:
        return "constant" in self.model_fields_set

    @property
    def input_key(self) -> str:
        return self.source if self.source is not None else self.name

    @property
    def absence_error(self) -> str:
        if self.missing_error is not None:
            return self.missing_error
        return f"Missing required field '{self.input_key}'"


class RecordSpec(BaseModel):
    """Top-level record spec. Maps 1:1 to a record spec YAML file."""

    name: str = Field(..., min_length=1)
    description: str = ""
    fields: list[FieldSpec] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _check_unique_field_names(self) -> RecordSpec:
        """Validate that no two fields write the same output key."""
        seen: set[str] = set()
        duplicates: list[str] = []
        for spec in self.fields:
            if spec.name in seen:
                duplicates.append(spec.name)
            seen.add(spec.name)
        if duplicates:
            raise ValueError(
                f"Record '{self.name}' has duplicate field names: {duplicates}"
            )
        return self

    @property
    def field_names(self) -> list[str]:
        return [spec.name for spec in self.fields]


def record_spec_from_dict(raw: dict[str, Any]) -> RecordSpec:
    """Validate an in-memory mapping into a RecordSpec.

    Raises:
        pydantic.ValidationError: If the mapping fails schema validation.
    """
    return RecordSpec.model_validate(raw)


def load_record_spec(path: str | Path) -> RecordSpec:
    """Load and validate a record spec YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Record spec not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Record spec is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Record spec must be a mapping, got {type(raw).__name__}: {path}"
        )
    spec = record_spec_from_dict(raw)
    logger.info("Loaded record spec '%s' (%d fields) from %s", spec.name, len(spec.fields), path)
    return spec


def save_record_spec(spec: RecordSpec, path: str | Path) -> None:
    """Serialize a RecordSpec to YAML.

    Only keys that were explicitly set are written, so a constant field
    stays a constant field after a round-trip. ``constant`` and ``default``
    are dumped as Python values (not JSON strings) so that YAML-native types
    such as dates load back unchanged.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = spec.model_dump(exclude_unset=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("# transcoder record spec\n")
        f.write("# Each field reads one input key (or hardcodes a constant).\n\n")
        yaml.safe_dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved record spec '%s' to %s", spec.name, path)
