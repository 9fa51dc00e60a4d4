"""
Custom exception hierarchy for transcoder.

Transcoding failures are never raised: they travel as ``Failure`` values
through the combinators. The exceptions below cover the places where a
caller explicitly leaves the ``Result`` world or hands the library a broken
configuration.
"""


class TranscoderError(Exception):
    """Base exception for all transcoder errors."""


class UnwrapError(TranscoderError):
    """Raised when ``unwrap()`` is called on a ``Failure``.

    The failure message is kept on ``.error`` so callers can report it.
    """

    def __init__(self, error: str) -> None:
        super().__init__(f"Tried to unwrap a failed result: {error}")
        self.error = error


class ConfigValidationError(TranscoderError):
    """Raised when a record spec file cannot be read as a spec.

    This can happen if:
    - The YAML file is empty.
    - The YAML document is not a mapping.

    Schema and cross-field errors inside a valid mapping surface as
    ``pydantic.ValidationError`` instead.
    """
