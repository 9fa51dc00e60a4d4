"""
Core combinators for transcoder.

A transcoder is nothing more than a callable ``I -> Result[O]``. There is no
wrapping class: any function with that shape can be passed to the
combinators below, and every combinator returns another plain function.

Key functions:
- run(transcoder, value): invoke a transcoder.
- succeed(value) / fail(message): constant transcoders.
- map(func, transcoder): transform a successful output.
- and_map(arg_transcoder, fn_transcoder): applicative apply, the building
  block for ``combine`` and ``pipeline``.
- and_then(to_next, transcoder): data-dependent chaining.

Evaluation order is always left-to-right and short-circuiting: a combinator
returns the first failure it observes and never evaluates the remaining
transcoders of that combine step.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, TypeVar

from transcoder.result import Failure, Result, Success

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")

Transcoder = Callable[[Any], Result[Any]]

_DEFAULT_ATTEMPT_ERRORS: tuple[type[BaseException], ...] = (ValueError, TypeError, KeyError)


# ---------------------------------------------------------------------------
# Invocation and constants
# ---------------------------------------------------------------------------

def run(transcoder: Transcoder, value: Any) -> Result[Any]:
    """Run *transcoder* against *value* and return its result unchanged."""
    result = transcoder(value)
    if isinstance(result, Failure):
        logger.debug("Transcoding failed: %s", result.error)
    return result


def succeed(value: A) -> Transcoder:
    """Transcoder that ignores its input and always returns ``Success(value)``.

    Typically the start of a pipeline (see ``transcode_to``) or a way to
    hardcode a constant into an output record.
    """
    return lambda _input: Success(value)


transcode_to = succeed


def fail(message: str) -> Transcoder:
    """Transcoder that ignores its input and always returns ``Failure(message)``."""
    return lambda _input: Failure(message)


def from_result(result: Result[A]) -> Transcoder:
    """Transcoder that ignores its input and returns a fixed *result*."""
    return lambda _input: result


# ---------------------------------------------------------------------------
# Functor / applicative / monadic combinators
# ---------------------------------------------------------------------------

def map(func: Callable[[A], B], transcoder: Transcoder) -> Transcoder:
    """Apply *func* to a successful output; failures pass through unchanged.

    *func* must be total over the transcoder's outputs. Use ``and_then``
    when the transformation itself can fail.
    """

    def _mapped(value: Any) -> Result[B]:
        result = transcoder(value)
        if isinstance(result, Failure):
            return result
        return Success(func(result.value))

    return _mapped


def map_error(func: Callable[[str], str], transcoder: Transcoder) -> Transcoder:
    """Rewrite the failure message of *transcoder*; successes pass through."""

    def _mapped(value: Any) -> Result[Any]:
        result = transcoder(value)
        if isinstance(result, Failure):
            return Failure(func(result.error))
        return result

    return _mapped


def and_map(arg_transcoder: Transcoder, fn_transcoder: Transcoder) -> Transcoder:
    """Apply the function produced by *fn_transcoder* to *arg_transcoder*'s output.

    Both transcoders see the same input. *fn_transcoder* is evaluated first;
    if it fails, its failure is returned and *arg_transcoder* is not run.
    Otherwise the failure of *arg_transcoder*, if any, is returned.
    """

    def _applied(value: Any) -> Result[Any]:
        fn_result = fn_transcoder(value)
        if isinstance(fn_result, Failure):
            return fn_result
        arg_result = arg_transcoder(value)
        if isinstance(arg_result, Failure):
            return arg_result
        return Success(fn_result.value(arg_result.value))

    return _applied


def and_then(to_next: Callable[[A], Transcoder], transcoder: Transcoder) -> Transcoder:
    """Chain a transcoder chosen from the previous output.

    Runs *transcoder*; on ``Success(a)`` builds ``to_next(a)`` and runs it
    against the **same original input**. Failures short-circuit.
    """

    def _chained(value: Any) -> Result[Any]:
        result = transcoder(value)
        if isinstance(result, Failure):
            return result
        return to_next(result.value)(value)

    return _chained


def attempt(
    func: Callable[[Any], A],
    *exceptions: type[BaseException],
) -> Transcoder:
    """Lift a function that signals errors by raising into a transcoder.

    Exceptions of the listed types (``ValueError``, ``TypeError`` and
    ``KeyError`` when none are given) become ``Failure(str(exc))``; any other
    exception propagates.

    Example::

        parse_int = attempt(int)
        run(parse_int, "22")      # Success(22)
        run(parse_int, "twenty")  # Failure("invalid literal for int() ...")
    """
    caught = exceptions or _DEFAULT_ATTEMPT_ERRORS

    def _attempted(value: Any) -> Result[A]:
        try:
            return Success(func(value))
        except caught as exc:
            # KeyError wraps its message in quotes; use the bare key instead
            if isinstance(exc, KeyError) and exc.args:
                return Failure(f"Missing key: {exc.args[0]!r}")
            return Failure(str(exc))

    return _attempted


# ---------------------------------------------------------------------------
# Partial application builders
# ---------------------------------------------------------------------------

def _positional_arity(func: Callable[..., Any]) -> int:
    """Count the required positional parameters of *func*."""
    signature = inspect.signature(func)
    return sum(
        1
        for param in signature.parameters.values()
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD)
        and param.default is param.empty
    )


def curry(func: Callable[..., B], arity: int | None = None) -> Callable[[Any], Any]:
    """Turn an N-argument callable into N nested single-argument calls.

    ``curry(f)(a)(b)(c) == f(a, b, c)``. Arguments are collected into a
    tuple and *func* is called exactly once, when the last slot is filled.
    Each partial application returns a fresh function, so a curried value
    can be shared between pipelines.

    Args:
        func: The callable to curry.
        arity: Number of arguments to collect. Defaults to the number of
            required positional parameters of *func*.

    Raises:
        ValueError: If the arity is less than 1.
    """
    if arity is None:
        arity = _positional_arity(func)
    if arity < 1:
        raise ValueError(f"Cannot curry {func!r}: arity must be at least 1, got {arity}")

    def _collect(collected: tuple[Any, ...]) -> Callable[[Any], Any]:
        def _next(arg: Any) -> Any:
            args = collected + (arg,)
            if len(args) == arity:
                return func(*args)
            return _collect(args)

        return _next

    return _collect(())


def record(constructor: Callable[..., B], *names: str) -> Callable[[Any], Any]:
    """Curried builder calling ``constructor(**{name: value, ...})``.

    Fills one named slot per application, in the order of *names*::

        make_person = record(dict, "name", "age")
        make_person("Alice")(22)  # {"name": "Alice", "age": 22}

    Works with keyword-only constructors such as pydantic models.
    """
    if not names:
        raise ValueError("record() needs at least one field name")
    if len(set(names)) != len(names):
        raise ValueError(f"Duplicate field names in record(): {names}")

    def _build(*values: Any) -> B:
        return constructor(**dict(zip(names, values)))

    return curry(_build, arity=len(names))
