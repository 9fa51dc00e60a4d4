"""
Fixed-arity applicative combination for transcoder.

``mapN(func, t1, ..., tN)`` runs N transcoders against the same input and
calls ``func`` with their N outputs. It is the fold of ``and_map`` over
``map(curry(func, N), t1)`` with ``t2 .. tN``.

Failure order is left-to-right: ``t1`` is run first, then ``t2``, and so
on. The first failing transcoder's message is returned and the remaining
transcoders are not run, so exactly one error string ever surfaces.
"""

from __future__ import annotations

from typing import Any, Callable

from transcoder.core import Transcoder, and_map, curry, map


def _map_n(func: Callable[..., Any], *transcoders: Transcoder) -> Transcoder:
    first, *rest = transcoders
    combined = map(curry(func, arity=len(transcoders)), first)
    for transcoder in rest:
        combined = and_map(transcoder, combined)
    return combined


def map2(func: Callable[[Any, Any], Any], t1: Transcoder, t2: Transcoder) -> Transcoder:
    """Combine two transcoders; e.g. ``map2(pair, succeed("a"), succeed("b"))``."""
    return _map_n(func, t1, t2)


def map3(
    func: Callable[[Any, Any, Any], Any],
    t1: Transcoder,
    t2: Transcoder,
    t3: Transcoder,
) -> Transcoder:
    return _map_n(func, t1, t2, t3)


def map4(
    func: Callable[[Any, Any, Any, Any], Any],
    t1: Transcoder,
    t2: Transcoder,
    t3: Transcoder,
    t4: Transcoder,
) -> Transcoder:
    return _map_n(func, t1, t2, t3, t4)


def map5(
    func: Callable[..., Any],
    t1: Transcoder,
    t2: Transcoder,
    t3: Transcoder,
    t4: Transcoder,
    t5: Transcoder,
) -> Transcoder:
    return _map_n(func, t1, t2, t3, t4, t5)


def map6(
    func: Callable[..., Any],
    t1: Transcoder,
    t2: Transcoder,
    t3: Transcoder,
    t4: Transcoder,
    t5: Transcoder,
    t6: Transcoder,
) -> Transcoder:
    return _map_n(func, t1, t2, t3, t4, t5, t6)


def map7(
    func: Callable[..., Any],
    t1: Transcoder,
    t2: Transcoder,
    t3: Transcoder,
    t4: Transcoder,
    t5: Transcoder,
    t6: Transcoder,
    t7: Transcoder,
) -> Transcoder:
    return _map_n(func, t1, t2, t3, t4, t5, t6, t7)
