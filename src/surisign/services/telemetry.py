"""Timing spans for the signing pipeline.

Off unless ``-v`` is given. When on, every ``@traced`` service call opens a
span, ``trace_span`` blocks nest under the innermost open span, and the
outermost traced call attaches the finished tree to
``ServiceResult.meta["telemetry"]``. Steps that fail are annotated with the
error code (or exception type) that stopped them.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from surisign.services.result import ServiceResult

_enabled: ContextVar[bool] = ContextVar("surisign_telemetry", default=False)
_active_span: ContextVar[Span | None] = ContextVar("surisign_active_span", default=None)

logger = structlog.get_logger("surisign.telemetry")


@dataclass
class Span:
    name: str
    root: bool = False
    children: list[Span] = field(default_factory=list)
    annotations: dict[str, Any] = field(default_factory=dict)
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None

    @property
    def duration_ms(self) -> float:
        if self.finished is None:
            return 0.0
        return (self.finished - self.started) * 1000

    def end(self) -> None:
        self.finished = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        """Serialisable tree; empty ``annotations``/``children`` are omitted."""
        node: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.annotations:
            node["annotations"] = dict(self.annotations)
        if self.children:
            node["children"] = [child.to_dict() for child in self.children]
        return node


@contextmanager
def _span(name: str, *, may_start_tree: bool) -> Generator[Span | None]:
    parent = _active_span.get()
    if not _enabled.get() or (parent is None and not may_start_tree):
        yield None
        return

    span = Span(name=name, root=parent is None)
    if parent is not None:
        parent.children.append(span)
    token = _active_span.set(span)
    try:
        yield span
    except Exception as exc:
        span.annotate("raised", type(exc).__name__)
        raise
    finally:
        span.end()
        _active_span.reset(token)
        logger.debug("span.complete", span=name, duration_ms=round(span.duration_ms, 2), **span.annotations)


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Time a block inside a traced call; yields None when nothing is tracing."""
    with _span(name, may_start_tree=False) as span:
        yield span


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Trace a service method returning a ServiceResult."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        with _span(func.__qualname__, may_start_tree=True) as span:
            result = func(*args, **kwargs)
            if span is not None and isinstance(result, ServiceResult) and not result.ok:
                span.annotate("error", result.error_code)

        if span is None or not span.root or not isinstance(result, ServiceResult):
            return result
        meta = {**(result.meta or {}), "telemetry": span.to_dict()}
        return result.model_copy(update={"meta": meta})  # type: ignore[return-value]

    return wrapper


def enable_telemetry() -> None:
    """Turn tracing on for the current context (``-v``)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)
    _active_span.set(None)
