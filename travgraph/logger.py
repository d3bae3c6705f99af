"""Event loggers for graph algorithm runs.

Algorithms report one event per run (``bfs``, ``dfs``, ``dijkstra``) with
counters as keyword fields. Graph mutation reports ``negative_weight``.
"""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Mapping, Optional, Protocol, TextIO


class Logger(Protocol):
    """Anything the graph can hand its events to."""

    def debug(self, event: str, **fields: Any) -> None:
        """Report a per-run algorithm event."""
        ...

    def info(self, event: str, **fields: Any) -> None:
        """Report a run-level summary event."""
        ...

    def warning(self, event: str, **fields: Any) -> None:
        """Report suspicious input, such as a negative edge weight."""
        ...


class NoopLogger:
    """Default logger of a :class:`~travgraph.graph.Graph`; drops every event."""

    def debug(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        """Drop a ``debug`` event."""

    def info(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        """Drop an ``info`` event."""

    def warning(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        """Drop a ``warning`` event."""


class StdLogger:
    """Write events as ``level event k=v ...`` lines or as JSON objects.

    Fields bound with :meth:`bind` are written before the per-event fields,
    so every line of a CLI run can carry e.g. the algorithm name.

    Args:
        level: Lowest level written: ``"debug"``, ``"info"`` or ``"warning"``.
        json_fmt: One JSON object per line instead of plain text.
        stream: Destination, ``sys.stderr`` when omitted.
        context: Fields added to every event.
    """

    LEVELS: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: TextIO | None = None,
        context: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Validate ``level`` and store the output settings."""
        if level not in self.LEVELS:
            raise ValueError(f"unknown log level {level!r}")
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr
        self.context: Dict[str, Any] = dict(context or {})

    def bind(self, **fields: Any) -> "StdLogger":
        """Return a logger sharing this one's settings with extra context fields."""
        merged = dict(self.context)
        merged.update(fields)
        return StdLogger(self.level, self.json_fmt, self.stream, merged)

    def enabled(self, level: str) -> bool:
        """Whether events at ``level`` pass the threshold."""
        return self.LEVELS[level] >= self.LEVELS[self.level]

    def _render(self, level: str, event: str, fields: Dict[str, Any]) -> str:
        if self.json_fmt:
            return json.dumps({"level": level, "event": event, **fields}, default=str)
        kv = " ".join(f"{k}={v}" for k, v in fields.items())
        return f"{level} {event} {kv}".rstrip()

    def log(self, level: str, event: str, **fields: Any) -> None:
        """Write ``event`` at ``level`` with the bound context and ``fields``."""
        if not self.enabled(level):
            return
        merged = dict(self.context)
        merged.update(fields)
        self.stream.write(self._render(level, event, merged) + "\n")

    def debug(self, event: str, **fields: Any) -> None:
        """Write a ``debug`` event."""
        self.log("debug", event, **fields)

    def info(self, event: str, **fields: Any) -> None:
        """Write an ``info`` event."""
        self.log("info", event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        """Write a ``warning`` event."""
        self.log("warning", event, **fields)


__all__ = ["Logger", "NoopLogger", "StdLogger"]
