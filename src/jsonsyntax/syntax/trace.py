"""Optional tracing hooks for the grammar engine.

Every grammar rule is wrapped with :func:`traced`. When the parse context
carries no tracer (the default) the wrapper forwards the call and does
nothing else; when a tracer is injected it receives an ``enter`` event before
the rule runs and a ``leave`` event after it returns or raises.

Tracers provided here:
    TreeTracer: Indented enter/leave tree written to a text stream
    LoggingTracer: Same tree lines sent to a ``logging`` logger at DEBUG
    RecordingTracer: Collects TraceEvent records (tests, tooling)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Protocol, TextIO, TypeAlias

if TYPE_CHECKING:
    from jsonsyntax.syntax.parser.context import ParseContext
    from jsonsyntax.syntax.scanner import Scanner

__all__ = [
    "LoggingTracer",
    "RecordingTracer",
    "TraceEvent",
    "Tracer",
    "TreeTracer",
    "traced",
]

logger = logging.getLogger(__name__)

Rule: TypeAlias = "Callable[[Scanner, ParseContext], bool]"


class Tracer(Protocol):
    """Receives rule entry and exit events."""

    def enter(self, rule: str, scanner: Scanner) -> None: ...

    def leave(self, rule: str, scanner: Scanner, matched: bool) -> None: ...


def traced(rule: str) -> Callable[[Rule], Rule]:
    """Report calls of a grammar rule to the context's tracer.

    Args:
        rule: Rule name shown in trace output

    Returns:
        Decorator for ``(scanner, context) -> bool`` rule functions
    """

    def decorate(func: Rule) -> Rule:
        @functools.wraps(func)
        def wrapper(scanner: Scanner, context: ParseContext) -> bool:
            tracer = context.tracer
            if tracer is None:
                return func(scanner, context)
            tracer.enter(rule, scanner)
            matched = False
            try:
                matched = func(scanner, context)
            finally:
                tracer.leave(rule, scanner, matched)
            return matched

        return wrapper

    return decorate


def _tree_line(depth: int, rule: str, event: str, scanner: Scanner) -> str:
    return (
        f"{'| ' * depth}+-{rule}: {event}\tnext: '{scanner.lookahead_text()}' "
        f"({scanner.row}:{scanner.column})"
    )


class TreeTracer:
    """Write an indented enter/leave tree, one line per event.

    Example output for ``[]``::

        +-document: enter	next: '[' (1:1)
        | +-object: enter	next: '[' (1:1)
        | +-object: leave	next: '[' (1:1)
        | +-array: enter	next: '[' (1:1)
        ...
    """

    __slots__ = ("_depth", "_stream")

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize tracer.

        Args:
            stream: Destination stream (default: ``sys.stderr`` at call time)
        """
        self._stream = stream
        self._depth = 0

    def _write(self, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(line + "\n")

    def enter(self, rule: str, scanner: Scanner) -> None:
        self._write(_tree_line(self._depth, rule, "enter", scanner))
        self._depth += 1

    def leave(self, rule: str, scanner: Scanner, matched: bool) -> None:  # noqa: ARG002
        self._depth -= 1
        self._write(_tree_line(self._depth, rule, "leave", scanner))


class LoggingTracer:
    """Send the enter/leave tree to a logger at DEBUG level."""

    __slots__ = ("_depth", "_logger")

    def __init__(self, target: logging.Logger | None = None) -> None:
        """Initialize tracer.

        Args:
            target: Logger to write to (default: this module's logger)
        """
        self._logger = target if target is not None else logger
        self._depth = 0

    def enter(self, rule: str, scanner: Scanner) -> None:
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug("%s", _tree_line(self._depth, rule, "enter", scanner))
        self._depth += 1

    def leave(self, rule: str, scanner: Scanner, matched: bool) -> None:
        self._depth -= 1
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(
                "%s (%s)",
                _tree_line(self._depth, rule, "leave", scanner),
                "matched" if matched else "no match",
            )


@dataclass(frozen=True, slots=True)
class TraceEvent:
    """One recorded rule event.

    Attributes:
        event: ``enter`` or ``leave``
        rule: Rule name
        depth: Nesting of rule calls (0 for ``document``)
        lookahead: Rendering of the lookahead at the event
        row: Lookahead row
        column: Lookahead column
        matched: Rule outcome (None for ``enter`` events)
    """

    event: Literal["enter", "leave"]
    rule: str
    depth: int
    lookahead: str
    row: int
    column: int
    matched: bool | None = None


class RecordingTracer:
    """Collect TraceEvent records in call order."""

    __slots__ = ("_depth", "events")

    def __init__(self) -> None:
        self.events: list[TraceEvent] = []
        self._depth = 0

    def enter(self, rule: str, scanner: Scanner) -> None:
        self.events.append(
            TraceEvent(
                "enter", rule, self._depth, scanner.lookahead_text(), scanner.row, scanner.column
            )
        )
        self._depth += 1

    def leave(self, rule: str, scanner: Scanner, matched: bool) -> None:
        self._depth -= 1
        self.events.append(
            TraceEvent(
                "leave",
                rule,
                self._depth,
                scanner.lookahead_text(),
                scanner.row,
                scanner.column,
                matched,
            )
        )

    def rules_entered(self) -> list[str]:
        """Names of rules in the order they were entered."""
        return [e.rule for e in self.events if e.event == "enter"]
