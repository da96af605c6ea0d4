"""Code-point sources for the scanner.

The scanner consumes an iterator of single code points and knows nothing
about files, chunks, or decoding. This module adapts the inputs callers
actually have (a ``str``, a text stream, or an iterable of strings) into
that iterator.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol, TypeAlias, runtime_checkable

from jsonsyntax.constants import READ_CHUNK_SIZE
from jsonsyntax.diagnostics import SourceReadError

__all__ = ["SupportsRead", "TextSource", "code_points"]


@runtime_checkable
class SupportsRead(Protocol):
    """Text stream protocol (``io.TextIOBase`` and friends)."""

    def read(self, size: int = -1, /) -> str: ...


TextSource: TypeAlias = str | SupportsRead | Iterable[str]


def _read_stream(stream: SupportsRead, chunk_size: int) -> Iterator[str]:
    while True:
        try:
            chunk = stream.read(chunk_size)
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Failed to read input: {e}"
            raise SourceReadError(msg) from e
        if not chunk:
            return
        if not isinstance(chunk, str):
            msg = f"Expected a text stream, got {type(chunk).__name__} chunks"
            raise SourceReadError(msg)
        yield from chunk


def _flatten(items: Iterable[str]) -> Iterator[str]:
    for item in items:
        if not isinstance(item, str):
            msg = f"Expected str items, got {type(item).__name__}"
            raise SourceReadError(msg)
        yield from item


def code_points(
    source: TextSource, *, chunk_size: int = READ_CHUNK_SIZE
) -> Iterator[str]:
    """Adapt ``source`` into an iterator of single code points.

    Args:
        source: A ``str``, a text stream with ``read(n)``, or an iterable of
            strings (lines, chunks, or single characters)
        chunk_size: Characters requested per ``read()`` call on streams

    Returns:
        Iterator yielding one code point per step

    Raises:
        TypeError: If ``source`` is bytes (decode it first)
        SourceReadError: Lazily, if the stream fails or yields non-text

    Example:
        >>> list(code_points("[1]"))
        ['[', '1', ']']
        >>> import io
        >>> list(code_points(io.StringIO("{}")))
        ['{', '}']
        >>> list(code_points(["[", "1,", "2]"]))
        ['[', '1', ',', '2', ']']
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        msg = "code_points() needs text; decode bytes before validating"
        raise TypeError(msg)
    if isinstance(source, str):
        return iter(source)
    if isinstance(source, SupportsRead):
        return _read_stream(source, chunk_size)
    return _flatten(source)
