"""Line-addressable document abstraction.

The locator only needs ``line_count`` and ``line_at(i).text``, which is the
shape editor hosts expose. ``TextDocument`` is the in-memory implementation
used by the CLI and tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


class Line(Protocol):
    @property
    def text(self) -> str: ...


class Document(Protocol):
    """Read-only, zero-based sequence of text lines."""

    @property
    def line_count(self) -> int: ...

    def line_at(self, index: int) -> Line: ...


@dataclass(frozen=True, slots=True)
class TextLine:
    text: str


@dataclass(frozen=True, slots=True)
class TextDocument:
    """Immutable snapshot of a file's lines."""

    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> TextDocument:
        return cls(tuple(line.rstrip("\r") for line in text.split("\n")))

    @classmethod
    def from_path(cls, path: Path, encoding: str = "utf-8") -> TextDocument:
        return cls.from_text(path.read_text(encoding=encoding, errors="replace"))

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line_at(self, index: int) -> TextLine:
        if not 0 <= index < len(self.lines):
            raise IndexError(f"line {index} out of range (0..{len(self.lines) - 1})")
        return TextLine(self.lines[index])
