"""Breaking label text into lines that fit a given width."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Union

CharWidth = Union[float, Callable[[str], float]]


@dataclass(frozen=True)
class WrappedText:
    """Text with inserted breaks, its line count and the widest line's width."""

    text: str
    lines: int
    max_width: float


def _measurer(char_width: CharWidth) -> Callable[[str], float]:
    if callable(char_width):
        return char_width
    width = float(char_width)
    return lambda _char: width


def _wrap_segment(segment: str, width: float, measure: Callable[[str], float]) -> str:
    parts: list[str] = []
    current = 0.0
    for char in segment:
        char_w = measure(char)
        if current + char_w > width:
            parts.append("\r\n")
            current = 0.0
        parts.append(char)
        current += char_w
    return "".join(parts)


def wrap_text(text: str, width: float, char_width: CharWidth) -> WrappedText:
    """Insert ``"\\r\\n"`` wherever the next character would overflow ``width``.

    ``char_width`` is either a fixed width per character or a function giving
    the width of one character. Existing newlines are kept; empty lines are
    dropped.
    """
    measure = _measurer(char_width)

    if "\n" not in text:
        result = _wrap_segment(text, width, measure)
    else:
        segments = text.split("\n")
        last = len(segments) - 1
        pieces: list[str] = []
        for index, segment in enumerate(segments):
            if not segment:
                continue
            pieces.append(_wrap_segment(segment, width, measure))
            if index != last:
                pieces.append("\n")
        result = "".join(pieces)

    def line_width(line: str) -> float:
        return sum(measure(char) for char in line if char != "\r")

    lines = result.count("\n") + 1
    max_width = max((line_width(line) for line in result.split("\n")), default=0.0)
    return WrappedText(text=result, lines=lines, max_width=max_width)