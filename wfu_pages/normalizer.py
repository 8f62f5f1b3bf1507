"""Normalize plain text and annotate its lines for the section classifiers."""

from __future__ import annotations

import dataclasses as dc
import re

INVISIBLE_CHARACTERS = re.compile("[\u200b\u200c\u200d\u2060\ufeff\u00ad]")
BULLET_MARKER = re.compile(r"^(?:[-*•●▪◦]|\d+[.)])\s+")
_LINE_BREAKS = re.compile(r"\r\n?")
_SPACE_RUNS = re.compile(r"[ \t]{2,}")
_BLANK_RUNS = re.compile(r"\n{3,}")
TAB_WIDTH = 2


@dc.dataclass(frozen=True, slots=True)
class AnnotatedLine:
    """One trimmed input line with its original indentation recorded."""

    indent: int
    text: str
    is_bullet: bool

    @property
    def content(self) -> str:
        """Return the text with any leading bullet marker removed."""
        if not self.is_bullet:
            return self.text
        return BULLET_MARKER.sub("", self.text, count=1)

    @property
    def raw(self) -> str:
        """Return the line re-indented with its recorded leading spaces."""
        return f"{' ' * self.indent}{self.text}"

    @property
    def is_blank(self) -> bool:
        """Return whether the line carries no text."""
        return not self.text


def strip_invisible(text: str) -> str:
    """Remove zero-width formatting characters and map NBSP to a space."""
    return INVISIBLE_CHARACTERS.sub("", text).replace("\u00a0", " ")


def _measure_indent(line: str) -> int:
    width = 0
    for char in line:
        if char == " ":
            width += 1
        elif char == "\t":
            width += TAB_WIDTH
        else:
            break
    return width


def normalize_text(text: str) -> str:
    """Return ``text`` with invisible characters, whitespace runs, and blanks tidied.

    Leading indentation on each line is kept because it encodes list nesting;
    only interior runs of spaces are collapsed. Runs of blank lines collapse to
    a single blank line and the result is trimmed of outer blank lines.
    """
    cleaned = _LINE_BREAKS.sub("\n", strip_invisible(text))
    lines: list[str] = []
    for line in cleaned.split("\n"):
        stripped = line.lstrip(" \t")
        lead = line[: len(line) - len(stripped)]
        lines.append(lead + _SPACE_RUNS.sub(" ", stripped.rstrip()))
    joined = "\n".join(lines)
    return _BLANK_RUNS.sub("\n\n", joined).strip("\n")


def annotate_line(line: str) -> AnnotatedLine:
    """Annotate a single line with indentation and bullet status."""
    cleaned = strip_invisible(line).rstrip("\r\n")
    text = cleaned.strip()
    return AnnotatedLine(
        indent=_measure_indent(cleaned) if text else 0,
        text=text,
        is_bullet=bool(BULLET_MARKER.match(text)),
    )


def annotate_lines(text: str, *, keep_blank: bool = False) -> list[AnnotatedLine]:
    """Split ``text`` into annotated lines.

    Parameters
    ----------
    text : str
        Plain or annotated text, typically the serializer output.
    keep_blank : bool, optional
        Keep blank lines as paragraph separators. Classifiers that expect
        compacted input leave this ``False`` (the default).

    Returns
    -------
    list[AnnotatedLine]
        One entry per input line, in input order.
    """
    raw_lines = _LINE_BREAKS.sub("\n", text).split("\n")
    annotated = [annotate_line(line) for line in raw_lines]
    if keep_blank:
        return annotated
    return [line for line in annotated if not line.is_blank]


__all__ = [
    "BULLET_MARKER",
    "AnnotatedLine",
    "annotate_line",
    "annotate_lines",
    "normalize_text",
    "strip_invisible",
]
