"""Shared section and rule-table types for the per-document classifiers."""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

K = typ.TypeVar("K")
L = typ.TypeVar("L")

_EMPHASIS_MARKERS = re.compile(r"\*\*|__|</?(?:strong|b|em|i)>", re.IGNORECASE)


@dc.dataclass(frozen=True, slots=True)
class Rule(typ.Generic[K]):
    """Map a line pattern to a section or line kind.

    ``consume`` marks labels whose whole line is boilerplate, so no trailing
    text is carried into the new section.
    """

    pattern: re.Pattern[str]
    kind: K
    consume: bool = False


@dc.dataclass(frozen=True, slots=True)
class RuleMatch(typ.Generic[K]):
    """A rule that matched together with the text left after its label."""

    rule: Rule[K]
    remainder: str

    @property
    def kind(self) -> K:
        """Return the kind assigned by the matching rule."""
        return self.rule.kind


@dc.dataclass(frozen=True, slots=True)
class Section(typ.Generic[K, L]):
    """A contiguous, classified run of lines sharing one kind."""

    kind: K
    heading: str
    lines: tuple[L, ...] = ()

    def with_line(self, line: L) -> Section[K, L]:
        """Return a copy of the section with ``line`` appended."""
        return dc.replace(self, lines=(*self.lines, line))


def plain_label(text: str) -> str:
    """Return ``text`` without emphasis markers so labels match when bolded."""
    return _EMPHASIS_MARKERS.sub("", text).strip()


def first_match(
    rules: cabc.Iterable[Rule[K]], text: str
) -> RuleMatch[K] | None:
    """Return the first rule whose pattern matches ``text``.

    Rules are tried in table order and the first match wins. The remainder is
    whatever follows the matched label with separators stripped, or an empty
    string for consuming rules.
    """
    label = plain_label(text)
    for rule in rules:
        match = rule.pattern.match(label)
        if match is None:
            continue
        remainder = "" if rule.consume else label[match.end() :].lstrip(" \t:-")
        return RuleMatch(rule, remainder.strip())
    return None


def compile_rule(pattern: str, kind: K, *, consume: bool = False) -> Rule[K]:
    """Build a case-insensitive rule from a pattern string."""
    return Rule(re.compile(pattern, re.IGNORECASE), kind, consume)


__all__ = [
    "Rule",
    "RuleMatch",
    "Section",
    "compile_rule",
    "first_match",
    "plain_label",
]
