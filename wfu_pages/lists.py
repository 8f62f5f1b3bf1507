"""Rebuild nested list markup from indentation-delimited bullet lines.

Pasted bullets arrive as plain lines whose only nesting signal is the number
of leading spaces. :class:`ListState` tracks the indentation of every open
list as a stack of :class:`IndentFrame` entries and, for each new bullet,
returns the next state together with the markup needed to reach the right
nesting level. The state is immutable so classifiers can thread it through a
line-at-a-time step function.

Nested lists are emitted as siblings of the preceding item, matching the
markup the institutional pages already use::

    <ul>
    <li>Parent</li>
    <ul>
    <li>Child</li>
    </ul>
    </ul>

Examples
--------
>>> from wfu_pages.lists import render_bullets
>>> print(render_bullets([(0, "One"), (2, "Two")]), end="")
<ul>
<li>One</li>
<ul>
<li>Two</li>
</ul>
</ul>
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

OPEN_LIST = "<ul>\n"
CLOSE_LIST = "</ul>\n"


@dc.dataclass(frozen=True, slots=True)
class IndentFrame:
    """Leading-space count of one open list."""

    open_indent: int


@dc.dataclass(frozen=True, slots=True)
class ListState:
    """Stack of open list levels for the section being rendered."""

    frames: tuple[IndentFrame, ...] = ()

    @property
    def is_open(self) -> bool:
        """Return whether any list is currently open."""
        return bool(self.frames)

    @property
    def depth(self) -> int:
        """Return the number of open list levels."""
        return len(self.frames)

    def advance(self, indent: int, *, pinned: bool = False) -> tuple[ListState, str]:
        """Move to the nesting level for a bullet indented by ``indent`` spaces.

        Parameters
        ----------
        indent : int
            Leading-space count of the incoming bullet line.
        pinned : bool, optional
            Keep the bullet at the current level when its indentation would
            close lists. Used for ``Exercise:`` lines, which belong to the
            preceding item regardless of how they were indented.

        Returns
        -------
        tuple[ListState, str]
            The next state and the list markup to emit before the item.
        """
        if not self.frames:
            return ListState((IndentFrame(indent),)), OPEN_LIST

        current = self.frames[-1].open_indent
        if pinned and indent < current:
            indent = current

        if indent > current:
            return ListState((*self.frames, IndentFrame(indent))), OPEN_LIST
        if indent == current:
            return self, ""

        frames = list(self.frames)
        markup = ""
        while len(frames) > 1 and indent < frames[-1].open_indent:
            frames.pop()
            markup += CLOSE_LIST
        if indent < frames[-1].open_indent:
            # The outermost list stays open; it now starts at this indent.
            frames = [IndentFrame(indent)]
        return ListState(tuple(frames)), markup

    def close(self) -> tuple[ListState, str]:
        """Close every open level in one pass."""
        return ListState(), CLOSE_LIST * len(self.frames)


def render_bullets(items: cabc.Iterable[tuple[int, str]]) -> str:
    """Render ``(indent, html)`` pairs as one nested list.

    Item content is inserted verbatim, so callers convert emphasis and links
    before handing items over.
    """
    state = ListState()
    html = ""
    for indent, content in items:
        state, markup = state.advance(indent)
        html += f"{markup}<li>{content}</li>\n"
    _, markup = state.close()
    return html + markup


__all__ = ["CLOSE_LIST", "OPEN_LIST", "IndentFrame", "ListState", "render_bullets"]
