"""Cyclopts CLI entrypoint for formatting course content into page markup.

The ``wfu-pages`` console script reads pasted course content from a file,
renders it through the page template for a document kind, and prints the
HTML or writes it to disk. Options may also be supplied through
``WFU_``-prefixed environment variables, e.g. ``WFU_CONTEXT`` for the
template context file.

Examples
--------
Render a discussion prompt with a context file:

>>> from wfu_pages.cli import app
>>> app(
...     ["render", "wfuDiscussion", "prompt.txt", "--context", "module3.yaml"]
... )  # doctest: +SKIP

List the supported document kinds:

>>> app(["templates"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import FormattingOptions, TemplateContext, load_template_context
from .formatter import (
    PREVIEW_LENGTH,
    available_templates,
    format_content,
    preview_content,
)
from .serializer import MARKDOWN, MARKUP, serialize_html

app = App(name="wfu-pages", config=cyclopts.config.Env("WFU_", command=False))  # type: ignore[unknown-argument]

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT
    )


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_context(path: Path | None) -> TemplateContext:
    if path is None:
        return TemplateContext()
    return load_template_context(path)


def _emit(text: str, output: Path | None) -> None:
    if output is None:
        print(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text if text.endswith("\n") else f"{text}\n", encoding="utf-8")
    print(f"wrote {_format_path(output)}")


@app.command(help="Render course content into the page template for a kind.")
def render(
    kind: typ.Annotated[str, Parameter(help="Document kind, e.g. wfuDiscussion")],
    source: typ.Annotated[Path, Parameter(help="File holding the pasted content")],
    *,
    context: typ.Annotated[
        Path | None,
        Parameter(help="YAML template context file", env_var="WFU_CONTEXT"),
    ] = None,
    output: typ.Annotated[
        Path | None, Parameter(help="Write the HTML here instead of stdout")
    ] = None,
    html: typ.Annotated[
        bool, Parameter(help="Treat the source as a clipboard HTML fragment")
    ] = False,
    sanitize: typ.Annotated[
        bool, Parameter(help="Strip markup outside the page allow-list")
    ] = True,
    embeds: typ.Annotated[
        bool, Parameter(help="Keep https video embeds when sanitizing")
    ] = True,
    verbose: typ.Annotated[bool, Parameter(help="Log debug details")] = False,
) -> None:
    """Render ``source`` as a page of document ``kind``.

    Parameters
    ----------
    kind : str
        Document kind tag; unknown tags render as bare markdown.
    source : Path
        UTF-8 file with plain text, or an HTML fragment when ``html`` is set.
    context : Path or None, optional
        YAML file with the template context (overridable via ``WFU_CONTEXT``).
    output : Path or None, optional
        Destination file; when ``None`` the HTML is printed.
    html : bool, optional
        Serialize the source as clipboard HTML before classifying it.
    sanitize : bool, optional
        Run the sanitizer over the rendered page.
    embeds : bool, optional
        Keep ``https`` video iframes when sanitizing.
    verbose : bool, optional
        Enable debug logging.

    Raises
    ------
    FileNotFoundError
        If ``source`` or ``context`` does not exist.
    ContextConfigError
        If the context file is structurally invalid.
    """
    _configure_logging(verbose)
    options = FormattingOptions(
        sanitize=sanitize, source_is_html=html, allow_embeds=embeds
    )
    content = source.read_text(encoding="utf-8")
    page = format_content(content, kind, _load_context(context), options)
    _emit(page, output)


@app.command(help="Serialize a clipboard HTML fragment into annotated text.")
def serialize(
    source: typ.Annotated[Path, Parameter(help="File holding the HTML fragment")],
    *,
    markup: typ.Annotated[
        bool, Parameter(help="Emit <strong>/<em> instead of markdown markers")
    ] = False,
    output: typ.Annotated[
        Path | None, Parameter(help="Write the text here instead of stdout")
    ] = None,
) -> None:
    """Print or write the annotated text for an HTML fragment."""
    markers = MARKUP if markup else MARKDOWN
    text = serialize_html(source.read_text(encoding="utf-8"), markers=markers)
    _emit(text, output)


@app.command(help="Print a short plain-text preview of a rendered page.")
def preview(
    kind: typ.Annotated[str, Parameter(help="Document kind, e.g. wfuDiscussion")],
    source: typ.Annotated[Path, Parameter(help="File holding the pasted content")],
    *,
    context: typ.Annotated[
        Path | None,
        Parameter(help="YAML template context file", env_var="WFU_CONTEXT"),
    ] = None,
    max_length: typ.Annotated[
        int, Parameter(help="Maximum preview length in characters")
    ] = PREVIEW_LENGTH,
    verbose: typ.Annotated[bool, Parameter(help="Log debug details")] = False,
) -> None:
    """Print the preview text for ``source`` rendered as ``kind``."""
    _configure_logging(verbose)
    content = source.read_text(encoding="utf-8")
    print(preview_content(content, kind, _load_context(context), max_length))


@app.command(help="List the supported document kinds.")
def templates() -> None:
    """Print one line per document kind with its name and use case."""
    for info in available_templates():
        print(f"{info.id}: {info.name} - {info.use_case}")


def main() -> None:
    """Invoke the Cyclopts application behind the ``wfu-pages`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
