"""Load template context YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .helpers import build_template_context
from .models import ContextConfigError, TemplateContext

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_template_context(path: Path) -> TemplateContext:
    """Load the YAML file describing one document's template context.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML context file (for example,
        ``module-3.yaml``). Keys may use the snake_case field names or the
        camelCase spellings the course forms emit.

    Returns
    -------
    TemplateContext
        Parsed, immutable context ready for :func:`wfu_pages.format_content`.

    Raises
    ------
    FileNotFoundError
        If the context file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    ContextConfigError
        If a key does not name a context field, or a ``context`` section is
        present but is not a mapping.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from wfu_pages.config import load_template_context
    >>> context = load_template_context(Path("module-3.yaml"))  # doctest: +SKIP
    >>> context.course_name  # doctest: +SKIP
    'Applied Machine Learning'
    """
    if not path.exists():
        msg = f"Context file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    match raw.get("context", raw):
        case dict() as payload:
            return build_template_context(payload)
        case None:
            return TemplateContext()
        case other:
            msg = f"Expected 'context' to be a mapping, got {type(other).__name__}."
            raise ContextConfigError(msg)
