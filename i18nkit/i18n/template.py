"""Template rendering for translated values.

Merges caller data into translated text using ``{{.Field}}`` placeholders.
Rendering is best-effort: problems are collected on the returned
RenderResult and never raised, so a broken translation cannot take down the
caller.

Supported actions:
    {{.Field}}          field of the data object (mapping key or attribute)
    {{.Outer.Inner}}    nested field lookup
    {{.}}               the data object itself
    {{/* comment */}}   renders as nothing
    {{- .Field -}}      trims whitespace before/after the action
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from i18nkit.i18n.models import Errlog

OPEN_DELIM = "{{"
CLOSE_DELIM = "}}"

_FIELD_CHAIN = re.compile(r"^\.(?:[A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*)?$")

_MISSING = object()


@dataclass
class RenderResult:
    """Outcome of a template render.

    Attributes:
        text: Rendered output. Always populated, possibly partially.
        errors: Human-readable problems found while rendering.
    """

    text: str
    errors: List[str] = field(default_factory=list)

    @property
    def is_success(self) -> bool:
        """True when the template rendered without any problems."""
        return not self.errors


class Scope:
    """Layered data object. The first layer holding a field wins.

    Lets the few bucket expose ``Count`` while still reaching data attached
    with ``T.with_data``.
    """

    def __init__(self, *layers: Any):
        self.layers = tuple(layer for layer in layers if layer is not None)

    def lookup(self, name: str) -> Any:
        for layer in self.layers:
            value = _lookup(layer, name)
            if value is not _MISSING:
                return value
        return _MISSING

    def __repr__(self) -> str:
        return f"Scope{self.layers!r}"


def _lookup(data: Any, name: str) -> Any:
    if isinstance(data, Scope):
        return data.lookup(name)
    if isinstance(data, Mapping):
        return data.get(name, _MISSING)
    if data is None:
        return _MISSING
    return getattr(data, name, _MISSING)


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _resolve(chain: str, data: Any) -> Tuple[Any, Optional[str]]:
    if chain == ".":
        return data, None
    current = data
    for name in chain[1:].split("."):
        current = _lookup(current, name)
        if current is _MISSING:
            return None, f"can't evaluate field {name} in {chain}"
    return current, None


def _parse_action(body: str) -> Tuple[str, bool, bool]:
    """Split an action body into (expression, trim_left, trim_right)."""
    trim_left = body.startswith("- ")
    trim_right = body.endswith(" -")
    if trim_left:
        body = body[2:]
    if trim_right:
        body = body[:-2]
    return body.strip(), trim_left, trim_right


def render_template(template: str, data: Any) -> RenderResult:
    """Render a template string against a data object.

    Args:
        template: Text with ``{{.Field}}`` placeholders.
        data: Mapping, object or Scope providing the fields.

    Returns:
        RenderResult holding the merged text and any problems found. A
        missing field renders as an empty string. An unterminated or
        unsupported action is emitted verbatim.
    """
    if OPEN_DELIM not in template:
        return RenderResult(text=template)

    parts: List[str] = []
    errors: List[str] = []
    pos = 0
    trim_next = False

    while pos < len(template):
        start = template.find(OPEN_DELIM, pos)
        if start == -1:
            chunk = template[pos:]
            parts.append(chunk.lstrip() if trim_next else chunk)
            break

        end = template.find(CLOSE_DELIM, start + len(OPEN_DELIM))
        if end == -1:
            errors.append(f"unclosed action at offset {start}")
            chunk = template[pos:]
            parts.append(chunk.lstrip() if trim_next else chunk)
            break

        chunk = template[pos:start]
        if trim_next:
            chunk = chunk.lstrip()
        raw = template[start : end + len(CLOSE_DELIM)]
        expression, trim_left, trim_right = _parse_action(
            template[start + len(OPEN_DELIM) : end]
        )
        parts.append(chunk.rstrip() if trim_left else chunk)
        trim_next = trim_right
        pos = end + len(CLOSE_DELIM)

        if expression.startswith("/*") and expression.endswith("*/"):
            continue

        if not _FIELD_CHAIN.match(expression):
            errors.append(f"unsupported action {raw!r}")
            parts.append(raw)
            continue

        value, error = _resolve(expression, data)
        if error:
            errors.append(error)
            continue
        parts.append(_stringify(value))

    return RenderResult(text="".join(parts), errors=errors)


def render_translation(text: str, data: Any, log: Optional[Errlog] = None) -> str:
    """Render a translated value, reporting problems to the diagnostic sink.

    Args:
        text: Translated value, possibly containing placeholders.
        data: Data object merged into the value.
        log: Optional diagnostic sink. Problems are dropped when None.

    Returns:
        The rendered text, partially substituted if problems were found.
    """
    result = render_template(text, data)
    if log is not None:
        for error in result.errors:
            log(
                "Failed executing template value: %s, reason: %s",
                text,
                error,
            )
    return result.text
