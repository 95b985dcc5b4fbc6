"""Placeholder substitution for the generated project files."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, MutableMapping

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
    "escape_string",
    "quote_string",
    "render",
]


# Only ``{{ name }}`` style markers are placeholders, so the ``${...}`` variables
# used by VS Code and shell files pass through untouched.
_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[A-Za-z_][^{}]*?)\s*}}")


class TemplateRenderingError(RuntimeError):
    """Raised when a placeholder cannot be evaluated."""


def quote_string(value: Any) -> str:
    """Return ``value`` as a double-quoted string valid in both JSON and TOML.

    Only quotes, backslashes and control characters are escaped; every other
    character, emoji included, is kept verbatim.
    """

    # TOML basic strings also forbid a raw DEL, which JSON leaves alone.
    return json.dumps(str(value), ensure_ascii=False).replace("\x7f", "\\u007f")


def escape_string(value: Any) -> str:
    """Like :func:`quote_string` without the surrounding quotes."""

    return quote_string(value)[1:-1]


def _default_filters() -> dict[str, Callable[[Any], Any]]:
    return {
        "quote": quote_string,
        "escape": escape_string,
    }


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates with ``{{ placeholder|filters }}`` expressions."""

    filters: MutableMapping[str, Callable[[Any], Any]] = field(default_factory=_default_filters)

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render ``template`` using ``context``.

        A placeholder naming a value missing from ``context``, or an unknown
        filter, raises :class:`TemplateRenderingError`.
        """

        def substitute(match: re.Match[str]) -> str:
            key, *filter_names = [part.strip() for part in match.group("expression").split("|")]
            try:
                value = context[key]
            except KeyError as exc:
                raise TemplateRenderingError(f"missing value for '{key}'") from exc

            for name in filter_names:
                try:
                    filter_func = self.filters[name]
                except KeyError as exc:
                    raise TemplateRenderingError(f"unknown filter '{name}'") from exc
                value = filter_func(value)
            return str(value)

        return _PLACEHOLDER_PATTERN.sub(substitute, template)


_RENDERER = TemplateRenderer()


def render(template: str, context: Mapping[str, Any]) -> str:
    """Render ``template`` with the shared renderer."""

    return _RENDERER.render_string(template, context)
