"""Small server-side UI pieces exposed to templates as Jinja2 globals."""
from __future__ import annotations

from markupsafe import Markup, escape

SKELETON_CLASSES = "animate-pulse rounded-md bg-gray-700"


def _attr_name(name: str) -> str:
    return name.rstrip("_").replace("_", "-")


def _render_attrs(attrs: dict) -> str:
    parts = []
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {escape(name)}")
        else:
            parts.append(f' {escape(name)}="{escape(value)}"')
    return "".join(parts)


def skeleton(class_name: str | None = None, attrs: dict | None = None, **kwargs) -> Markup:
    """Pulsing placeholder block shown while real content loads.

    `class_name` (and any passthrough `class`) is appended to the base
    classes, so the pulse animation can never be dropped. Keyword names use
    `_` for `-` (`aria_hidden=True` -> `aria-hidden`); `attrs` takes names
    that are not valid Python identifiers as-is.
    """
    merged: dict = dict(attrs or {})
    for name, value in kwargs.items():
        merged[_attr_name(name)] = value

    classes = [SKELETON_CLASSES]
    for extra in (class_name, merged.pop("class", None)):
        if extra:
            classes.append(str(extra).strip())

    return Markup(f'<div class="{escape(" ".join(c for c in classes if c))}"{_render_attrs(merged)}></div>')
