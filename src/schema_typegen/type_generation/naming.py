"""Identifier and type-name formatting helpers."""

from __future__ import annotations

import json
import re

_NAME_SEPARATORS = re.compile(r"[ _-]")
_PLAIN_IDENTIFIER = re.compile(r"[A-Za-z_$][0-9A-Za-z_$]*")


def pascal_case(name: str) -> str:
    """Turn a collection identifier into a type name.

    Splits on spaces, underscores and hyphens, upper-cases the first character
    of each segment and joins them without a separator. The rest of every
    segment is kept as-is, so `blog_posts` becomes `BlogPosts` and
    `directus_userRoles` becomes `DirectusUserRoles`.
    """
    return "".join(segment[:1].upper() + segment[1:] for segment in _NAME_SEPARATORS.split(name))


def member_identifier(name: str) -> str:
    """Return a member name, quoted when it is not a plain identifier."""
    if _PLAIN_IDENTIFIER.fullmatch(name):
        return name
    return json.dumps(name, ensure_ascii=False)


def literal(value: object) -> str:
    """Render a choice value as a literal type."""
    if value is None or isinstance(value, (bool, int, float)):
        return json.dumps(value)
    return json.dumps(str(value), ensure_ascii=False)


def literal_union(values: list[object] | tuple[object, ...]) -> str:
    """Join literal values with `|`, keeping the first occurrence of duplicates."""
    rendered: list[str] = []
    for value in values:
        text = literal(value)
        if text not in rendered:
            rendered.append(text)
    return " | ".join(rendered)
