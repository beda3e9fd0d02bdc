"""Placeholder interpolation for automation action config (``{{key}}`` tokens)."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

_TOKEN_RE = re.compile(r"\{\{(\w+)\}\}")


def render_value(value: Any) -> str:
    """String form of a data value as automation payloads expect it.

    Booleans render lowercase and integral floats drop the ``.0``, so
    ``True`` -> "true" and ``100.0`` -> "100".
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def interpolate(template: str | None, data: Mapping[str, Any]) -> str:
    """Replace ``{{key}}`` tokens with values from data.

    Present, non-null values are substituted with their rendered form. Absent
    or null keys keep the literal ``{{key}}`` token so a missing field shows up
    in the output instead of silently becoming blank. A template without
    tokens is returned unchanged; None or empty renders as "".

    Substitution is a single pass: a value that itself contains ``{{other}}``
    is inserted verbatim and not expanded. Interpolating the result again
    would expand it, so repeated interpolation is stable only for data whose
    values carry no tokens.
    """
    if not template:
        return ""

    def _replace(match: re.Match[str]) -> str:
        value = data.get(match.group(1))
        if value is None:
            return match.group(0)
        return render_value(value)

    return _TOKEN_RE.sub(_replace, template)
