"""Endpoint template helpers.

Templates are path strings such as ``repos/:owner/:repo/issues/:number``.
Substituted values are not escaped; callers pass path-safe segments.
"""
import re
from typing import Any, Iterable, List, Mapping, Tuple, Union

from GitHubApi.Exception.GitHubError import ArgumentError, TemplateError

TOKEN_PATTERN = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")

Substitutions = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def template_tokens(template: str) -> List[str]:
    return TOKEN_PATTERN.findall(template)


def check_identifier(name: str, value: Any) -> str:
    """Return `value` as a path segment, rejecting empty identifiers."""
    if value is None or isinstance(value, bool):
        raise ArgumentError(f"Path parameter '{name}' must be a string or integer, got {value!r}")
    segment = str(value)
    if not segment.strip():
        raise ArgumentError(f"Path parameter '{name}' must not be empty")
    return segment


def resolve_template(template: str, values: Substitutions) -> str:
    """Substitute ``:token`` placeholders in order.

    Each supplied value is applied once, left to right; text produced by an
    earlier substitution is never scanned again.
    """
    pairs = list(values.items()) if isinstance(values, Mapping) else list(values)
    # split keeps the tokens at odd indexes
    parts = TOKEN_PATTERN.split(template)
    for token, value in pairs:
        segment = None
        for index in range(1, len(parts), 2):
            if parts[index] == token:
                if segment is None:
                    segment = check_identifier(token, value)
                parts[index] = ("", segment)
    missing = [part for part in parts[1::2] if isinstance(part, str)]
    if missing:
        raise TemplateError(template, missing)
    return "".join(part[1] if isinstance(part, tuple) else part for part in parts)
