"""Request option helpers: falsy filtering and form encoding."""
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import urlencode

Options = Union[Mapping[str, Any], Sequence[Any]]


def filter_options(options: Optional[Options]) -> Dict[Any, Any]:
    """Drop every option whose value is falsy.

    ``False``, ``0``, ``""``, ``None`` and empty containers are all treated as
    "not provided", so an explicit ``False`` or ``0`` can never be sent.
    A list is keyed by position, the way label and email payloads are sent.
    """
    if not options:
        return {}
    if isinstance(options, Mapping):
        items = options.items()
    else:
        items = enumerate(options)
    return {key: value for key, value in items if value}


def _flatten(prefix: str, value: Any, pairs: List[Tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            _flatten(f"{prefix}[{key}]", item, pairs)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _flatten(f"{prefix}[{index}]", item, pairs)
    elif isinstance(value, bool):
        pairs.append((prefix, "1" if value else "0"))
    else:
        pairs.append((prefix, str(value)))


def encode_payload(payload: Mapping[Any, Any]) -> str:
    """URL-encode `payload`, nesting mappings as ``key[sub]`` and lists as ``key[0]``."""
    pairs: List[Tuple[str, str]] = []
    for key, value in payload.items():
        _flatten(str(key), value, pairs)
    return urlencode(pairs)


def person(name: Optional[str] = None, email: Optional[str] = None, date: Optional[str] = None) -> Optional[Dict[str, str]]:
    """Build an author/committer/tagger object, or None when nothing is set."""
    fields = filter_options({"name": name, "email": email, "date": date})
    return fields or None
