from typing import Any, List, Mapping, Optional, Tuple


def validate_callback_args(args: Mapping[str, Any]) -> Tuple[str, Optional[str]]:
    error = args.get("error")
    if error:
        description = args.get("error_description") or error
        raise ValueError(f"Authorization refused: {description}")
    code = args.get("code")
    if not code:
        raise ValueError("Query parameter 'code' is required")
    return code, args.get("state")


def parse_scope(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [s for s in raw.replace(",", " ").split() if s]


def extract_token(headers: Mapping[str, Any], args: Mapping[str, Any]) -> Optional[str]:
    """Token from ``Authorization: token ...`` / ``Bearer ...`` or the access_token argument."""
    auth = headers.get("Authorization") or ""
    scheme, _, value = auth.partition(" ")
    if scheme.lower() in ("token", "bearer") and value.strip():
        return value.strip()
    return args.get("access_token") or None
