"""Transport configuration read from the environment.

Peer certificates are verified unless GITHUB_VERIFY_SSL is set to false.
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

API_ROOT = "https://api.github.com/"
USER_AGENT = "github-api-python/1.0"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _read_float(environ: Mapping[str, str], key: str, default: float) -> float:
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{key} must be a number of seconds, got {raw!r}")


def _read_bool(environ: Mapping[str, str], key: str, default: bool) -> bool:
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{key} must be true or false, got {raw!r}")


"""Settings handed to every request sent by `GitHubClient`."""
@dataclass
class ClientConfig:
    api_root: str = API_ROOT
    connect_timeout: float = 10.0
    read_timeout: float = 60.0
    verify_ssl: bool = True
    user_agent: str = USER_AGENT

    @property
    def timeout(self):
        return (self.connect_timeout, self.read_timeout)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        environ = os.environ if environ is None else environ
        return cls(
            api_root=environ.get("GITHUB_API_ROOT") or API_ROOT,
            connect_timeout=_read_float(environ, "GITHUB_CONNECT_TIMEOUT", 10.0),
            read_timeout=_read_float(environ, "GITHUB_READ_TIMEOUT", 60.0),
            verify_ssl=_read_bool(environ, "GITHUB_VERIFY_SSL", True),
            user_agent=environ.get("GITHUB_USER_AGENT") or USER_AGENT,
        )
