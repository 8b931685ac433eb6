"""Credential lookup helpers"""
import os
from typing import Optional, Tuple


def get_github_token() -> Optional[str]:
    return os.environ.get("GITHUB_TOKEN") or os.environ.get("GH_TOKEN")


def get_oauth_credentials() -> Tuple[Optional[str], Optional[str], Optional[str]]:
    """Return the OAuth app's (client id, client secret, redirect uri)."""
    return (
        os.environ.get("GITHUB_CLIENT_ID"),
        os.environ.get("GITHUB_CLIENT_SECRET"),
        os.environ.get("GITHUB_REDIRECT_URI"),
    )
