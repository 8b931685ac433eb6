"""
OAuth2 web flow against github.com: build the authorize URL, then exchange the
returned code for an access token.
"""
from typing import Any, Dict, List, Optional, Union
from urllib.parse import parse_qsl, urlencode, urlparse
import logging
import requests

from GitHubApi.Exception.GitHubError import ArgumentError, ResponseError
from GitHubApi.Utility.config import ClientConfig

logger = logging.getLogger(__name__)

REQUEST_URL = "https://github.com/login/oauth/authorize"
ACCESS_URL = "https://github.com/login/oauth/access_token"
USER_AGENT = "github-api-python/1.0 oauth"


class GitHubAuth:
    def __init__(
        self,
        key: str,
        secret: str,
        redirect: str,
        session: Optional[requests.Session] = None,
        config: Optional[ClientConfig] = None,
    ):
        for position, (name, value) in enumerate((("key", key), ("secret", secret)), 1):
            if not isinstance(value, str) or not value.strip():
                raise ArgumentError(f"Argument {position} ({name}) in GitHubAuth() must be a non-empty string")
        if not isinstance(redirect, str) or urlparse(redirect).scheme not in ("http", "https"):
            raise ArgumentError(f"Argument 3 (redirect) in GitHubAuth() must be an http(s) URL, got {redirect!r}")
        self.key = key
        self.secret = secret
        self.redirect = redirect
        self.config = config or ClientConfig.from_env()
        self.session = session or requests.Session()

    def get_login_url(self, scope: Optional[Union[str, List[str]]] = None, state: Optional[str] = None) -> str:
        """Authorize URL to send the user to; a list `scope` is space-joined."""
        if isinstance(scope, (list, tuple)):
            scope = " ".join(scope)
        query = {
            "response_type": "code",
            "client_id": self.key,
            "redirect_uri": self.redirect,
        }
        if scope:
            query["scope"] = scope
        if state:
            query["state"] = state
        return f"{REQUEST_URL}?{urlencode(query)}"

    def get_access(self, code: str) -> Dict[str, Any]:
        """Exchange `code` for a token mapping (``access_token``, ``scope``, ``token_type``).

        GitHub answers with an ``error`` entry instead of raising when the
        code is bad or expired; that mapping is returned unchanged. A body that
        is neither JSON nor a token form raises `ResponseError`.
        """
        if not isinstance(code, str) or not code.strip():
            raise ArgumentError("Argument 1 (code) in GitHubAuth.get_access() must be a non-empty string")
        payload = {
            "client_id": self.key,
            "client_secret": self.secret,
            "redirect_uri": self.redirect,
            "code": code,
            "grant_type": "authorization_code",
        }
        logger.info("Exchanging OAuth code for client %s", self.key)
        response = self.session.post(
            ACCESS_URL,
            data=payload,
            headers={"Accept": "application/json", "User-Agent": USER_AGENT},
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
        )
        try:
            result = response.json()
        except ValueError:
            result = dict(parse_qsl(response.text))
            if not 200 <= response.status_code < 300 or not ("access_token" in result or "error" in result):
                logger.error("Unreadable OAuth exchange response (status %s)", response.status_code)
                raise ResponseError(response.status_code, response.text[:200])
        if "error" in result:
            logger.info("OAuth exchange refused: %s", result.get("error"))
        return result

    def close(self) -> None:
        self.session.close()
