"""
Shared request builder for every resource client.

Options are filtered, the access token is appended, and the encoded string is
placed in the query (GET, PUT, DELETE) or sent as a form body (POST, PATCH).
"""
from typing import Any, Optional
import logging
import requests

from GitHubApi.Events.event_dispatcher import EventDispatcher
from GitHubApi.Exception.GitHubError import ArgumentError, GitHubError, ResponseError
from GitHubApi.Utility.auth import get_github_token
from GitHubApi.Utility.config import ClientConfig
from GitHubApi.Utility.payload import Options, encode_payload, filter_options

logger = logging.getLogger(__name__)

QUERY_VERBS = ("GET", "PUT", "DELETE")
BODY_VERBS = ("POST", "PATCH")
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class GitHubClient:
    def __init__(
        self,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        config: Optional[ClientConfig] = None,
        dispatcher: Optional[EventDispatcher] = None,
    ):
        self.token = token or get_github_token()
        if not self.token:
            raise GitHubError("GitHub access token is not set (GITHUB_TOKEN)", 401)
        self.config = config or ClientConfig.from_env()
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": self.config.user_agent,
            "Accept": "application/vnd.github.v3+json",
        })
        self.dispatcher = dispatcher or EventDispatcher()

    def url_for(self, path: str) -> str:
        return self.config.api_root.rstrip("/") + "/" + path.lstrip("/")

    def build_query(self, options: Optional[Options] = None) -> str:
        payload = filter_options(options)
        payload["access_token"] = self.token
        return encode_payload(payload)

    def request(
        self,
        method: str,
        path: str,
        options: Optional[Options] = None,
        allow_redirects: bool = True,
    ) -> Any:
        method = method.upper()
        if method not in QUERY_VERBS + BODY_VERBS:
            raise ArgumentError(f"Unsupported HTTP method: {method}")

        url = self.url_for(path)
        query = self.build_query(options)
        headers = {}
        data = None
        if method in BODY_VERBS:
            data = query
            headers["Content-Type"] = FORM_CONTENT_TYPE
            target = url
        else:
            target = f"{url}{'&' if '?' in url else '?'}{query}"

        logger.debug("%s %s", method, url)
        self.dispatcher.dispatch("request", method=method, url=url)
        response = self.session.request(
            method,
            target,
            data=data,
            headers=headers,
            timeout=self.config.timeout,
            allow_redirects=allow_redirects,
            verify=self.config.verify_ssl,
        )
        self.dispatcher.dispatch("response", method=method, path=path, status_code=response.status_code)
        return self._handle_response(response, allow_redirects)

    def _handle_response(self, response: requests.Response, allow_redirects: bool) -> Any:
        if not allow_redirects and 300 <= response.status_code < 400:
            return {"status": response.status_code, "location": response.headers.get("Location")}
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            logger.debug("Non-JSON body from GitHub (status %s)", response.status_code)
            raise ResponseError(response.status_code, response.text[:200])

    def get(self, path: str, options: Optional[Options] = None, **kwargs) -> Any:
        return self.request("GET", path, options, **kwargs)

    def post(self, path: str, options: Optional[Options] = None) -> Any:
        return self.request("POST", path, options)

    def put(self, path: str, options: Optional[Options] = None) -> Any:
        return self.request("PUT", path, options)

    def patch(self, path: str, options: Optional[Options] = None) -> Any:
        return self.request("PATCH", path, options)

    def delete(self, path: str, options: Optional[Options] = None) -> Any:
        return self.request("DELETE", path, options)

    def close(self) -> None:
        self.session.close()
