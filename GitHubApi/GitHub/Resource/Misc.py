"""
Miscellaneous endpoints: emojis, gitignore templates, markdown, meta, rate limit.
"""
from typing import Any, Optional

from GitHubApi.GitHub.Resource.Base import Resource
from GitHubApi.Utility.validators import validate_arguments


class Emojis(Resource):
    LINKS = {"EMOJIS": "emojis"}

    @validate_arguments
    def get_emojis(self) -> Any:
        return self._get(self._link("EMOJIS"))


class Gitignore(Resource):
    LINKS = {"TEMPLATES": "gitignore/templates"}

    @validate_arguments
    def get_templates(self, template: Optional[str] = None) -> Any:
        """List template names, or get the source of `template`."""
        if template:
            return self._get(self._link("TEMPLATES", template))
        return self._get(self._link("TEMPLATES"))


class Markdown(Resource):
    LINKS = {"MARKDOWN": "markdown"}

    @validate_arguments
    def render_markdown(
        self,
        text: str,
        mode: Optional[str] = None,
        context: Optional[str] = None,
        raw: bool = False,
    ) -> Any:
        """Render `text` as HTML.

        `mode` ("markdown" or "gfm") and `context` are ignored by the raw
        endpoint, so they are only sent when `raw` is False.
        """
        if raw:
            return self._post(self._link("MARKDOWN", "raw"), {"text": text})
        options = {"text": text, "mode": mode, "context": context}
        return self._post(self._link("MARKDOWN"), options)


class Meta(Resource):
    LINKS = {"META": "meta"}

    @validate_arguments
    def get_meta(self) -> Any:
        return self._get(self._link("META"))


class RateLimit(Resource):
    LINKS = {"RATE_LIMIT": "rate_limit"}

    @validate_arguments
    def get_rate_limit_status(self) -> Any:
        return self._get(self._link("RATE_LIMIT"))


class Misc(Resource):
    """Entry point for the miscellaneous sub-clients."""

    def emojis(self) -> Emojis:
        return Emojis(self.client)

    def gitignore(self) -> Gitignore:
        return Gitignore(self.client)

    def markdown(self) -> Markdown:
        return Markdown(self.client)

    def meta(self) -> Meta:
        return Meta(self.client)

    def rate_limit(self) -> RateLimit:
        return RateLimit(self.client)
