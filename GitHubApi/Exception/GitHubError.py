"""GitHub API binding error classes."""
from typing import Optional


class GitHubError(Exception):

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

"""Raised before any request is sent when a method receives an argument of the wrong shape."""
class ArgumentError(GitHubError, TypeError):
    def __init__(self, message: str):
        super().__init__(message, 400)

"""Raised when an endpoint template still holds a placeholder after substitution."""
class TemplateError(GitHubError):
    def __init__(self, template: str, missing):
        self.template = template
        self.missing = list(missing)
        super().__init__(
            f"Template '{template}' has unresolved tokens: {', '.join(self.missing)}", 400
        )

"""Raised when GitHub answers with a body that is not JSON.
        Attributes:
            status_code: HTTP status of the response
            body: first bytes of the raw body
"""
class ResponseError(GitHubError):
    def __init__(self, status_code: int, body: str = ""):
        self.body = body
        super().__init__(f"GitHub API returned a non-JSON response ({status_code})", status_code)
