"""
Gists API.
"""
from typing import Any, Dict, Optional

from GitHubApi.GitHub.Resource.Base import Identifier, Resource
from GitHubApi.Utility.validators import validate_arguments


class Comment(Resource):
    LINKS = {"COMMENTS": "gists/:gist_id/comments"}

    @validate_arguments
    def get_comments(self, gist_id: Identifier) -> Any:
        return self._get(self._link("COMMENTS", gist_id=gist_id))

    @validate_arguments
    def get_comment(self, gist_id: Identifier, comment_id: Identifier) -> Any:
        return self._get(self._link("COMMENTS", comment_id, gist_id=gist_id))

    @validate_arguments
    def create_comment(self, gist_id: Identifier, body: str) -> Any:
        return self._post(self._link("COMMENTS", gist_id=gist_id), {"body": body})

    @validate_arguments
    def edit_comment(self, gist_id: Identifier, comment_id: Identifier, body: str) -> Any:
        return self._patch(self._link("COMMENTS", comment_id, gist_id=gist_id), {"body": body})

    @validate_arguments
    def delete_comment(self, gist_id: Identifier, comment_id: Identifier) -> Any:
        return self._delete(self._link("COMMENTS", comment_id, gist_id=gist_id))


class Gist(Resource):
    LINKS = {
        "USER_GISTS": "users/:user/gists",
        "GISTS": "gists",
        "GIST": "gists/:id",
        "PUBLIC_GISTS": "gists/public",
        "STARRED_GISTS": "gists/starred",
        "STAR": "gists/:id/star",
        "FORKS": "gists/:id/forks",
    }

    @validate_arguments
    def get_gists(self, user: Optional[str] = None, since: Optional[str] = None) -> Any:
        """Gists of `user`, or of the authenticated user when omitted."""
        if user:
            link = self._link("USER_GISTS", user=user)
        else:
            link = self._link("GISTS")
        return self._get(link, {"since": since})

    @validate_arguments
    def get_public_gists(self, since: Optional[str] = None) -> Any:
        return self._get(self._link("PUBLIC_GISTS"), {"since": since})

    @validate_arguments
    def get_starred_gists(self, since: Optional[str] = None) -> Any:
        return self._get(self._link("STARRED_GISTS"), {"since": since})

    @validate_arguments
    def get_gist(self, gist_id: Identifier) -> Any:
        return self._get(self._link("GIST", id=gist_id))

    @validate_arguments
    def create_gist(self, files: Dict[str, Any], description: Optional[str] = None, public: bool = False) -> Any:
        """Create a gist.

        `files` maps file names to ``{"content": ...}`` objects.
        """
        options = {
            "files": files,
            "description": description,
            "public": public,
        }
        return self._post(self._link("GISTS"), options)

    @validate_arguments
    def edit_gist(
        self,
        gist_id: Identifier,
        description: Optional[str] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Any:
        options = {"description": description, "files": files}
        return self._patch(self._link("GIST", id=gist_id), options)

    @validate_arguments
    def is_starred(self, gist_id: Identifier) -> Any:
        return self._get(self._link("STAR", id=gist_id))

    @validate_arguments
    def star_gist(self, gist_id: Identifier) -> Any:
        return self._put(self._link("STAR", id=gist_id))

    @validate_arguments
    def unstar_gist(self, gist_id: Identifier) -> Any:
        return self._delete(self._link("STAR", id=gist_id))

    @validate_arguments
    def fork_gist(self, gist_id: Identifier) -> Any:
        return self._post(self._link("FORKS", id=gist_id))

    @validate_arguments
    def delete_gist(self, gist_id: Identifier) -> Any:
        return self._delete(self._link("GIST", id=gist_id))

    def comment(self) -> Comment:
        return Comment(self.client)
