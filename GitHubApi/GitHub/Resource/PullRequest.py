"""
Pull Requests API.
"""
from typing import Any, Optional

from GitHubApi.GitHub.Resource.Base import Identifier, Resource
from GitHubApi.Utility.validators import validate_arguments


class ReviewComment(Resource):
    LINKS = {
        "PULL_COMMENTS": "repos/:owner/:repo/pulls/:number/comments",
        "COMMENTS": "repos/:owner/:repo/pulls/comments",
    }

    @validate_arguments
    def get_comments(self, owner: str, repo: str, number: Identifier) -> Any:
        return self._get(self._link("PULL_COMMENTS", owner=owner, repo=repo, number=number))

    @validate_arguments
    def get_repository_comments(
        self,
        owner: str,
        repo: str,
        sort: str = "created",
        direction: str = "desc",
        since: Optional[str] = None,
    ) -> Any:
        options = {"sort": sort, "direction": direction, "since": since}
        return self._get(self._link("COMMENTS", owner=owner, repo=repo), options)

    @validate_arguments
    def get_comment(self, owner: str, repo: str, comment_id: Identifier) -> Any:
        return self._get(self._link("COMMENTS", comment_id, owner=owner, repo=repo))

    @validate_arguments
    def create_comment(
        self,
        owner: str,
        repo: str,
        number: Identifier,
        body: str,
        commit_id: str,
        path: str,
        position: int,
    ) -> Any:
        """Comment on line `position` of `path` in the diff at `commit_id`."""
        options = {
            "body": body,
            "commit_id": commit_id,
            "path": path,
            "position": position,
        }
        link = self._link("PULL_COMMENTS", owner=owner, repo=repo, number=number)
        return self._post(link, options)

    @validate_arguments
    def reply_comment(self, owner: str, repo: str, number: Identifier, body: str, in_reply_to: Identifier) -> Any:
        options = {"body": body, "in_reply_to": in_reply_to}
        link = self._link("PULL_COMMENTS", owner=owner, repo=repo, number=number)
        return self._post(link, options)

    @validate_arguments
    def edit_comment(self, owner: str, repo: str, comment_id: Identifier, body: str) -> Any:
        return self._patch(self._link("COMMENTS", comment_id, owner=owner, repo=repo), {"body": body})

    @validate_arguments
    def delete_comment(self, owner: str, repo: str, comment_id: Identifier) -> Any:
        return self._delete(self._link("COMMENTS", comment_id, owner=owner, repo=repo))


class PullRequest(Resource):
    LINKS = {
        "PULLS": "repos/:owner/:repo/pulls",
        "PULL": "repos/:owner/:repo/pulls/:number",
        "COMMITS": "repos/:owner/:repo/pulls/:number/commits",
        "FILES": "repos/:owner/:repo/pulls/:number/files",
        "MERGE": "repos/:owner/:repo/pulls/:number/merge",
    }

    @validate_arguments
    def get_pull_requests(
        self,
        owner: str,
        repo: str,
        state: str = "open",
        head: Optional[str] = None,
        base: Optional[str] = None,
    ) -> Any:
        options = {"state": state, "head": head, "base": base}
        return self._get(self._link("PULLS", owner=owner, repo=repo), options)

    @validate_arguments
    def get_pull_request(self, owner: str, repo: str, number: Identifier) -> Any:
        return self._get(self._link("PULL", owner=owner, repo=repo, number=number))

    @validate_arguments
    def create_pull_request(
        self,
        owner: str,
        repo: str,
        base: str,
        head: str,
        title: Optional[str] = None,
        body: Optional[str] = None,
        issue: Optional[Identifier] = None,
    ) -> Any:
        """Open a pull request from `head` into `base`.

        When `issue` is given the existing issue is turned into the pull
        request and `title`/`body` are not sent.
        """
        options = {"base": base, "head": head}
        if issue:
            options["issue"] = issue
        else:
            options["title"] = title
            options["body"] = body
        return self._post(self._link("PULLS", owner=owner, repo=repo), options)

    @validate_arguments
    def update_pull_request(
        self,
        owner: str,
        repo: str,
        number: Identifier,
        title: Optional[str] = None,
        body: Optional[str] = None,
        state: Optional[str] = None,
    ) -> Any:
        options = {"title": title, "body": body, "state": state}
        return self._patch(self._link("PULL", owner=owner, repo=repo, number=number), options)

    @validate_arguments
    def get_commits(self, owner: str, repo: str, number: Identifier) -> Any:
        return self._get(self._link("COMMITS", owner=owner, repo=repo, number=number))

    @validate_arguments
    def get_files(self, owner: str, repo: str, number: Identifier) -> Any:
        return self._get(self._link("FILES", owner=owner, repo=repo, number=number))

    @validate_arguments
    def is_merged(self, owner: str, repo: str, number: Identifier) -> Any:
        return self._get(self._link("MERGE", owner=owner, repo=repo, number=number))

    @validate_arguments
    def merge_pull_request(
        self,
        owner: str,
        repo: str,
        number: Identifier,
        commit_message: Optional[str] = None,
    ) -> Any:
        options = {"commit_message": commit_message}
        return self._put(self._link("MERGE", owner=owner, repo=repo, number=number), options)

    def review_comment(self) -> ReviewComment:
        return ReviewComment(self.client)
