"""
Git Data API: blobs, commits, references, tags and trees.
"""
from typing import Any, List, Optional

from GitHubApi.GitHub.Resource.Base import Resource
from GitHubApi.Utility.payload import person
from GitHubApi.Utility.validators import validate_arguments


class Blob(Resource):
    LINKS = {"BLOB": "repos/:owner/:repo/git/blobs"}

    @validate_arguments
    def get_blob(self, owner: str, repo: str, sha: str) -> Any:
        return self._get(self._link("BLOB", sha, owner=owner, repo=repo))

    @validate_arguments
    def create_blob(self, owner: str, repo: str, content: str, encoding: str = "utf-8") -> Any:
        """Create a blob; `encoding` is "utf-8" or "base64"."""
        options = {"content": content, "encoding": encoding}
        return self._post(self._link("BLOB", owner=owner, repo=repo), options)


class Commit(Resource):
    LINKS = {"COMMIT": "repos/:owner/:repo/git/commits"}

    @validate_arguments
    def get_commit(self, owner: str, repo: str, sha: str) -> Any:
        return self._get(self._link("COMMIT", sha, owner=owner, repo=repo))

    @validate_arguments
    def create_commit(
        self,
        owner: str,
        repo: str,
        message: str,
        tree: str,
        parents: List[str],
        author_name: Optional[str] = None,
        author_email: Optional[str] = None,
        author_date: Optional[str] = None,
        committer_name: Optional[str] = None,
        committer_email: Optional[str] = None,
        committer_date: Optional[str] = None,
    ) -> Any:
        """Create a commit object pointing at `tree` with the given parent SHAs.

        Author and committer fields are sent nested (``author[name]`` ...) and
        only when set.
        """
        options = {
            "message": message,
            "tree": tree,
            "parents": parents,
            "author": person(author_name, author_email, author_date),
            "committer": person(committer_name, committer_email, committer_date),
        }
        return self._post(self._link("COMMIT", owner=owner, repo=repo), options)


class Reference(Resource):
    LINKS = {"REFERENCE": "repos/:owner/:repo/git/refs"}

    @validate_arguments
    def get_reference(self, owner: str, repo: str, ref: Optional[str] = None) -> Any:
        """Get one reference (``heads/master``), or all of them when `ref` is omitted."""
        if ref:
            return self._get(self._link("REFERENCE", ref, owner=owner, repo=repo))
        return self._get(self._link("REFERENCE", owner=owner, repo=repo))

    @validate_arguments
    def create_reference(self, owner: str, repo: str, ref: str, sha: str) -> Any:
        options = {"ref": ref, "sha": sha}
        return self._post(self._link("REFERENCE", owner=owner, repo=repo), options)

    @validate_arguments
    def update_reference(self, owner: str, repo: str, ref: str, sha: str, force: bool = False) -> Any:
        options = {"sha": sha, "force": force}
        return self._patch(self._link("REFERENCE", ref, owner=owner, repo=repo), options)

    @validate_arguments
    def delete_reference(self, owner: str, repo: str, ref: str) -> Any:
        return self._delete(self._link("REFERENCE", ref, owner=owner, repo=repo))


class Tag(Resource):
    LINKS = {"TAG": "repos/:owner/:repo/git/tags"}

    @validate_arguments
    def get_tag(self, owner: str, repo: str, sha: str) -> Any:
        return self._get(self._link("TAG", sha, owner=owner, repo=repo))

    @validate_arguments
    def create_tag(
        self,
        owner: str,
        repo: str,
        tag: str,
        message: str,
        sha: str,
        type: str,
        tagger_name: str,
        tagger_email: str,
        tagger_date: str,
    ) -> Any:
        """Create an annotated tag object; `type` is the tagged object's type."""
        options = {
            "tag": tag,
            "message": message,
            "object": sha,
            "type": type,
            "tagger": person(tagger_name, tagger_email, tagger_date),
        }
        return self._post(self._link("TAG", owner=owner, repo=repo), options)


class Tree(Resource):
    LINKS = {"TREE": "repos/:owner/:repo/git/trees"}

    @validate_arguments
    def get_tree(self, owner: str, repo: str, sha: str, recursive: bool = False) -> Any:
        options = {"recursive": recursive}
        return self._get(self._link("TREE", sha, owner=owner, repo=repo), options)

    @validate_arguments
    def create_tree(
        self,
        owner: str,
        repo: str,
        path: str,
        mode: str,
        type: str,
        sha: str,
        content: str,
        base_tree: Optional[str] = None,
    ) -> Any:
        options = {
            "tree": {
                "path": path,
                "mode": mode,
                "type": type,
                "sha": sha,
                "content": content,
            },
            "base_tree": base_tree,
        }
        return self._post(self._link("TREE", owner=owner, repo=repo), options)


class Data(Resource):
    """Entry point for the git data sub-clients."""

    def blob(self) -> Blob:
        return Blob(self.client)

    def commit(self) -> Commit:
        return Commit(self.client)

    def reference(self) -> Reference:
        return Reference(self.client)

    def tag(self) -> Tag:
        return Tag(self.client)

    def tree(self) -> Tree:
        return Tree(self.client)
