"""
Repositories API and its sub-clients (collaborators, commit comments, commits,
contents, downloads, forks, hooks, deploy keys, merges, releases, statistics,
statuses).
"""
from typing import Any, Dict, List, Optional

from GitHubApi.GitHub.Resource.Base import Identifier, Resource
from GitHubApi.Utility.payload import person
from GitHubApi.Utility.validators import validate_arguments


class Collaborator(Resource):
    LINKS = {"COLLABORATORS": "repos/:owner/:repo/collaborators"}

    @validate_arguments
    def get_collaborators(self, owner: str, repo: str) -> Any:
        return self._get(self._link("COLLABORATORS", owner=owner, repo=repo))

    @validate_arguments
    def is_collaborator(self, owner: str, repo: str, user: str) -> Any:
        return self._get(self._link("COLLABORATORS", user, owner=owner, repo=repo))

    @validate_arguments
    def add_collaborator(self, owner: str, repo: str, user: str) -> Any:
        return self._put(self._link("COLLABORATORS", user, owner=owner, repo=repo))

    @validate_arguments
    def remove_collaborator(self, owner: str, repo: str, user: str) -> Any:
        return self._delete(self._link("COLLABORATORS", user, owner=owner, repo=repo))


class Comment(Resource):
    LINKS = {
        "COMMENTS": "repos/:owner/:repo/comments",
        "COMMIT_COMMENTS": "repos/:owner/:repo/commits/:sha/comments",
    }

    @validate_arguments
    def get_commit_comments(self, owner: str, repo: str, sha: Optional[str] = None) -> Any:
        """Comments on one commit, or on the whole repository when `sha` is omitted."""
        if sha:
            return self._get(self._link("COMMIT_COMMENTS", owner=owner, repo=repo, sha=sha))
        return self._get(self._link("COMMENTS", owner=owner, repo=repo))

    @validate_arguments
    def create_commit_comment(
        self,
        owner: str,
        repo: str,
        sha: str,
        body: str,
        path: Optional[str] = None,
        position: Optional[int] = None,
    ) -> Any:
        options = {"body": body, "path": path, "position": position}
        link = self._link("COMMIT_COMMENTS", owner=owner, repo=repo, sha=sha)
        return self._post(link, options)

    @validate_arguments
    def get_commit_comment(self, owner: str, repo: str, comment_id: Identifier) -> Any:
        return self._get(self._link("COMMENTS", comment_id, owner=owner, repo=repo))

    @validate_arguments
    def update_commit_comment(self, owner: str, repo: str, comment_id: Identifier, body: str) -> Any:
        link = self._link("COMMENTS", comment_id, owner=owner, repo=repo)
        return self._patch(link, {"body": body})

    @validate_arguments
    def delete_commit_comment(self, owner: str, repo: str, comment_id: Identifier) -> Any:
        return self._delete(self._link("COMMENTS", comment_id, owner=owner, repo=repo))


class Commit(Resource):
    LINKS = {
        "COMMITS": "repos/:owner/:repo/commits",
        "COMPARE": "repos/:owner/:repo/compare/:base...:head",
    }

    @validate_arguments
    def get_commits(
        self,
        owner: str,
        repo: str,
        sha: Optional[str] = None,
        path: Optional[str] = None,
        author: Optional[str] = None,
        since: Optional[str] = None,
        until: Optional[str] = None,
    ) -> Any:
        options = {
            "sha": sha,
            "path": path,
            "author": author,
            "since": since,
            "until": until,
        }
        return self._get(self._link("COMMITS", owner=owner, repo=repo), options)

    @validate_arguments
    def get_commit(self, owner: str, repo: str, sha: str) -> Any:
        return self._get(self._link("COMMITS", sha, owner=owner, repo=repo))

    @validate_arguments
    def compare_commits(self, owner: str, repo: str, base: str, head: str) -> Any:
        link = self._link("COMPARE", owner=owner, repo=repo, base=base, head=head)
        return self._get(link)


class Content(Resource):
    """Files and directories of a repository, plus archive links."""

    LINKS = {
        "README": "repos/:owner/:repo/readme",
        "CONTENTS": "repos/:owner/:repo/contents",
        "CONTENT": "repos/:owner/:repo/contents/:path",
        "ARCHIVE": "repos/:owner/:repo/:archive_format/:ref",
    }

    @validate_arguments
    def get_readme(self, owner: str, repo: str, ref: Optional[str] = None) -> Any:
        return self._get(self._link("README", owner=owner, repo=repo), {"ref": ref})

    @validate_arguments
    def get_contents(self, owner: str, repo: str, path: str = "", ref: Optional[str] = None) -> Any:
        """Get a file or directory listing; an empty `path` lists the repository root."""
        if path:
            link = self._link("CONTENT", owner=owner, repo=repo, path=path)
        else:
            link = self._link("CONTENTS", owner=owner, repo=repo)
        return self._get(link, {"ref": ref})

    def _write_options(self, message, branch, author_name, author_email, committer_name, committer_email):
        return {
            "message": message,
            "branch": branch,
            "author": person(author_name, author_email),
            "committer": person(committer_name, committer_email),
        }

    @validate_arguments
    def create_file(
        self,
        owner: str,
        repo: str,
        path: str,
        message: str,
        content: str,
        branch: Optional[str] = None,
        author_name: Optional[str] = None,
        author_email: Optional[str] = None,
        committer_name: Optional[str] = None,
        committer_email: Optional[str] = None,
    ) -> Any:
        """Create `path` with base64 `content`."""
        options = self._write_options(message, branch, author_name, author_email, committer_name, committer_email)
        options["content"] = content
        return self._put(self._link("CONTENT", owner=owner, repo=repo, path=path), options)

    @validate_arguments
    def update_file(
        self,
        owner: str,
        repo: str,
        path: str,
        message: str,
        content: str,
        sha: str,
        branch: Optional[str] = None,
        author_name: Optional[str] = None,
        author_email: Optional[str] = None,
        committer_name: Optional[str] = None,
        committer_email: Optional[str] = None,
    ) -> Any:
        """Replace `path` with base64 `content`; `sha` is the blob being replaced."""
        options = self._write_options(message, branch, author_name, author_email, committer_name, committer_email)
        options["content"] = content
        options["sha"] = sha
        return self._put(self._link("CONTENT", owner=owner, repo=repo, path=path), options)

    @validate_arguments
    def delete_file(
        self,
        owner: str,
        repo: str,
        path: str,
        message: str,
        sha: str,
        branch: Optional[str] = None,
        author_name: Optional[str] = None,
        author_email: Optional[str] = None,
        committer_name: Optional[str] = None,
        committer_email: Optional[str] = None,
    ) -> Any:
        options = self._write_options(message, branch, author_name, author_email, committer_name, committer_email)
        options["sha"] = sha
        return self._delete(self._link("CONTENT", owner=owner, repo=repo, path=path), options)

    @validate_arguments
    def get_archive_link(self, owner: str, repo: str, format: str = "tarball", ref: str = "master") -> Any:
        """Return ``{"status", "location"}`` for the archive download redirect.

        The redirect is not followed, so the archive itself is never fetched.
        """
        link = self._link("ARCHIVE", owner=owner, repo=repo, archive_format=format, ref=ref)
        return self._get(link, allow_redirects=False)


class Download(Resource):
    LINKS = {"DOWNLOADS": "repos/:owner/:repo/downloads"}

    @validate_arguments
    def get_downloads(self, owner: str, repo: str) -> Any:
        return self._get(self._link("DOWNLOADS", owner=owner, repo=repo))

    @validate_arguments
    def get_download(self, owner: str, repo: str, download_id: Identifier) -> Any:
        return self._get(self._link("DOWNLOADS", download_id, owner=owner, repo=repo))

    @validate_arguments
    def delete_download(self, owner: str, repo: str, download_id: Identifier) -> Any:
        return self._delete(self._link("DOWNLOADS", download_id, owner=owner, repo=repo))


class Fork(Resource):
    LINKS = {"FORKS": "repos/:owner/:repo/forks"}

    @validate_arguments
    def get_forks(self, owner: str, repo: str, sort: str = "newest") -> Any:
        return self._get(self._link("FORKS", owner=owner, repo=repo), {"sort": sort})

    @validate_arguments
    def create_fork(self, owner: str, repo: str, organization: Optional[str] = None) -> Any:
        """Fork into the authenticated account, or into `organization`."""
        options = {"organization": organization}
        return self._post(self._link("FORKS", owner=owner, repo=repo), options)


class Hook(Resource):
    LINKS = {"HOOKS": "repos/:owner/:repo/hooks"}

    @validate_arguments
    def get_hooks(self, owner: str, repo: str) -> Any:
        return self._get(self._link("HOOKS", owner=owner, repo=repo))

    @validate_arguments
    def get_hook(self, owner: str, repo: str, hook_id: Identifier) -> Any:
        return self._get(self._link("HOOKS", hook_id, owner=owner, repo=repo))

    @validate_arguments
    def create_hook(
        self,
        owner: str,
        repo: str,
        name: str,
        config: Optional[Dict[str, Any]] = None,
        events: Optional[List[str]] = None,
        active: Optional[bool] = None,
    ) -> Any:
        """Create a hook; `events` defaults to ``["push"]``."""
        options = {
            "name": name,
            "config": config,
            "events": events if events is not None else ["push"],
            "active": active,
        }
        return self._post(self._link("HOOKS", owner=owner, repo=repo), options)

    @validate_arguments
    def edit_hook(
        self,
        owner: str,
        repo: str,
        hook_id: Identifier,
        config: Optional[Dict[str, Any]] = None,
        events: Optional[List[str]] = None,
        add_events: Optional[List[str]] = None,
        remove_events: Optional[List[str]] = None,
        active: Optional[bool] = None,
    ) -> Any:
        options = {
            "config": config,
            "events": events,
            "add_events": add_events,
            "remove_events": remove_events,
            "active": active,
        }
        return self._patch(self._link("HOOKS", hook_id, owner=owner, repo=repo), options)

    @validate_arguments
    def test_hook(self, owner: str, repo: str, hook_id: Identifier) -> Any:
        """Trigger the hook with the latest push."""
        return self._post(self._link("HOOKS", hook_id, "tests", owner=owner, repo=repo))

    @validate_arguments
    def delete_hook(self, owner: str, repo: str, hook_id: Identifier) -> Any:
        return self._delete(self._link("HOOKS", hook_id, owner=owner, repo=repo))


class Key(Resource):
    LINKS = {"KEYS": "repos/:owner/:repo/keys"}

    @validate_arguments
    def get_keys(self, owner: str, repo: str) -> Any:
        return self._get(self._link("KEYS", owner=owner, repo=repo))

    @validate_arguments
    def get_key(self, owner: str, repo: str, key_id: Identifier) -> Any:
        return self._get(self._link("KEYS", key_id, owner=owner, repo=repo))

    @validate_arguments
    def create_key(self, owner: str, repo: str, title: str, key: str) -> Any:
        options = {"title": title, "key": key}
        return self._post(self._link("KEYS", owner=owner, repo=repo), options)

    @validate_arguments
    def edit_key(self, owner: str, repo: str, key_id: Identifier, title: str, key: str) -> Any:
        options = {"title": title, "key": key}
        return self._patch(self._link("KEYS", key_id, owner=owner, repo=repo), options)

    @validate_arguments
    def delete_key(self, owner: str, repo: str, key_id: Identifier) -> Any:
        return self._delete(self._link("KEYS", key_id, owner=owner, repo=repo))


class Merge(Resource):
    LINKS = {"MERGES": "repos/:owner/:repo/merges"}

    @validate_arguments
    def merge(self, owner: str, repo: str, base: str, head: str, message: Optional[str] = None) -> Any:
        """Merge `head` into the `base` branch."""
        options = {"base": base, "head": head, "commit_message": message}
        return self._post(self._link("MERGES", owner=owner, repo=repo), options)


class Release(Resource):
    LINKS = {
        "RELEASES": "repos/:owner/:repo/releases",
        "ASSETS": "repos/:owner/:repo/releases/:id/assets",
        "ASSET": "repos/:owner/:repo/releases/assets",
    }

    @validate_arguments
    def get_releases(self, owner: str, repo: str) -> Any:
        return self._get(self._link("RELEASES", owner=owner, repo=repo))

    @validate_arguments
    def get_release(self, owner: str, repo: str, release_id: Identifier) -> Any:
        return self._get(self._link("RELEASES", release_id, owner=owner, repo=repo))

    @validate_arguments
    def create_release(
        self,
        owner: str,
        repo: str,
        tag_name: str,
        target_commitish: Optional[str] = None,
        name: Optional[str] = None,
        body: Optional[str] = None,
        draft: bool = False,
        prerelease: bool = False,
    ) -> Any:
        options = {
            "tag_name": tag_name,
            "target_commitish": target_commitish,
            "name": name,
            "body": body,
            "draft": draft,
            "prerelease": prerelease,
        }
        return self._post(self._link("RELEASES", owner=owner, repo=repo), options)

    @validate_arguments
    def edit_release(
        self,
        owner: str,
        repo: str,
        release_id: Identifier,
        tag_name: Optional[str] = None,
        target_commitish: Optional[str] = None,
        name: Optional[str] = None,
        body: Optional[str] = None,
        draft: bool = False,
        prerelease: bool = False,
    ) -> Any:
        options = {
            "tag_name": tag_name,
            "target_commitish": target_commitish,
            "name": name,
            "body": body,
            "draft": draft,
            "prerelease": prerelease,
        }
        return self._patch(self._link("RELEASES", release_id, owner=owner, repo=repo), options)

    @validate_arguments
    def delete_release(self, owner: str, repo: str, release_id: Identifier) -> Any:
        return self._delete(self._link("RELEASES", release_id, owner=owner, repo=repo))

    @validate_arguments
    def get_assets(self, owner: str, repo: str, release_id: Identifier) -> Any:
        return self._get(self._link("ASSETS", owner=owner, repo=repo, id=release_id))

    @validate_arguments
    def get_asset(self, owner: str, repo: str, asset_id: Identifier) -> Any:
        return self._get(self._link("ASSET", asset_id, owner=owner, repo=repo))

    @validate_arguments
    def edit_asset(self, owner: str, repo: str, asset_id: Identifier, name: str, label: Optional[str] = None) -> Any:
        options = {"name": name, "label": label}
        return self._patch(self._link("ASSET", asset_id, owner=owner, repo=repo), options)

    @validate_arguments
    def delete_asset(self, owner: str, repo: str, asset_id: Identifier) -> Any:
        return self._delete(self._link("ASSET", asset_id, owner=owner, repo=repo))


class Statistic(Resource):
    """Repository statistics; GitHub answers 202 while it computes them."""

    LINKS = {
        "CONTRIBUTORS": "repos/:owner/:repo/stats/contributors",
        "COMMIT_ACTIVITY": "repos/:owner/:repo/stats/commit_activity",
        "CODE_FREQUENCY": "repos/:owner/:repo/stats/code_frequency",
        "PARTICIPATION": "repos/:owner/:repo/stats/participation",
        "PUNCH_CARD": "repos/:owner/:repo/stats/punch_card",
    }

    @validate_arguments
    def get_contributors(self, owner: str, repo: str) -> Any:
        return self._get(self._link("CONTRIBUTORS", owner=owner, repo=repo))

    @validate_arguments
    def get_commit_activity(self, owner: str, repo: str) -> Any:
        return self._get(self._link("COMMIT_ACTIVITY", owner=owner, repo=repo))

    @validate_arguments
    def get_code_frequency(self, owner: str, repo: str) -> Any:
        return self._get(self._link("CODE_FREQUENCY", owner=owner, repo=repo))

    @validate_arguments
    def get_participation(self, owner: str, repo: str) -> Any:
        return self._get(self._link("PARTICIPATION", owner=owner, repo=repo))

    @validate_arguments
    def get_punch_card(self, owner: str, repo: str) -> Any:
        return self._get(self._link("PUNCH_CARD", owner=owner, repo=repo))


class Status(Resource):
    LINKS = {"STATUSES": "repos/:owner/:repo/statuses/:ref"}

    @validate_arguments
    def get_statuses(self, owner: str, repo: str, ref: str) -> Any:
        return self._get(self._link("STATUSES", owner=owner, repo=repo, ref=ref))

    @validate_arguments
    def create_status(
        self,
        owner: str,
        repo: str,
        sha: str,
        state: str,
        target_url: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Any:
        """Set a commit status; `state` is pending, success, error or failure."""
        options = {
            "state": state,
            "target_url": target_url,
            "description": description,
        }
        return self._post(self._link("STATUSES", owner=owner, repo=repo, ref=sha), options)


class Repository(Resource):
    LINKS = {
        "USER_REPOS": "user/repos",
        "USERS_REPOS": "users/:user/repos",
        "ORG_REPOS": "orgs/:org/repos",
        "REPOSITORIES": "repositories",
        "REPO": "repos/:owner/:repo",
        "CONTRIBUTORS": "repos/:owner/:repo/contributors",
        "LANGUAGES": "repos/:owner/:repo/languages",
        "TEAMS": "repos/:owner/:repo/teams",
        "TAGS": "repos/:owner/:repo/tags",
        "BRANCHES": "repos/:owner/:repo/branches",
        "BRANCH": "repos/:owner/:repo/branches/:branch",
    }

    @validate_arguments
    def get_repositories(
        self,
        user: Optional[str] = None,
        type: str = "all",
        sort: str = "full_name",
        direction: str = "asc",
    ) -> Any:
        """Repositories of `user`, or of the authenticated user when omitted."""
        options = {"type": type, "sort": sort, "direction": direction}
        if user:
            return self._get(self._link("USERS_REPOS", user=user), options)
        return self._get(self._link("USER_REPOS"), options)

    @validate_arguments
    def get_organization_repositories(self, org: str, type: str = "all") -> Any:
        return self._get(self._link("ORG_REPOS", org=org), {"type": type})

    @validate_arguments
    def get_public_repositories(self, since: Optional[Identifier] = None) -> Any:
        return self._get(self._link("REPOSITORIES"), {"since": since})

    @validate_arguments
    def create_repository(
        self,
        name: str,
        description: Optional[str] = None,
        org: Optional[str] = None,
        homepage: Optional[str] = None,
        private: bool = False,
        has_issues: bool = True,
        has_wiki: bool = True,
        has_downloads: bool = True,
        team_id: Optional[Identifier] = None,
        auto_init: bool = False,
        gitignore_template: Optional[str] = None,
    ) -> Any:
        """Create a repository for the authenticated user, or in `org`."""
        options = {
            "name": name,
            "description": description,
            "homepage": homepage,
            "private": private,
            "has_issues": has_issues,
            "has_wiki": has_wiki,
            "has_downloads": has_downloads,
            "team_id": team_id,
            "auto_init": auto_init,
            "gitignore_template": gitignore_template,
        }
        if org:
            return self._post(self._link("ORG_REPOS", org=org), options)
        return self._post(self._link("USER_REPOS"), options)

    @validate_arguments
    def get_repository(self, owner: str, repo: str) -> Any:
        return self._get(self._link("REPO", owner=owner, repo=repo))

    @validate_arguments
    def edit_repository(
        self,
        owner: str,
        repo: str,
        name: str,
        description: Optional[str] = None,
        homepage: Optional[str] = None,
        private: Optional[bool] = None,
        has_issues: bool = True,
        has_wiki: bool = True,
        has_downloads: bool = True,
        default_branch: Optional[str] = None,
    ) -> Any:
        options = {
            "name": name,
            "description": description,
            "homepage": homepage,
            "private": private,
            "has_issues": has_issues,
            "has_wiki": has_wiki,
            "has_downloads": has_downloads,
            "default_branch": default_branch,
        }
        return self._patch(self._link("REPO", owner=owner, repo=repo), options)

    @validate_arguments
    def get_contributors(self, owner: str, repo: str, anon: bool = False) -> Any:
        return self._get(self._link("CONTRIBUTORS", owner=owner, repo=repo), {"anon": anon})

    @validate_arguments
    def get_languages(self, owner: str, repo: str) -> Any:
        return self._get(self._link("LANGUAGES", owner=owner, repo=repo))

    @validate_arguments
    def get_teams(self, owner: str, repo: str) -> Any:
        return self._get(self._link("TEAMS", owner=owner, repo=repo))

    @validate_arguments
    def get_tags(self, owner: str, repo: str) -> Any:
        return self._get(self._link("TAGS", owner=owner, repo=repo))

    @validate_arguments
    def get_branches(self, owner: str, repo: str) -> Any:
        return self._get(self._link("BRANCHES", owner=owner, repo=repo))

    @validate_arguments
    def get_branch(self, owner: str, repo: str, branch: str) -> Any:
        return self._get(self._link("BRANCH", owner=owner, repo=repo, branch=branch))

    @validate_arguments
    def delete_repository(self, owner: str, repo: str) -> Any:
        return self._delete(self._link("REPO", owner=owner, repo=repo))

    def collaborator(self) -> Collaborator:
        return Collaborator(self.client)

    def comment(self) -> Comment:
        return Comment(self.client)

    def commit(self) -> Commit:
        return Commit(self.client)

    def content(self) -> Content:
        return Content(self.client)

    def download(self) -> Download:
        return Download(self.client)

    def fork(self) -> Fork:
        return Fork(self.client)

    def hook(self) -> Hook:
        return Hook(self.client)

    def key(self) -> Key:
        return Key(self.client)

    def merge(self) -> Merge:
        return Merge(self.client)

    def release(self) -> Release:
        return Release(self.client)

    def statistic(self) -> Statistic:
        return Statistic(self.client)

    def status(self) -> Status:
        return Status(self.client)
