"""
Issues API: issues, assignees, comments, events, labels and milestones.
"""
from typing import Any, List, Optional

from GitHubApi.GitHub.Resource.Base import Identifier, Resource
from GitHubApi.Utility.validators import validate_arguments


class Assignee(Resource):
    LINKS = {"ASSIGNEES": "repos/:owner/:repo/assignees"}

    @validate_arguments
    def get_assignees(self, owner: str, repo: str, assignee: Optional[str] = None) -> Any:
        """List available assignees, or check a single `assignee`."""
        if assignee:
            return self._get(self._link("ASSIGNEES", assignee, owner=owner, repo=repo))
        return self._get(self._link("ASSIGNEES", owner=owner, repo=repo))


class Comment(Resource):
    LINKS = {
        "ISSUE_COMMENTS": "repos/:owner/:repo/issues/:number/comments",
        "REPO_COMMENTS": "repos/:owner/:repo/issues/comments",
    }

    @validate_arguments
    def get_issue_comments(self, owner: str, repo: str, number: Identifier) -> Any:
        return self._get(self._link("ISSUE_COMMENTS", owner=owner, repo=repo, number=number))

    @validate_arguments
    def get_repository_comments(
        self,
        owner: str,
        repo: str,
        comment_id: Optional[Identifier] = None,
        sort: str = "created",
        direction: str = "desc",
        since: Optional[str] = None,
    ) -> Any:
        """List the repository's issue comments, or get one by `comment_id`.

        Sorting options only apply to the listing.
        """
        if comment_id:
            return self._get(self._link("REPO_COMMENTS", comment_id, owner=owner, repo=repo))
        options = {"sort": sort, "direction": direction, "since": since}
        return self._get(self._link("REPO_COMMENTS", owner=owner, repo=repo), options)

    @validate_arguments
    def create_comment(self, owner: str, repo: str, number: Identifier, body: str) -> Any:
        link = self._link("ISSUE_COMMENTS", owner=owner, repo=repo, number=number)
        return self._post(link, {"body": body})

    @validate_arguments
    def edit_comment(self, owner: str, repo: str, comment_id: Identifier, body: str) -> Any:
        link = self._link("REPO_COMMENTS", comment_id, owner=owner, repo=repo)
        return self._patch(link, {"body": body})

    @validate_arguments
    def delete_comment(self, owner: str, repo: str, comment_id: Identifier) -> Any:
        return self._delete(self._link("REPO_COMMENTS", comment_id, owner=owner, repo=repo))


class Event(Resource):
    LINKS = {
        "ISSUE_EVENTS": "repos/:owner/:repo/issues/:number/events",
        "EVENTS": "repos/:owner/:repo/issues/events",
    }

    @validate_arguments
    def get_issue_events(self, owner: str, repo: str, number: Identifier) -> Any:
        return self._get(self._link("ISSUE_EVENTS", owner=owner, repo=repo, number=number))

    @validate_arguments
    def get_repository_events(self, owner: str, repo: str, event_id: Optional[Identifier] = None) -> Any:
        if event_id:
            return self._get(self._link("EVENTS", event_id, owner=owner, repo=repo))
        return self._get(self._link("EVENTS", owner=owner, repo=repo))


class Label(Resource):
    LINKS = {
        "LABELS": "repos/:owner/:repo/labels",
        "ISSUE_LABELS": "repos/:owner/:repo/issues/:number/labels",
        "MILESTONE_LABELS": "repos/:owner/:repo/milestones/:number/labels",
    }

    @validate_arguments
    def get_labels(self, owner: str, repo: str, name: Optional[str] = None) -> Any:
        if name:
            return self._get(self._link("LABELS", name, owner=owner, repo=repo))
        return self._get(self._link("LABELS", owner=owner, repo=repo))

    @validate_arguments
    def create_label(self, owner: str, repo: str, name: str, color: str) -> Any:
        options = {"name": name, "color": color}
        return self._post(self._link("LABELS", owner=owner, repo=repo), options)

    @validate_arguments
    def update_label(self, owner: str, repo: str, name: str, new_name: str, color: str) -> Any:
        options = {"name": new_name, "color": color}
        return self._patch(self._link("LABELS", name, owner=owner, repo=repo), options)

    @validate_arguments
    def delete_label(self, owner: str, repo: str, name: str) -> Any:
        return self._delete(self._link("LABELS", name, owner=owner, repo=repo))

    @validate_arguments
    def get_issue_labels(self, owner: str, repo: str, number: Identifier) -> Any:
        return self._get(self._link("ISSUE_LABELS", owner=owner, repo=repo, number=number))

    @validate_arguments
    def add_issue_labels(self, owner: str, repo: str, number: Identifier, labels: List[str]) -> Any:
        # the label names are the whole payload
        link = self._link("ISSUE_LABELS", owner=owner, repo=repo, number=number)
        return self._post(link, labels)

    @validate_arguments
    def remove_issue_label(self, owner: str, repo: str, number: Identifier, name: str) -> Any:
        link = self._link("ISSUE_LABELS", name, owner=owner, repo=repo, number=number)
        return self._delete(link)

    @validate_arguments
    def replace_issue_labels(self, owner: str, repo: str, number: Identifier, labels: List[str]) -> Any:
        link = self._link("ISSUE_LABELS", owner=owner, repo=repo, number=number)
        return self._put(link, labels)

    @validate_arguments
    def get_milestone_labels(self, owner: str, repo: str, number: Identifier) -> Any:
        return self._get(self._link("MILESTONE_LABELS", owner=owner, repo=repo, number=number))


class Milestone(Resource):
    LINKS = {"MILESTONES": "repos/:owner/:repo/milestones"}

    @validate_arguments
    def get_milestones(
        self,
        owner: str,
        repo: str,
        number: Optional[Identifier] = None,
        state: str = "open",
        sort: str = "due_date",
        direction: str = "desc",
    ) -> Any:
        if number:
            return self._get(self._link("MILESTONES", number, owner=owner, repo=repo))
        options = {"state": state, "sort": sort, "direction": direction}
        return self._get(self._link("MILESTONES", owner=owner, repo=repo), options)

    @validate_arguments
    def create_milestone(
        self,
        owner: str,
        repo: str,
        title: str,
        state: str = "open",
        description: Optional[str] = None,
        due_on: Optional[str] = None,
    ) -> Any:
        options = {
            "title": title,
            "state": state,
            "description": description,
            "due_on": due_on,
        }
        return self._post(self._link("MILESTONES", owner=owner, repo=repo), options)

    @validate_arguments
    def update_milestone(
        self,
        owner: str,
        repo: str,
        number: Identifier,
        title: str,
        state: str = "open",
        description: Optional[str] = None,
        due_on: Optional[str] = None,
    ) -> Any:
        options = {
            "title": title,
            "state": state,
            "description": description,
            "due_on": due_on,
        }
        return self._patch(self._link("MILESTONES", number, owner=owner, repo=repo), options)

    @validate_arguments
    def delete_milestone(self, owner: str, repo: str, number: Identifier) -> Any:
        return self._delete(self._link("MILESTONES", number, owner=owner, repo=repo))


class Issue(Resource):
    LINKS = {
        "ISSUES": "issues",
        "USER_ISSUES": "user/issues",
        "ORG_ISSUES": "orgs/:org/issues",
        "REPO_ISSUES": "repos/:owner/:repo/issues",
        "REPO_ISSUE": "repos/:owner/:repo/issues/:number",
    }

    @validate_arguments
    def get_issues(
        self,
        user: bool = True,
        org: Optional[str] = None,
        filter: str = "assigned",
        state: str = "open",
        labels: Optional[List[str]] = None,
        sort: str = "created",
        direction: str = "desc",
        since: Optional[str] = None,
    ) -> Any:
        """List issues across repositories.

        `org` selects an organization's issues; otherwise `user` picks the
        authenticated user's own repositories over every visible repository.
        """
        options = {
            "filter": filter,
            "state": state,
            "labels": ",".join(labels or []),
            "sort": sort,
            "direction": direction,
            "since": since,
        }
        if org:
            link = self._link("ORG_ISSUES", org=org)
        elif user:
            link = self._link("USER_ISSUES")
        else:
            link = self._link("ISSUES")
        return self._get(link, options)

    @validate_arguments
    def get_issue(self, owner: str, repo: str, number: Identifier) -> Any:
        return self._get(self._link("REPO_ISSUE", owner=owner, repo=repo, number=number))

    @validate_arguments
    def get_repository_issues(
        self,
        owner: str,
        repo: str,
        milestone: str = "*",
        state: str = "open",
        assignee: str = "*",
        creator: Optional[str] = None,
        mentioned: Optional[str] = None,
        labels: Optional[List[str]] = None,
        sort: str = "created",
        direction: str = "desc",
        since: Optional[str] = None,
    ) -> Any:
        options = {
            "milestone": milestone,
            "state": state,
            "assignee": assignee,
            "creator": creator,
            "mentioned": mentioned,
            "labels": ",".join(labels or []),
            "sort": sort,
            "direction": direction,
            "since": since,
        }
        return self._get(self._link("REPO_ISSUES", owner=owner, repo=repo), options)

    @validate_arguments
    def create_issue(
        self,
        owner: str,
        repo: str,
        title: str,
        body: str,
        assignee: Optional[str] = None,
        milestone: Optional[Identifier] = None,
        labels: Optional[List[str]] = None,
    ) -> Any:
        options = {
            "title": title,
            "body": body,
            "assignee": assignee,
            "milestone": milestone,
            "labels": labels,
        }
        return self._post(self._link("REPO_ISSUES", owner=owner, repo=repo), options)

    @validate_arguments
    def edit_issue(
        self,
        owner: str,
        repo: str,
        number: Identifier,
        title: str,
        body: str,
        assignee: Optional[str] = None,
        state: str = "open",
        milestone: Optional[Identifier] = None,
        labels: Optional[List[str]] = None,
    ) -> Any:
        options = {
            "title": title,
            "body": body,
            "assignee": assignee,
            "state": state,
            "milestone": milestone,
            "labels": labels,
        }
        link = self._link("REPO_ISSUE", owner=owner, repo=repo, number=number)
        return self._patch(link, options)

    def assignee(self) -> Assignee:
        return Assignee(self.client)

    def comment(self) -> Comment:
        return Comment(self.client)

    def event(self) -> Event:
        return Event(self.client)

    def label(self) -> Label:
        return Label(self.client)

    def milestone(self) -> Milestone:
        return Milestone(self.client)
