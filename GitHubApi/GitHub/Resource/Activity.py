"""
Activity API: events, feeds, notifications, starring and watching.
"""
from typing import Any, Optional

from GitHubApi.GitHub.Resource.Base import Identifier, Resource
from GitHubApi.Utility.validators import validate_arguments


class Event(Resource):
    LINKS = {
        "EVENTS": "events",
        "REPOSITORY": "repos/:owner/:repo/events",
        "ISSUE": "repos/:owner/:repo/issues/events",
        "NETWORK": "networks/:owner/:repo/events",
        "ORGANIZATION": "orgs/:org/events",
        "RECEIVED_EVENTS": "users/:user/received_events",
        "USER_EVENTS": "users/:user/events",
        "USER_ORG_EVENTS": "users/:user/events/orgs/:org",
    }

    @validate_arguments
    def get_public_events(self) -> Any:
        return self._get(self._link("EVENTS"))

    @validate_arguments
    def get_repository_events(self, owner: str, repo: str) -> Any:
        return self._get(self._link("REPOSITORY", owner=owner, repo=repo))

    @validate_arguments
    def get_issue_events(self, owner: str, repo: str) -> Any:
        return self._get(self._link("ISSUE", owner=owner, repo=repo))

    @validate_arguments
    def get_network_events(self, owner: str, repo: str) -> Any:
        return self._get(self._link("NETWORK", owner=owner, repo=repo))

    @validate_arguments
    def get_received_events(self, user: str, public: bool = False) -> Any:
        """Events received by watching repositories and following users.

        Private events are included when authenticated as `user`, unless
        `public` restricts the listing to public ones.
        """
        link = self._link("RECEIVED_EVENTS", user=user)
        return self._get(link + ("/public" if public else ""))

    @validate_arguments
    def get_user_events(self, user: str, public: bool = False) -> Any:
        link = self._link("USER_EVENTS", user=user)
        return self._get(link + ("/public" if public else ""))

    @validate_arguments
    def get_organization_events(self, org: str, user: Optional[str] = None) -> Any:
        """Public events of an organization, or `user`'s dashboard for it."""
        if user:
            link = self._link("USER_ORG_EVENTS", user=user, org=org)
        else:
            link = self._link("ORGANIZATION", org=org)
        return self._get(link)


class Feed(Resource):
    CONNECTION = "feeds"

    @validate_arguments
    def get_feed(self) -> Any:
        """List the Atom feeds available to the authenticated user."""
        return self._get("")


class Notification(Resource):
    LINKS = {
        "NOTIFICATION": "notifications",
        "REPO_NOTIFICATION": "repos/:owner/:repo/notifications",
        "THREAD": "notifications/threads/:id",
        "SUBSCRIPTION": "notifications/threads/:id/subscription",
    }

    def _notifications_link(self, owner: Optional[str], repo: Optional[str]) -> str:
        if owner and repo:
            return self._link("REPO_NOTIFICATION", owner=owner, repo=repo)
        return self._link("NOTIFICATION")

    @validate_arguments
    def get_notifications(
        self,
        owner: Optional[str] = None,
        repo: Optional[str] = None,
        all: bool = True,
        participating: bool = True,
        since: Optional[str] = None,
    ) -> Any:
        """List notifications, for one repository when `owner` and `repo` are both given."""
        options = {
            "all": all,
            "participating": participating,
            "since": since,
        }
        return self._get(self._notifications_link(owner, repo), options)

    @validate_arguments
    def mark_as_read(
        self,
        owner: Optional[str] = None,
        repo: Optional[str] = None,
        last_read_at: Optional[str] = None,
    ) -> Any:
        options = {"last_read_at": last_read_at}
        return self._put(self._notifications_link(owner, repo), options)

    @validate_arguments
    def mark_thread_as_read(self, thread_id: Identifier) -> Any:
        return self._patch(self._link("THREAD", id=thread_id))

    @validate_arguments
    def get_thread_subscription(self, thread_id: Identifier) -> Any:
        return self._get(self._link("SUBSCRIPTION", id=thread_id))

    @validate_arguments
    def set_thread_subscription(self, thread_id: Identifier, subscribed: bool, ignored: bool) -> Any:
        options = {"subscribed": subscribed, "ignored": ignored}
        return self._put(self._link("SUBSCRIPTION", id=thread_id), options)

    @validate_arguments
    def delete_thread_subscription(self, thread_id: Identifier) -> Any:
        return self._delete(self._link("SUBSCRIPTION", id=thread_id))


class Star(Resource):
    LINKS = {
        "STARGAZERS": "repos/:owner/:repo/stargazers",
        "USER_STARRED": "users/:user/starred",
        "STARRED": "user/starred",
        "STAR": "user/starred/:owner/:repo",
    }

    @validate_arguments
    def get_stargazers(self, owner: str, repo: str) -> Any:
        return self._get(self._link("STARGAZERS", owner=owner, repo=repo))

    @validate_arguments
    def get_starred(self, user: Optional[str] = None, sort: str = "created", direction: str = "desc") -> Any:
        """Repositories starred by `user`, or by the authenticated user."""
        options = {"sort": sort, "direction": direction}
        if user:
            link = self._link("USER_STARRED", user=user)
        else:
            link = self._link("STARRED")
        return self._get(link, options)

    @validate_arguments
    def is_starred(self, owner: str, repo: str) -> Any:
        return self._get(self._link("STAR", owner=owner, repo=repo))

    @validate_arguments
    def star_repository(self, owner: str, repo: str) -> Any:
        return self._put(self._link("STAR", owner=owner, repo=repo))

    @validate_arguments
    def unstar_repository(self, owner: str, repo: str) -> Any:
        return self._delete(self._link("STAR", owner=owner, repo=repo))


class Watch(Resource):
    LINKS = {
        "WATCHERS": "repos/:owner/:repo/subscribers",
        "USER_WATCHED": "users/:user/subscriptions",
        "WATCHED": "user/subscriptions",
        "REPO_SUBSCRIPTION": "repos/:owner/:repo/subscription",
        "USER_SUBSCRIPTION": "user/subscriptions/:owner/:repo",
    }

    @validate_arguments
    def get_watchers(self, owner: str, repo: str) -> Any:
        return self._get(self._link("WATCHERS", owner=owner, repo=repo))

    @validate_arguments
    def get_watched(self, user: Optional[str] = None) -> Any:
        if user:
            return self._get(self._link("USER_WATCHED", user=user))
        return self._get(self._link("WATCHED"))

    @validate_arguments
    def get_repository_subscription(self, owner: str, repo: str) -> Any:
        return self._get(self._link("REPO_SUBSCRIPTION", owner=owner, repo=repo))

    @validate_arguments
    def set_repository_subscription(self, owner: str, repo: str, subscribed: bool, ignored: bool) -> Any:
        options = {"subscribed": subscribed, "ignored": ignored}
        return self._put(self._link("REPO_SUBSCRIPTION", owner=owner, repo=repo), options)

    @validate_arguments
    def delete_repository_subscription(self, owner: str, repo: str) -> Any:
        return self._delete(self._link("REPO_SUBSCRIPTION", owner=owner, repo=repo))

    @validate_arguments
    def is_watching(self, owner: str, repo: str) -> Any:
        return self._get(self._link("USER_SUBSCRIPTION", owner=owner, repo=repo))

    @validate_arguments
    def watch_repository(self, owner: str, repo: str) -> Any:
        return self._put(self._link("USER_SUBSCRIPTION", owner=owner, repo=repo))

    @validate_arguments
    def unwatch_repository(self, owner: str, repo: str) -> Any:
        return self._delete(self._link("USER_SUBSCRIPTION", owner=owner, repo=repo))


class Activity(Resource):
    """Entry point for the activity sub-clients."""

    def event(self) -> Event:
        return Event(self.client)

    def feed(self) -> Feed:
        return Feed(self.client)

    def notification(self) -> Notification:
        return Notification(self.client)

    def star(self) -> Star:
        return Star(self.client)

    def watch(self) -> Watch:
        return Watch(self.client)
