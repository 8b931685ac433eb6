"""
Factory for resource clients. Resource groups register themselves by key and
callers request instances via `create` or the named shortcuts; every client
made by one factory shares its `GitHubClient`.
"""
from typing import Callable, Dict, List, Optional

import requests

from GitHubApi.Auth.OAuthClient import GitHubAuth
from GitHubApi.Events.event_dispatcher import EventDispatcher
from GitHubApi.GitHub.GitHubClient import GitHubClient
from GitHubApi.GitHub.Resource.Activity import Activity
from GitHubApi.GitHub.Resource.Base import Resource
from GitHubApi.GitHub.Resource.Data import Data
from GitHubApi.GitHub.Resource.Gist import Gist
from GitHubApi.GitHub.Resource.Issue import Issue
from GitHubApi.GitHub.Resource.Misc import Misc
from GitHubApi.GitHub.Resource.Organization import Organization
from GitHubApi.GitHub.Resource.PullRequest import PullRequest
from GitHubApi.GitHub.Resource.Repository import Repository
from GitHubApi.GitHub.Resource.Search import Search
from GitHubApi.GitHub.Resource.User import User
from GitHubApi.Utility.config import ClientConfig


class GitHubFactory:
    _registry: Dict[str, Callable[[GitHubClient], Resource]] = {}

    def __init__(
        self,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        config: Optional[ClientConfig] = None,
        dispatcher: Optional[EventDispatcher] = None,
    ):
        self.client = GitHubClient(token, session=session, config=config, dispatcher=dispatcher)

    @classmethod
    def register(cls, key: str, creator: Callable[[GitHubClient], Resource]):
        cls._registry[key] = creator

    @classmethod
    def registered_keys(cls) -> List[str]:
        return list(cls._registry.keys())

    def create(self, key: str) -> Resource:
        creator = self._registry.get(key)
        if not creator:
            raise KeyError(f"Resource not registered: {key}")
        return creator(self.client)

    def activity(self) -> Activity:
        return self.create("activity")

    def data(self) -> Data:
        return self.create("data")

    def gist(self) -> Gist:
        return self.create("gist")

    def issue(self) -> Issue:
        return self.create("issue")

    def misc(self) -> Misc:
        return self.create("misc")

    def organization(self) -> Organization:
        return self.create("organization")

    def pull_request(self) -> PullRequest:
        return self.create("pull_request")

    def repository(self) -> Repository:
        return self.create("repository")

    def search(self) -> Search:
        return self.create("search")

    def user(self) -> User:
        return self.create("user")

    @staticmethod
    def auth(key: str, secret: str, redirect: str, session: Optional[requests.Session] = None) -> GitHubAuth:
        """OAuth2 helper for the app identified by `key` and `secret`."""
        return GitHubAuth(key, secret, redirect, session=session)

    def close(self) -> None:
        self.client.close()


GitHubFactory.register("activity", Activity)
GitHubFactory.register("data", Data)
GitHubFactory.register("gist", Gist)
GitHubFactory.register("issue", Issue)
GitHubFactory.register("misc", Misc)
GitHubFactory.register("organization", Organization)
GitHubFactory.register("pull_request", PullRequest)
GitHubFactory.register("repository", Repository)
GitHubFactory.register("search", Search)
GitHubFactory.register("user", User)
