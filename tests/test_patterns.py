import pytest

from GitHubApi.Events.event_dispatcher import EventDispatcher
from GitHubApi.GitHub.GitHubFactory import GitHubFactory
from GitHubApi.GitHub.Resource.Base import Resource
from GitHubApi.GitHub.Resource.Repository import Repository
from GitHubApi.Auth.OAuthClient import GitHubAuth
from GitHubApi.Utility.config import ClientConfig

from conftest import TOKEN, DummySession


def test_factory_builtin_keys():
    keys = GitHubFactory.registered_keys()
    for key in ("activity", "data", "gist", "issue", "misc", "organization",
                "pull_request", "repository", "search", "user"):
        assert key in keys


def test_factory_returns_fresh_clients_sharing_transport(factory):
    first = factory.repository()
    second = factory.repository()
    assert isinstance(first, Repository)
    assert first is not second
    assert first.client is second.client is factory.client


def test_factory_register_and_create(factory):
    class Ping(Resource):
        LINKS = {"ZEN": "zen"}

    GitHubFactory.register("tmp_ping", Ping)
    try:
        assert isinstance(factory.create("tmp_ping"), Ping)
    finally:
        GitHubFactory._registry.pop("tmp_ping")


def test_factory_unknown_key(factory):
    with pytest.raises(KeyError):
        factory.create("nope")


def test_factory_auth():
    auth = GitHubFactory.auth("id", "secret", "https://example.com/callback")
    assert isinstance(auth, GitHubAuth)


def test_factory_close():
    sess = DummySession()
    GitHubFactory(TOKEN, session=sess, config=ClientConfig()).close()
    assert sess.closed


def test_event_dispatcher_subscribe_dispatch():
    disp = EventDispatcher()
    events = []

    def on_request(**kwargs):
        events.append(("request", kwargs.get("url")))

    disp.subscribe("request", on_request)
    disp.dispatch("request", method="GET", url="https://api.github.com/meta")
    disp.unsubscribe("request", on_request)
    disp.dispatch("request", method="GET", url="https://api.github.com/emojis")
    assert events == [("request", "https://api.github.com/meta")]


def test_event_dispatcher_listener_failure_does_not_propagate():
    disp = EventDispatcher()

    def broken(**kwargs):
        raise RuntimeError("boom")

    disp.subscribe("response", broken)
    disp.dispatch("response", status_code=200)


def test_dispatcher_passed_through_factory():
    disp = EventDispatcher()
    seen = []
    disp.subscribe("response", lambda **kw: seen.append(kw["status_code"]))
    factory = GitHubFactory(TOKEN, session=DummySession(), config=ClientConfig(), dispatcher=disp)
    factory.misc().meta().get_meta()
    assert seen == [200]
