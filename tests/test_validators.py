import importlib
import inspect

import pytest

from GitHubApi.Exception.GitHubError import ArgumentError
from GitHubApi.GitHub.Resource.Base import Resource
from GitHubApi.Routes.validators import extract_token, parse_scope, validate_callback_args


def test_wrong_type_rejected_before_request(factory, session):
    with pytest.raises(ArgumentError) as exc:
        factory.repository().get_repository(123, "repo")
    assert session.calls == []
    assert "Argument 1 (owner)" in str(exc.value)
    assert exc.value.status_code == 400


def test_argument_error_is_type_error(factory):
    with pytest.raises(TypeError):
        factory.issue().get_issue("o", "r", None)


def test_bool_is_not_an_identifier(factory, session):
    with pytest.raises(ArgumentError):
        factory.issue().get_issue("o", "r", True)
    assert session.calls == []


def test_optional_arguments_accept_none(factory, session):
    factory.user().get_user(None)
    assert session.last["url"].startswith("https://api.github.com/user?")


def test_list_argument_checked(factory, session):
    with pytest.raises(ArgumentError):
        factory.user().email().add_emails("octocat@github.com")
    assert session.calls == []


def test_keyword_arguments_checked(factory):
    with pytest.raises(ArgumentError) as exc:
        factory.search().search_code("addClass", order=1)
    assert "order" in str(exc.value)


def test_blank_identifier_rejected(factory, session):
    with pytest.raises(ArgumentError):
        factory.repository().get_repository("", "repo")
    assert session.calls == []


def test_validate_callback_args():
    assert validate_callback_args({"code": "abc", "state": "xyz"}) == ("abc", "xyz")


def test_validate_callback_args_missing_code():
    with pytest.raises(ValueError):
        validate_callback_args({})


def test_validate_callback_args_error():
    with pytest.raises(ValueError) as exc:
        validate_callback_args({"error": "access_denied", "error_description": "The user denied access"})
    assert "denied" in str(exc.value)


def test_parse_scope():
    assert parse_scope("repo, user  gist") == ["repo", "user", "gist"]
    assert parse_scope(None) == []


def test_extract_token():
    assert extract_token({"Authorization": "token abc"}, {}) == "abc"
    assert extract_token({"Authorization": "Bearer xyz"}, {}) == "xyz"
    assert extract_token({}, {"access_token": "q"}) == "q"
    assert extract_token({"Authorization": "Basic Zm9v"}, {}) is None


RESOURCE_MODULES = [
    "Activity", "Data", "Gist", "Issue", "Misc",
    "Organization", "PullRequest", "Repository", "Search", "User",
]


def _endpoint_methods():
    for name in RESOURCE_MODULES:
        module = importlib.import_module(f"GitHubApi.GitHub.Resource.{name}")
        for cls in vars(module).values():
            if not (isinstance(cls, type) and issubclass(cls, Resource)) or cls.__module__ != module.__name__:
                continue
            for attr, fn in vars(cls).items():
                if attr.startswith("_") or not inspect.isfunction(fn):
                    continue
                returns = inspect.signature(fn).return_annotation
                # sub-client accessors
                if isinstance(returns, type) and issubclass(returns, Resource):
                    continue
                yield f"{cls.__name__}.{attr}", fn


def test_every_endpoint_method_is_checked():
    methods = dict(_endpoint_methods())
    assert "RateLimit.get_rate_limit_status" in methods
    unchecked = [name for name, fn in methods.items() if not hasattr(fn, "__wrapped__")]
    assert unchecked == []


def test_no_argument_method_rejects_extra_arguments(factory, session):
    with pytest.raises(TypeError):
        factory.misc().meta().get_meta("extra")
    assert session.calls == []
