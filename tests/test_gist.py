import pytest

from conftest import TOKEN, split_call


@pytest.mark.parametrize("call,method,path", [
    (lambda g: g.get_gists(), "GET", "/gists"),
    (lambda g: g.get_gists("mona"), "GET", "/users/mona/gists"),
    (lambda g: g.get_public_gists(), "GET", "/gists/public"),
    (lambda g: g.get_starred_gists(), "GET", "/gists/starred"),
    (lambda g: g.get_gist("aa5a315d"), "GET", "/gists/aa5a315d"),
    (lambda g: g.is_starred("aa5a315d"), "GET", "/gists/aa5a315d/star"),
    (lambda g: g.star_gist("aa5a315d"), "PUT", "/gists/aa5a315d/star"),
    (lambda g: g.unstar_gist("aa5a315d"), "DELETE", "/gists/aa5a315d/star"),
    (lambda g: g.fork_gist("aa5a315d"), "POST", "/gists/aa5a315d/forks"),
    (lambda g: g.delete_gist("aa5a315d"), "DELETE", "/gists/aa5a315d"),
    (lambda g: g.comment().get_comments("aa5a315d"), "GET", "/gists/aa5a315d/comments"),
    (lambda g: g.comment().get_comment("aa5a315d", 1), "GET", "/gists/aa5a315d/comments/1"),
    (lambda g: g.comment().delete_comment("aa5a315d", 1), "DELETE", "/gists/aa5a315d/comments/1"),
])
def test_gist_endpoints(factory, session, call, method, path):
    call(factory.gist())
    assert split_call(session.last)[:2] == (method, path)


def test_create_gist(factory, session):
    factory.gist().create_gist({"file1.txt": {"content": "String file contents"}}, "the description", True)
    method, path, params = split_call(session.last)
    assert (method, path) == ("POST", "/gists")
    assert params == {
        "files[file1.txt][content]": "String file contents",
        "description": "the description",
        "public": "1",
        "access_token": TOKEN,
    }


def test_since_filter(factory, session):
    factory.gist().get_public_gists(since="2011-04-14T02:15:15Z")
    assert split_call(session.last)[2]["since"] == "2011-04-14T02:15:15Z"


def test_comment_create_and_edit(factory, session):
    comments = factory.gist().comment()
    comments.create_comment("aa5a315d", "Just commenting")
    assert split_call(session.last) == ("POST", "/gists/aa5a315d/comments", {"body": "Just commenting", "access_token": TOKEN})
    comments.edit_comment("aa5a315d", 1, "Edited")
    assert split_call(session.last)[:2] == ("PATCH", "/gists/aa5a315d/comments/1")
