import pytest

from conftest import TOKEN, split_call


@pytest.mark.parametrize("call,method,path", [
    (lambda u: u.get_user(), "GET", "/user"),
    (lambda u: u.get_user("mona"), "GET", "/users/mona"),
    (lambda u: u.get_users(), "GET", "/users"),
    (lambda u: u.email().get_emails(), "GET", "/user/emails"),
    (lambda u: u.follower().get_followers(), "GET", "/user/followers"),
    (lambda u: u.follower().get_followers("mona"), "GET", "/users/mona/followers"),
    (lambda u: u.follower().get_following(), "GET", "/user/following"),
    (lambda u: u.follower().get_following("mona"), "GET", "/users/mona/following"),
    (lambda u: u.follower().is_following("octocat"), "GET", "/user/following/octocat"),
    (lambda u: u.follower().is_following("octocat", "mona"), "GET", "/users/mona/following/octocat"),
    (lambda u: u.follower().follow("octocat"), "PUT", "/user/following/octocat"),
    (lambda u: u.follower().unfollow("octocat"), "DELETE", "/user/following/octocat"),
    (lambda u: u.key().get_public_keys(), "GET", "/user/keys"),
    (lambda u: u.key().get_public_keys("mona"), "GET", "/users/mona/keys"),
    (lambda u: u.key().get_public_key(1), "GET", "/user/keys/1"),
    (lambda u: u.key().create_public_key("laptop", "ssh-rsa AAA"), "POST", "/user/keys"),
    (lambda u: u.key().update_public_key(1, "laptop", "ssh-rsa AAA"), "PATCH", "/user/keys/1"),
    (lambda u: u.key().delete_public_key(1), "DELETE", "/user/keys/1"),
])
def test_user_endpoints(factory, session, call, method, path):
    call(factory.user())
    assert split_call(session.last)[:2] == (method, path)


def test_update_user(factory, session):
    factory.user().update_user(name="monalisa octocat", hireable=True)
    method, path, params = split_call(session.last)
    assert (method, path) == ("PATCH", "/user")
    assert params == {"name": "monalisa octocat", "hireable": "1", "access_token": TOKEN}


def test_add_emails_list_payload(factory, session):
    factory.user().email().add_emails(["octocat@github.com", "support@github.com"])
    method, path, params = split_call(session.last)
    assert (method, path) == ("POST", "/user/emails")
    assert params == {"0": "octocat@github.com", "1": "support@github.com", "access_token": TOKEN}


def test_delete_emails_in_query(factory, session):
    factory.user().email().delete_emails(["octocat@github.com"])
    method, path, params = split_call(session.last)
    assert method == "DELETE"
    assert session.last["data"] is None
    assert params["0"] == "octocat@github.com"


def test_get_users_since(factory, session):
    factory.user().get_users(since=135)
    assert split_call(session.last)[2]["since"] == "135"
