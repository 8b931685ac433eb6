import pytest

from conftest import TOKEN, split_call


@pytest.mark.parametrize("call,path", [
    (lambda m: m.emojis().get_emojis(), "/emojis"),
    (lambda m: m.gitignore().get_templates(), "/gitignore/templates"),
    (lambda m: m.gitignore().get_templates("C"), "/gitignore/templates/C"),
    (lambda m: m.meta().get_meta(), "/meta"),
    (lambda m: m.rate_limit().get_rate_limit_status(), "/rate_limit"),
])
def test_misc_reads(factory, session, call, path):
    call(factory.misc())
    assert split_call(session.last)[:2] == ("GET", path)


def test_render_markdown(factory, session):
    factory.misc().markdown().render_markdown("Hello **world**", "gfm", "github/gollum")
    method, path, params = split_call(session.last)
    assert (method, path) == ("POST", "/markdown")
    assert params == {"text": "Hello **world**", "mode": "gfm", "context": "github/gollum", "access_token": TOKEN}


def test_render_markdown_raw(factory, session):
    factory.misc().markdown().render_markdown("Hello", mode="gfm", raw=True)
    method, path, params = split_call(session.last)
    assert (method, path) == ("POST", "/markdown/raw")
    assert params == {"text": "Hello", "access_token": TOKEN}


@pytest.mark.parametrize("name,path", [
    ("search_repositories", "/search/repositories"),
    ("search_code", "/search/code"),
    ("search_issues", "/search/issues"),
    ("search_users", "/search/users"),
])
def test_search(factory, session, name, path):
    getattr(factory.search(), name)("tetris language:assembly", sort="stars")
    method, got_path, params = split_call(session.last)
    assert (method, got_path) == ("GET", path)
    assert params == {"q": "tetris language:assembly", "sort": "stars", "order": "desc", "access_token": TOKEN}


def test_search_without_sort(factory, session):
    factory.search().search_users("tom")
    assert "sort" not in split_call(session.last)[2]
