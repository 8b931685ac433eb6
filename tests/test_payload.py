from urllib.parse import unquote

from GitHubApi.Utility.payload import encode_payload, filter_options, person


def test_filter_options_keeps_order_and_truthy_values():
    options = {"state": "open", "labels": "", "since": None, "page": 0, "all": False, "sort": "created"}
    assert list(filter_options(options).items()) == [("state", "open"), ("sort", "created")]


def test_filter_options_keeps_string_zero():
    assert filter_options({"since": "0"}) == {"since": "0"}


def test_filter_options_list_keyed_by_position():
    assert filter_options(["bug", "", "ui"]) == {0: "bug", 2: "ui"}


def test_filter_options_none():
    assert filter_options(None) == {}


def test_encode_nested_mapping():
    encoded = encode_payload({"message": "m", "author": {"name": "Mona", "email": "mona@example.com"}})
    assert unquote(encoded) == "message=m&author[name]=Mona&author[email]=mona@example.com"


def test_encode_list_and_bools():
    encoded = encode_payload({"parents": ["a1", "b2"], "force": True, "draft": False, "skip": None})
    assert unquote(encoded) == "parents[0]=a1&parents[1]=b2&force=1&draft=0"


def test_encode_list_payload():
    assert unquote(encode_payload({0: "bug", 1: "ui"})) == "0=bug&1=ui"


def test_encode_escapes_values():
    assert encode_payload({"q": "tetris language:assembly"}) == "q=tetris+language%3Aassembly"


def test_person_drops_empty_members():
    assert person("Mona", None, "") == {"name": "Mona"}
    assert person() is None
