import pytest

from conftest import TOKEN, split_call


def test_get_issues_routing(factory, session):
    issues = factory.issue()
    issues.get_issues()
    assert split_call(session.last)[1] == "/user/issues"
    issues.get_issues(user=False)
    assert split_call(session.last)[1] == "/issues"
    issues.get_issues(org="github")
    assert split_call(session.last)[1] == "/orgs/github/issues"


def test_get_issues_labels_joined(factory, session):
    factory.issue().get_issues(labels=["bug", "ui"])
    params = split_call(session.last)[2]
    assert params["labels"] == "bug,ui"
    assert params["filter"] == "assigned"


def test_get_repository_issues(factory, session):
    factory.issue().get_repository_issues("o", "r", creator="mona")
    method, path, params = split_call(session.last)
    assert path == "/repos/o/r/issues"
    assert params["milestone"] == "*" and params["assignee"] == "*"
    assert params["creator"] == "mona"
    assert "labels" not in params


def test_create_issue_with_labels(factory, session):
    factory.issue().create_issue("o", "r", "Found a bug", "It crashes", labels=["bug"])
    method, path, params = split_call(session.last)
    assert (method, path) == ("POST", "/repos/o/r/issues")
    assert params["labels[0]"] == "bug"


def test_edit_issue(factory, session):
    factory.issue().edit_issue("o", "r", 1347, "Found a bug", "It crashes", state="closed")
    method, path, params = split_call(session.last)
    assert (method, path) == ("PATCH", "/repos/o/r/issues/1347")
    assert params["state"] == "closed"


@pytest.mark.parametrize("call,method,path", [
    (lambda i: i.get_issue("o", "r", 1347), "GET", "/repos/o/r/issues/1347"),
    (lambda i: i.assignee().get_assignees("o", "r"), "GET", "/repos/o/r/assignees"),
    (lambda i: i.assignee().get_assignees("o", "r", "mona"), "GET", "/repos/o/r/assignees/mona"),
    (lambda i: i.comment().get_issue_comments("o", "r", 3), "GET", "/repos/o/r/issues/3/comments"),
    (lambda i: i.comment().get_repository_comments("o", "r"), "GET", "/repos/o/r/issues/comments"),
    (lambda i: i.comment().get_repository_comments("o", "r", 9), "GET", "/repos/o/r/issues/comments/9"),
    (lambda i: i.comment().create_comment("o", "r", 3, "Me too"), "POST", "/repos/o/r/issues/3/comments"),
    (lambda i: i.comment().edit_comment("o", "r", 9, "Me too"), "PATCH", "/repos/o/r/issues/comments/9"),
    (lambda i: i.comment().delete_comment("o", "r", 9), "DELETE", "/repos/o/r/issues/comments/9"),
    (lambda i: i.event().get_issue_events("o", "r", 3), "GET", "/repos/o/r/issues/3/events"),
    (lambda i: i.event().get_repository_events("o", "r"), "GET", "/repos/o/r/issues/events"),
    (lambda i: i.event().get_repository_events("o", "r", 1), "GET", "/repos/o/r/issues/events/1"),
    (lambda i: i.label().get_labels("o", "r"), "GET", "/repos/o/r/labels"),
    (lambda i: i.label().get_labels("o", "r", "bug"), "GET", "/repos/o/r/labels/bug"),
    (lambda i: i.label().create_label("o", "r", "bug", "f29513"), "POST", "/repos/o/r/labels"),
    (lambda i: i.label().update_label("o", "r", "bug", "defect", "f29513"), "PATCH", "/repos/o/r/labels/bug"),
    (lambda i: i.label().delete_label("o", "r", "bug"), "DELETE", "/repos/o/r/labels/bug"),
    (lambda i: i.label().get_issue_labels("o", "r", 3), "GET", "/repos/o/r/issues/3/labels"),
    (lambda i: i.label().remove_issue_label("o", "r", 3, "bug"), "DELETE", "/repos/o/r/issues/3/labels/bug"),
    (lambda i: i.label().replace_issue_labels("o", "r", 3, ["bug"]), "PUT", "/repos/o/r/issues/3/labels"),
    (lambda i: i.label().get_milestone_labels("o", "r", 2), "GET", "/repos/o/r/milestones/2/labels"),
    (lambda i: i.milestone().get_milestones("o", "r"), "GET", "/repos/o/r/milestones"),
    (lambda i: i.milestone().get_milestones("o", "r", 2), "GET", "/repos/o/r/milestones/2"),
    (lambda i: i.milestone().create_milestone("o", "r", "v1.0"), "POST", "/repos/o/r/milestones"),
    (lambda i: i.milestone().delete_milestone("o", "r", 2), "DELETE", "/repos/o/r/milestones/2"),
])
def test_issue_endpoints(factory, session, call, method, path):
    call(factory.issue())
    assert split_call(session.last)[:2] == (method, path)


def test_add_issue_labels_sends_list_payload(factory, session):
    factory.issue().label().add_issue_labels("o", "r", 3, ["bug", "ui"])
    method, path, params = split_call(session.last)
    assert (method, path) == ("POST", "/repos/o/r/issues/3/labels")
    assert params == {"0": "bug", "1": "ui", "access_token": TOKEN}


def test_issue_events_send_no_filters(factory, session):
    factory.issue().event().get_issue_events("o", "r", 3)
    assert split_call(session.last)[2] == {"access_token": TOKEN}
