import pytest

from conftest import TOKEN, split_call


@pytest.mark.parametrize("call,method,path", [
    (lambda o: o.get_organizations(), "GET", "/user/orgs"),
    (lambda o: o.get_organizations("mona"), "GET", "/users/mona/orgs"),
    (lambda o: o.get_organization("github"), "GET", "/orgs/github"),
    (lambda o: o.member().get_members("github"), "GET", "/orgs/github/members"),
    (lambda o: o.member().get_public_members("github"), "GET", "/orgs/github/public_members"),
    (lambda o: o.member().is_member("github", "mona"), "GET", "/orgs/github/members/mona"),
    (lambda o: o.member().remove_member("github", "mona"), "DELETE", "/orgs/github/members/mona"),
    (lambda o: o.team().get_teams("github"), "GET", "/orgs/github/teams"),
    (lambda o: o.team().get_team(7), "GET", "/teams/7"),
    (lambda o: o.team().edit_team(7, "Owners"), "PATCH", "/teams/7"),
    (lambda o: o.team().delete_team(7), "DELETE", "/teams/7"),
    (lambda o: o.team().get_team_members(7), "GET", "/teams/7/members"),
    (lambda o: o.team().get_team_member(7, "mona"), "GET", "/teams/7/members/mona"),
    (lambda o: o.team().add_team_member(7, "mona"), "PUT", "/teams/7/members/mona"),
    (lambda o: o.team().remove_team_member(7, "mona"), "DELETE", "/teams/7/members/mona"),
    (lambda o: o.team().get_team_repositories(7), "GET", "/teams/7/repos"),
    (lambda o: o.team().get_team_repository(7, "o", "r"), "GET", "/teams/7/repos/o/r"),
    (lambda o: o.team().add_team_repository(7, "github", "r"), "PUT", "/teams/7/repos/github/r"),
    (lambda o: o.team().remove_team_repository(7, "o", "r"), "DELETE", "/teams/7/repos/o/r"),
    (lambda o: o.team().get_user_teams(), "GET", "/user/teams"),
])
def test_organization_endpoints(factory, session, call, method, path):
    call(factory.organization())
    assert split_call(session.last)[:2] == (method, path)


def test_publicize_membership(factory, session):
    factory.organization().member().set_membership("github", "mona", publicize=True)
    assert split_call(session.last)[:2] == ("PUT", "/orgs/github/public_members/mona")


def test_conceal_membership(factory, session):
    factory.organization().member().set_membership("github", "mona")
    assert split_call(session.last)[:2] == ("DELETE", "/orgs/github/public_members/mona")


def test_create_team(factory, session):
    factory.organization().team().create_team("github", "Justice League", ["github/dotfiles"])
    method, path, params = split_call(session.last)
    assert (method, path) == ("POST", "/orgs/github/teams")
    assert params == {
        "name": "Justice League",
        "repo_names[0]": "github/dotfiles",
        "permission": "pull",
        "access_token": TOKEN,
    }


def test_edit_organization(factory, session):
    factory.organization().edit_organization("github", company="GitHub")
    method, path, params = split_call(session.last)
    assert (method, path) == ("PATCH", "/orgs/github")
    assert params == {"company": "GitHub", "access_token": TOKEN}
