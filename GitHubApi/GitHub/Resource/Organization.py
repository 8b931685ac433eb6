"""
Organizations API: organizations, members and teams.
"""
from typing import Any, List, Optional

from GitHubApi.GitHub.Resource.Base import Identifier, Resource
from GitHubApi.Utility.validators import validate_arguments


class Member(Resource):
    LINKS = {
        "MEMBERS": "orgs/:org/members",
        "PUBLIC_MEMBERS": "orgs/:org/public_members",
    }

    @validate_arguments
    def get_members(self, org: str) -> Any:
        return self._get(self._link("MEMBERS", org=org))

    @validate_arguments
    def get_public_members(self, org: str) -> Any:
        return self._get(self._link("PUBLIC_MEMBERS", org=org))

    @validate_arguments
    def is_member(self, org: str, user: str) -> Any:
        return self._get(self._link("MEMBERS", user, org=org))

    @validate_arguments
    def remove_member(self, org: str, user: str) -> Any:
        return self._delete(self._link("MEMBERS", user, org=org))

    @validate_arguments
    def set_membership(self, org: str, user: str, publicize: bool = False) -> Any:
        """Publicize `user`'s membership, or conceal it when `publicize` is False."""
        link = self._link("PUBLIC_MEMBERS", user, org=org)
        if publicize:
            return self._put(link)
        return self._delete(link)


class Team(Resource):
    LINKS = {
        "ORG_TEAMS": "orgs/:org/teams",
        "TEAM": "teams/:id",
        "TEAM_MEMBERS": "teams/:id/members",
        "TEAM_REPOS": "teams/:id/repos",
        "TEAM_REPO": "teams/:id/repos/:owner/:repo",
        "USER_TEAMS": "user/teams",
    }

    @validate_arguments
    def get_teams(self, org: str) -> Any:
        return self._get(self._link("ORG_TEAMS", org=org))

    @validate_arguments
    def get_team(self, team_id: Identifier) -> Any:
        return self._get(self._link("TEAM", id=team_id))

    @validate_arguments
    def create_team(
        self,
        org: str,
        name: str,
        repo_names: Optional[List[str]] = None,
        permission: str = "pull",
    ) -> Any:
        """Create a team; `permission` is "pull", "push" or "admin"."""
        options = {
            "name": name,
            "repo_names": repo_names,
            "permission": permission,
        }
        return self._post(self._link("ORG_TEAMS", org=org), options)

    @validate_arguments
    def edit_team(self, team_id: Identifier, name: str, permission: Optional[str] = None) -> Any:
        options = {"name": name, "permission": permission}
        return self._patch(self._link("TEAM", id=team_id), options)

    @validate_arguments
    def delete_team(self, team_id: Identifier) -> Any:
        return self._delete(self._link("TEAM", id=team_id))

    @validate_arguments
    def get_team_members(self, team_id: Identifier) -> Any:
        return self._get(self._link("TEAM_MEMBERS", id=team_id))

    @validate_arguments
    def get_team_member(self, team_id: Identifier, user: str) -> Any:
        return self._get(self._link("TEAM_MEMBERS", user, id=team_id))

    @validate_arguments
    def add_team_member(self, team_id: Identifier, user: str) -> Any:
        return self._put(self._link("TEAM_MEMBERS", user, id=team_id))

    @validate_arguments
    def remove_team_member(self, team_id: Identifier, user: str) -> Any:
        return self._delete(self._link("TEAM_MEMBERS", user, id=team_id))

    @validate_arguments
    def get_team_repositories(self, team_id: Identifier) -> Any:
        return self._get(self._link("TEAM_REPOS", id=team_id))

    @validate_arguments
    def get_team_repository(self, team_id: Identifier, owner: str, repo: str) -> Any:
        return self._get(self._link("TEAM_REPO", id=team_id, owner=owner, repo=repo))

    @validate_arguments
    def add_team_repository(self, team_id: Identifier, org: str, repo: str) -> Any:
        """Grant the team access to `repo`, which must belong to the team's `org`."""
        return self._put(self._link("TEAM_REPO", id=team_id, owner=org, repo=repo))

    @validate_arguments
    def remove_team_repository(self, team_id: Identifier, owner: str, repo: str) -> Any:
        return self._delete(self._link("TEAM_REPO", id=team_id, owner=owner, repo=repo))

    @validate_arguments
    def get_user_teams(self) -> Any:
        return self._get(self._link("USER_TEAMS"))


class Organization(Resource):
    LINKS = {
        "USER_ORGS": "users/:user/orgs",
        "ORGS": "user/orgs",
        "ORG": "orgs/:org",
    }

    @validate_arguments
    def get_organizations(self, user: Optional[str] = None) -> Any:
        if user:
            return self._get(self._link("USER_ORGS", user=user))
        return self._get(self._link("ORGS"))

    @validate_arguments
    def get_organization(self, org: str) -> Any:
        return self._get(self._link("ORG", org=org))

    @validate_arguments
    def edit_organization(
        self,
        org: str,
        billing_email: Optional[str] = None,
        company: Optional[str] = None,
        email: Optional[str] = None,
        location: Optional[str] = None,
        name: Optional[str] = None,
    ) -> Any:
        options = {
            "billing_email": billing_email,
            "company": company,
            "email": email,
            "location": location,
            "name": name,
        }
        return self._patch(self._link("ORG", org=org), options)

    def member(self) -> Member:
        return Member(self.client)

    def team(self) -> Team:
        return Team(self.client)
