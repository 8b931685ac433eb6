"""
Users API: profiles, emails, followers and public keys.
"""
from typing import Any, List, Optional

from GitHubApi.GitHub.Resource.Base import Identifier, Resource
from GitHubApi.Utility.validators import validate_arguments


class Email(Resource):
    LINKS = {"EMAILS": "user/emails"}

    @validate_arguments
    def get_emails(self) -> Any:
        return self._get(self._link("EMAILS"))

    @validate_arguments
    def add_emails(self, emails: List[str]) -> Any:
        return self._post(self._link("EMAILS"), emails)

    @validate_arguments
    def delete_emails(self, emails: List[str]) -> Any:
        return self._delete(self._link("EMAILS"), emails)


class Follower(Resource):
    LINKS = {
        "USER_FOLLOWERS": "users/:user/followers",
        "FOLLOWERS": "user/followers",
        "USER_FOLLOWING": "users/:user/following",
        "FOLLOWING": "user/following",
        "FOLLOW": "user/following/:user",
        "CHECK_FOLLOW": "users/:user/following/:target_user",
    }

    @validate_arguments
    def get_followers(self, user: Optional[str] = None) -> Any:
        if user:
            return self._get(self._link("USER_FOLLOWERS", user=user))
        return self._get(self._link("FOLLOWERS"))

    @validate_arguments
    def get_following(self, user: Optional[str] = None) -> Any:
        if user:
            return self._get(self._link("USER_FOLLOWING", user=user))
        return self._get(self._link("FOLLOWING"))

    @validate_arguments
    def is_following(self, target_user: str, user: Optional[str] = None) -> Any:
        """Check whether `user` (or the authenticated user) follows `target_user`."""
        if user:
            return self._get(self._link("CHECK_FOLLOW", user=user, target_user=target_user))
        return self._get(self._link("FOLLOW", user=target_user))

    @validate_arguments
    def follow(self, target_user: str) -> Any:
        return self._put(self._link("FOLLOW", user=target_user))

    @validate_arguments
    def unfollow(self, target_user: str) -> Any:
        return self._delete(self._link("FOLLOW", user=target_user))


class Key(Resource):
    LINKS = {
        "USER_KEYS": "users/:user/keys",
        "KEYS": "user/keys",
    }

    @validate_arguments
    def get_public_keys(self, user: Optional[str] = None) -> Any:
        if user:
            return self._get(self._link("USER_KEYS", user=user))
        return self._get(self._link("KEYS"))

    @validate_arguments
    def get_public_key(self, key_id: Identifier) -> Any:
        return self._get(self._link("KEYS", key_id))

    @validate_arguments
    def create_public_key(self, title: str, key: str) -> Any:
        return self._post(self._link("KEYS"), {"title": title, "key": key})

    @validate_arguments
    def update_public_key(self, key_id: Identifier, title: str, key: str) -> Any:
        return self._patch(self._link("KEYS", key_id), {"title": title, "key": key})

    @validate_arguments
    def delete_public_key(self, key_id: Identifier) -> Any:
        return self._delete(self._link("KEYS", key_id))


class User(Resource):
    LINKS = {
        "USERS_USER": "users/:user",
        "USER": "user",
        "USERS": "users",
    }

    @validate_arguments
    def get_user(self, user: Optional[str] = None) -> Any:
        """Get a single user, or the authenticated user when `user` is omitted."""
        if user:
            return self._get(self._link("USERS_USER", user=user))
        return self._get(self._link("USER"))

    @validate_arguments
    def get_users(self, since: Optional[Identifier] = None) -> Any:
        """List all users in sign-up order, starting after user id `since`."""
        return self._get(self._link("USERS"), {"since": since})

    @validate_arguments
    def update_user(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
        blog: Optional[str] = None,
        company: Optional[str] = None,
        location: Optional[str] = None,
        hireable: Optional[bool] = None,
        bio: Optional[str] = None,
    ) -> Any:
        options = {
            "name": name,
            "email": email,
            "blog": blog,
            "company": company,
            "location": location,
            "hireable": hireable,
            "bio": bio,
        }
        return self._patch(self._link("USER"), options)

    def email(self) -> Email:
        return Email(self.client)

    def follower(self) -> Follower:
        return Follower(self.client)

    def key(self) -> Key:
        return Key(self.client)
