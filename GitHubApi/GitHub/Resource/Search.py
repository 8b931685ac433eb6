"""
Search API.
"""
from typing import Any, Optional

from GitHubApi.GitHub.Resource.Base import Resource
from GitHubApi.Utility.validators import validate_arguments


class Search(Resource):
    LINKS = {
        "REPOSITORIES": "search/repositories",
        "CODE": "search/code",
        "ISSUES": "search/issues",
        "USERS": "search/users",
    }

    def _search(self, name: str, query: str, sort: Optional[str], order: str) -> Any:
        options = {"q": query, "sort": sort, "order": order}
        return self._get(self._link(name), options)

    @validate_arguments
    def search_repositories(self, query: str, sort: Optional[str] = None, order: str = "desc") -> Any:
        """Search repositories; `sort` is "stars", "forks" or "updated"."""
        return self._search("REPOSITORIES", query, sort, order)

    @validate_arguments
    def search_code(self, query: str, sort: Optional[str] = None, order: str = "desc") -> Any:
        return self._search("CODE", query, sort, order)

    @validate_arguments
    def search_issues(self, query: str, sort: Optional[str] = None, order: str = "desc") -> Any:
        return self._search("ISSUES", query, sort, order)

    @validate_arguments
    def search_users(self, query: str, sort: Optional[str] = None, order: str = "desc") -> Any:
        return self._search("USERS", query, sort, order)
