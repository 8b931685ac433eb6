"""
Common base for the resource clients.

A resource client owns a table of endpoint templates (`LINKS`) and turns
method calls into requests on a shared `GitHubClient`.
"""
from typing import Any, Dict, Optional, Union

from GitHubApi.GitHub.GitHubClient import GitHubClient
from GitHubApi.Utility.payload import Options
from GitHubApi.Utility.template import check_identifier, resolve_template

# numeric ids and names are both accepted as path segments
Identifier = Union[str, int]


class Resource:
    # path segment placed between the API root and every endpoint
    CONNECTION = ""
    LINKS: Dict[str, str] = {}

    def __init__(self, client: GitHubClient):
        self.client = client

    def _link(self, name: str, *suffix: Any, **values: Any) -> str:
        link = resolve_template(self.LINKS[name], values)
        for index, segment in enumerate(suffix):
            link += "/" + check_identifier(f"{name.lower()}[{index}]", segment)
        return link

    def _path(self, link: str) -> str:
        if not self.CONNECTION:
            return link
        return f"{self.CONNECTION}/{link}" if link else self.CONNECTION

    def _get(self, link: str, options: Optional[Options] = None, **kwargs) -> Any:
        return self.client.get(self._path(link), options, **kwargs)

    def _post(self, link: str, options: Optional[Options] = None) -> Any:
        return self.client.post(self._path(link), options)

    def _put(self, link: str, options: Optional[Options] = None) -> Any:
        return self.client.put(self._path(link), options)

    def _patch(self, link: str, options: Optional[Options] = None) -> Any:
        return self.client.patch(self._path(link), options)

    def _delete(self, link: str, options: Optional[Options] = None) -> Any:
        return self.client.delete(self._path(link), options)
