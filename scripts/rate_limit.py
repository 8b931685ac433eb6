#!/usr/bin/env python3
"""Print the GitHub API rate limit status for a token.

Requires GITHUB_TOKEN (or GH_TOKEN), or pass the token as the first argument.
Reads a `.env` file in the working directory when present.
"""
import sys

from GitHubApi.Exception.GitHubError import GitHubError
from GitHubApi.GitHub.GitHubFactory import GitHubFactory
from GitHubApi.Utility.env import load_env_file


def format_resources(status):
    lines = []
    for name, limits in sorted((status.get("resources") or {}).items()):
        lines.append(f"{name:>8}: {limits.get('remaining')}/{limits.get('limit')} (resets at {limits.get('reset')})")
    return lines


def main():
    load_env_file()
    token = sys.argv[1] if len(sys.argv) > 1 else None
    try:
        factory = GitHubFactory(token)
        status = factory.misc().rate_limit().get_rate_limit_status() or {}
    except GitHubError as e:
        print(f"Failed to read rate limit: {e.message}")
        sys.exit(1)

    if "message" in status and "resources" not in status:
        print(f"GitHub refused the request: {status['message']}")
        sys.exit(2)

    for line in format_resources(status):
        print(line)
    sys.exit(0)


if __name__ == "__main__":
    main()
