"""Repository name parsing."""
from typing import Tuple
from urllib.parse import urlparse


def split_repo(target: str) -> Tuple[str, str]:
    """Turn a GitHub URL, SSH remote or ``owner/repo`` string into (owner, repo)."""
    target = target.strip()
    if target.startswith("git@"):
        _, path = target.split(":", 1)
    elif "://" in target:
        path = urlparse(target).path
    else:
        path = target
    path = path.strip("/")
    if path.endswith(".git"):
        path = path[:-4]
    parts = path.split("/")
    if len(parts) < 2 or not parts[-2] or not parts[-1]:
        raise ValueError(f"Not a repository reference: {target!r}")
    return parts[-2], parts[-1]
