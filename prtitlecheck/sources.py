"""Where titles come from: CI event payloads and local git history."""
import json
from pathlib import Path
from typing import Any, Dict, Union

import git
from git import Repo

from .exceptions import TitleSourceError

PULL_REQUEST_ACTIONS = ("opened", "edited", "synchronize", "reopened")


def first_line(message: str) -> str:
    """Return the text before the first newline."""
    return message.split('\n', 1)[0].rstrip('\r')


def title_from_event(payload: Dict[str, Any]) -> str:
    """Pick the title to check out of a GitHub event payload.

    Pull request events use the pull request title. Push events use the
    first line of the most recent commit message.
    """
    pull_request = payload.get("pull_request")
    if pull_request:
        action = payload.get("action")
        if action is not None and action not in PULL_REQUEST_ACTIONS:
            raise TitleSourceError(f"Unsupported pull request action: {action}")
        title = pull_request.get("title")
        if title is None:
            raise TitleSourceError("Pull request payload has no title")
        return title

    head_commit = payload.get("head_commit")
    commits = payload.get("commits") or []
    latest = head_commit or (commits[-1] if commits else None)
    if latest and latest.get("message") is not None:
        return first_line(latest["message"])

    raise TitleSourceError("unable to get pull request title or commit message")


def title_from_event_file(event_path: Union[str, Path]) -> str:
    """Load an event payload from disk and pick its title."""
    path = Path(event_path)
    try:
        with path.open('r', encoding='utf-8') as f:
            payload = json.load(f)
    except OSError as e:
        raise TitleSourceError(f"Cannot read event payload {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise TitleSourceError(f"Event payload {path} is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise TitleSourceError(f"Event payload {path} is not a JSON object")
    return title_from_event(payload)


def title_from_repo(repo_path: Union[str, Path]) -> str:
    """Return the first line of the HEAD commit message of a local repository."""
    try:
        repo = Repo(repo_path, search_parent_directories=True)
    except (git.InvalidGitRepositoryError, git.NoSuchPathError) as e:
        raise TitleSourceError(f"Not a git repository: {repo_path}") from e

    try:
        message = repo.head.commit.message
    except ValueError as e:
        # Raised by GitPython when HEAD points at an unborn branch.
        raise TitleSourceError(f"Repository {repo_path} has no commits") from e

    if isinstance(message, bytes):
        message = message.decode('utf-8', errors='replace')
    return first_line(message)
