import json

import pytest
from git import Repo

from prtitlecheck.title import TitleValidator

CONFIG_ENV_VARS = (
    "INPUT_STRICT",
    "INPUT_MAX_LENGTH",
    "PR_TITLE_CHECK_STRICT",
    "PR_TITLE_CHECK_MAX_LENGTH",
    "PR_TITLE_CHECK_ALWAYS_LOG",
    "PR_TITLE_CHECK_LOG_FILE",
    "GITHUB_EVENT_PATH",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep CI environment variables from leaking into tests."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def strict_validator():
    return TitleValidator(strict=True)


@pytest.fixture
def lenient_validator():
    return TitleValidator(strict=False)


@pytest.fixture
def git_repo(tmp_path):
    """Create a temporary git repository with one commit."""
    repo = Repo.init(tmp_path)
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")

    test_file = tmp_path / "test.txt"
    test_file.write_text("Initial content")
    repo.index.add(["test.txt"])
    repo.index.commit("fix(core): handle empty input\n\nLonger body text.")
    return tmp_path


@pytest.fixture
def pull_request_event():
    return {
        "action": "opened",
        "pull_request": {"number": 7, "title": "feat(api): add login endpoint"},
    }


@pytest.fixture
def push_event():
    return {
        "ref": "refs/heads/main",
        "commits": [
            {"id": "a1", "message": "chore: older commit"},
            {"id": "b2", "message": "docs: update readme\n\nDetails here."},
        ],
        "head_commit": {"id": "b2", "message": "docs: update readme\n\nDetails here."},
    }


@pytest.fixture
def write_event(tmp_path):
    """Write an event payload to disk and return its path."""
    def _write(payload, name="event.json"):
        event_path = tmp_path / name
        event_path.write_text(json.dumps(payload))
        return event_path
    return _write
