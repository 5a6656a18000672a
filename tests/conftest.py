import pytest
from pathlib import Path
from git import Actor, Repo

from gitcommitaudit.models import Commit

AUTHOR = Actor("Test Author", "test@example.com")

GOOD_SUBJECT = "feat(auth): add OAuth2 login flow for users #123"


def commit_messages(repo_path, messages):
    """Create one commit per message, oldest first."""
    repo = Repo.init(repo_path)
    start = len(list(Path(repo_path).glob("file*.txt")))
    for offset, message in enumerate(messages):
        name = f"file{start + offset}.txt"
        (Path(repo_path) / name).write_text(f"content {start + offset}\n")
        repo.index.add([name])
        repo.index.commit(message, author=AUTHOR, committer=AUTHOR)
    return repo


@pytest.fixture
def make_git_repo(tmp_path):
    """Factory building a repository whose history holds the given messages."""
    counter = {"n": 0}

    def _make(*messages):
        counter["n"] += 1
        repo_path = tmp_path / f"repo{counter['n']}"
        repo_path.mkdir()
        commit_messages(repo_path, messages)
        return repo_path

    return _make


@pytest.fixture
def temp_git_repo(make_git_repo):
    """A repository with clean commits only."""
    return make_git_repo(
        "chore: set up project skeleton for the service #1",
        GOOD_SUBJECT,
    )


@pytest.fixture
def wip_git_repo(make_git_repo):
    """A repository whose latest commit is a work-in-progress commit."""
    return make_git_repo(
        GOOD_SUBJECT,
        "WIP: feat: add user authentication #123",
    )


@pytest.fixture
def empty_git_repo(tmp_path):
    """An initialized repository without any commits."""
    repo_path = tmp_path / "empty"
    repo_path.mkdir()
    Repo.init(repo_path)
    return repo_path


@pytest.fixture
def make_commit():
    def _make(subject, body=""):
        return Commit(
            hash="a1b2c3d4e5f6a1b2c3d4e5f6a1b2c3d4e5f6a1b2",
            author_name="Test Author",
            author_email="test@example.com",
            subject=subject,
            body=body,
        )

    return _make
