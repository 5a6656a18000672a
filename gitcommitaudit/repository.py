"""Reading commit history from a git repository."""
from pathlib import Path
from typing import List, Optional, Union

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from .errors import GitCommandFailed, NotARepository, PathNotFound
from .models import Commit

PathLike = Union[str, Path]


def validate_repo_path(path: PathLike) -> Path:
    """Check that ``path`` exists and is the root of a git repository.

    Raises:
        PathNotFound: If the path does not exist
        NotARepository: If the path has no ``.git`` entry
    """
    path = Path(path)
    if not path.exists():
        raise PathNotFound(path)
    if not (path / ".git").exists():
        raise NotARepository(path)
    return path


def open_repo(path: PathLike = ".") -> Repo:
    path = validate_repo_path(path)
    try:
        return Repo(path)
    except NoSuchPathError:
        raise PathNotFound(path)
    except InvalidGitRepositoryError:
        raise NotARepository(path)


def _to_commit(git_commit) -> Commit:
    message = git_commit.message
    if isinstance(message, bytes):
        message = message.decode('utf-8', errors='replace')
    lines = message.split('\n', 1)
    body = lines[1].strip() if len(lines) > 1 else ""
    return Commit(
        hash=git_commit.hexsha,
        author_name=git_commit.author.name or "",
        author_email=git_commit.author.email or "",
        subject=lines[0].rstrip('\r'),
        body=body,
    )


def fetch_commits(path: PathLike = ".", limit: Optional[int] = None) -> List[Commit]:
    """Fetch commits reachable from HEAD, most recent first.

    Args:
        path: Path to the repository root
        limit: Maximum number of commits to return (None for all)

    Returns:
        List[Commit]: Decoded commits; empty for a repository without commits
    """
    repo = open_repo(path)
    if limit == 0 or not repo.head.is_valid():
        return []

    kwargs = {}
    if limit is not None:
        kwargs['max_count'] = limit

    try:
        return [_to_commit(c) for c in repo.iter_commits('HEAD', **kwargs)]
    except (GitCommandError, ValueError) as e:
        raise GitCommandFailed(str(e).strip())


def count_commits(path: PathLike = ".") -> int:
    """Count all commits reachable from HEAD."""
    repo = open_repo(path)
    if not repo.head.is_valid():
        return 0
    try:
        return int(repo.git.rev_list('--count', 'HEAD').strip())
    except GitCommandError as e:
        raise GitCommandFailed(str(e).strip())
    except ValueError:
        raise GitCommandFailed("Failed to parse commit count")
