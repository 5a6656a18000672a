"""Branch detection and pattern matching."""
import re
from pathlib import Path
from typing import Iterable, Optional, Union

from .repository import open_repo


def get_current_branch(repo_path: Union[str, Path] = ".") -> Optional[str]:
    """Get the current branch name, or None in detached HEAD state."""
    repo = open_repo(repo_path)
    if repo.head.is_detached:
        return None
    return repo.active_branch.name


def _translate(pattern: str) -> str:
    parts = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if pattern.startswith("**", i):
            parts.append(".*")
            i += 2
            continue
        if char == "*":
            parts.append("[^/]*")
        elif char == "?":
            parts.append("[^/]")
        else:
            parts.append(re.escape(char))
        i += 1
    return "".join(parts)


def glob_match(pattern: str, branch: str) -> bool:
    """Match a branch name against a glob pattern.

    ``*`` and ``?`` stop at ``/``; ``**`` matches across path segments.
    """
    return re.fullmatch(_translate(pattern), branch) is not None


def matches_any_pattern(branch: str, patterns: Iterable[str]) -> bool:
    """Check a branch against several patterns. No patterns matches all."""
    patterns = list(patterns)
    if not patterns:
        return True
    return any(glob_match(pattern, branch) for pattern in patterns)
