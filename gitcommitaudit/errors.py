"""Exceptions raised by git-commit-audit.

Every exception derives from ``CommitAuditError`` (a ``RuntimeError``), so
callers can catch the whole family at once:

    ```python
    from gitcommitaudit import analyze_commits
    from gitcommitaudit.errors import RepositoryError, ValidationFailed

    try:
        analyze_commits(path="repo", limit=50)
    except ValidationFailed as e:
        print(e.results)
    except RepositoryError as e:
        print(f"Cannot read history: {e}")
    ```
"""
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Optional

if TYPE_CHECKING:
    from .models import Severity, Validation, ValidationResult


class CommitAuditError(RuntimeError):
    """Base class for all git-commit-audit errors."""


class RepositoryError(CommitAuditError):
    """The repository could not be read. Aborts the whole run."""


class PathNotFound(RepositoryError):
    def __init__(self, path):
        self.path = Path(path)
        super().__init__(f"Path '{self.path}' does not exist")


class NotARepository(RepositoryError):
    def __init__(self, path):
        self.path = Path(path)
        super().__init__(f"Path '{self.path}' is not a git repository")


class GitCommandFailed(RepositoryError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Git command failed: {detail}")


class InvalidValidationError(CommitAuditError, ValueError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Invalid validation name: '{name}' "
            "(valid: short, reference, format, vague, wip, imperative)"
        )


class InvalidSeverityError(CommitAuditError, ValueError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Invalid severity: '{name}' (valid: error, warning, info, ignore)"
        )


class ConfigError(CommitAuditError):
    """A settings file exists but could not be read or parsed."""


class ValidationFailed(CommitAuditError):
    """Analysis completed and found commits with blocking severities.

    Attributes:
        results (List[ValidationResult]): Commits that caused the failure
        severities (Dict[Validation, Severity]): Severity map used for the run
    """

    def __init__(
        self,
        results: List["ValidationResult"],
        severities: Optional[Dict["Validation", "Severity"]] = None,
    ):
        self.results = results
        self.severities = severities or {}
        lines = [f"Found {len(results)} commits with validation issues"]
        for result in results:
            for failure in result.failures:
                severity = self.severities.get(failure)
                label = f"[{severity}] " if severity is not None else ""
                lines.append(
                    f"  {result.commit.short_hash}: {label}{failure} "
                    f"(\"{result.commit.subject}\")"
                )
        super().__init__("\n".join(lines))

    @property
    def count(self) -> int:
        return len(self.results)
