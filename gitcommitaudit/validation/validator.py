"""Commit message validation."""
from typing import Iterable, List, Optional

from ..models import Commit, Validation, ValidationResult
from .config import ValidationConfig
from .handlers import create_validation_chain

_CHAIN = create_validation_chain()


def validate_commit(commit: Commit, config: ValidationConfig) -> List[Validation]:
    """Return the validation kinds a commit triggers, in evaluation order."""
    return _CHAIN.handle(commit, config)


class CommitValidator:
    """Validates commits against a ValidationConfig."""

    def __init__(self, config: Optional[ValidationConfig] = None):
        self.config = config if config is not None else ValidationConfig()
        self.validation_chain = create_validation_chain()

    def validate(self, commit: Commit) -> List[Validation]:
        """Validate a single commit."""
        return self.validation_chain.handle(commit, self.config)

    def validate_all(self, commits: Iterable[Commit]) -> List[ValidationResult]:
        """Validate commits and keep only those with failures."""
        results = []
        for commit in commits:
            failures = self.validate(commit)
            if failures:
                results.append(ValidationResult(commit=commit, failures=failures))
        return results
