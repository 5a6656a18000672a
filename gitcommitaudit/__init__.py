"""git-commit-audit: find commit messages that break quality rules."""

__version__ = "0.3.0"

from .core import CommitAnalyzer, analyze_commits
from .errors import (
    CommitAuditError,
    ConfigError,
    GitCommandFailed,
    InvalidSeverityError,
    InvalidValidationError,
    NotARepository,
    PathNotFound,
    RepositoryError,
    ValidationFailed,
)
from .models import AnalysisReport, Commit, Severity, Validation, ValidationResult
from .repository import count_commits, fetch_commits
from .validation import ValidationConfig

__all__ = [
    '__version__',
    'CommitAnalyzer',
    'analyze_commits',
    'CommitAuditError',
    'ConfigError',
    'GitCommandFailed',
    'InvalidSeverityError',
    'InvalidValidationError',
    'NotARepository',
    'PathNotFound',
    'RepositoryError',
    'ValidationFailed',
    'AnalysisReport',
    'Commit',
    'Severity',
    'Validation',
    'ValidationResult',
    'count_commits',
    'fetch_commits',
    'ValidationConfig',
]
