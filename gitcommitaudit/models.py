"""Shared models for git-commit-audit."""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from .errors import InvalidSeverityError, InvalidValidationError

if TYPE_CHECKING:
    from .validation.config import ValidationConfig


class Validation(str, Enum):
    """Kinds of commit message checks, in evaluation order."""

    ShortCommit = "short"
    MissingReference = "reference"
    InvalidFormat = "format"
    VagueLanguage = "vague"
    WipCommit = "wip"
    NonImperative = "imperative"

    def __str__(self) -> str:
        return _VALIDATION_DESCRIPTIONS[self]

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"

    @classmethod
    def parse(cls, name: str) -> "Validation":
        """Look up a validation by name or alias, case-insensitively."""
        key = name.strip().lower()
        for validation, aliases in _VALIDATION_ALIASES.items():
            if key in aliases:
                return validation
        raise InvalidValidationError(name)

    @classmethod
    def parse_list(cls, names: str) -> List["Validation"]:
        """Parse a comma-separated list of names, skipping empty entries."""
        return [cls.parse(name) for name in names.split(",") if name.strip()]


_VALIDATION_DESCRIPTIONS: Dict[Validation, str] = {
    Validation.ShortCommit: "Short commit message",
    Validation.MissingReference: "Missing issue reference (e.g., #123)",
    Validation.InvalidFormat: "Invalid format (expected: type: description)",
    Validation.VagueLanguage: "Vague language (e.g., 'fix bug', 'update code')",
    Validation.WipCommit: "Work-in-progress commit (e.g., 'WIP', 'fixup!')",
    Validation.NonImperative: "Non-imperative mood (use 'Add' not 'Added')",
}

_VALIDATION_ALIASES: Dict[Validation, Tuple[str, ...]] = {
    Validation.ShortCommit: ("short", "shortcommit", "short-commit"),
    Validation.MissingReference: (
        "reference", "ref", "missingreference", "missing-reference"
    ),
    Validation.InvalidFormat: ("format", "invalidformat", "invalid-format"),
    Validation.VagueLanguage: ("vague", "vaguelanguage", "vague-language"),
    Validation.WipCommit: ("wip", "wipcommit", "wip-commit"),
    Validation.NonImperative: (
        "imperative", "nonimperative", "non-imperative"
    ),
}


class Severity(str, Enum):
    """Consequence of a triggered validation. Error is the most severe."""

    Error = "error"
    Warning = "warning"
    Info = "info"
    Ignore = "ignore"

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANKS[self]

    # str already defines the rich comparisons, so all four are overridden
    def __lt__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def parse(cls, name: str) -> "Severity":
        key = name.strip().lower()
        if key == "warn":
            return cls.Warning
        for severity in cls:
            if severity.value == key:
                return severity
        raise InvalidSeverityError(name)


_SEVERITY_RANKS: Dict[Severity, int] = {
    Severity.Ignore: 0,
    Severity.Info: 1,
    Severity.Warning: 2,
    Severity.Error: 3,
}


@dataclass(frozen=True)
class Commit:
    """A single commit from repository history."""

    hash: str
    author_name: str
    author_email: str
    subject: str
    body: str = ""

    @property
    def short_hash(self) -> str:
        return self.hash[:7]

    def validate(
        self,
        config: Optional["ValidationConfig"] = None,
        threshold: Optional[int] = None,
    ) -> List[Validation]:
        """Run the enabled checks against this commit.

        Args:
            config: Validation settings, defaults to ``ValidationConfig()``
            threshold: Overrides only the threshold of a copy of ``config``

        Returns:
            List[Validation]: Triggered checks in evaluation order
        """
        from .validation.config import ValidationConfig
        from .validation.validator import validate_commit

        config = config if config is not None else ValidationConfig()
        if threshold is not None:
            config = config.with_threshold(threshold)
        return validate_commit(self, config)


@dataclass
class ValidationResult:
    """A commit paired with the checks it failed."""

    commit: Commit
    failures: List[Validation] = field(default_factory=list)


class AnalysisStatus(str, Enum):
    EMPTY = "empty"
    ACCEPTABLE = "acceptable"
    NEEDS_WORK = "needs_work"


@dataclass
class AnalysisReport:
    """Outcome of analyzing one batch of commits.

    Only commits with at least one failure are kept in ``results``.
    """

    results: List[ValidationResult]
    total_commits: int
    analyzed_count: int
    threshold: int
    path: Path
    severities: Dict[Validation, Severity]
    strict: bool = False

    @property
    def status(self) -> AnalysisStatus:
        if self.total_commits == 0:
            return AnalysisStatus.EMPTY
        if not self.results:
            return AnalysisStatus.ACCEPTABLE
        return AnalysisStatus.NEEDS_WORK

    def severity_of(self, validation: Validation) -> Severity:
        return self.severities[validation]

    def triggered_severities(self) -> set:
        """Union of severities over the whole batch."""
        return {
            self.severities[failure]
            for result in self.results
            for failure in result.failures
        }

    @property
    def has_errors(self) -> bool:
        return Severity.Error in self.triggered_severities()

    @property
    def has_warnings(self) -> bool:
        return Severity.Warning in self.triggered_severities()

    @property
    def failed(self) -> bool:
        return self.has_errors or (self.strict and self.has_warnings)

    def _count(self, severity: Severity) -> int:
        return sum(
            1
            for result in self.results
            if any(self.severities[f] == severity for f in result.failures)
        )

    @property
    def error_count(self) -> int:
        return self._count(Severity.Error)

    @property
    def warning_count(self) -> int:
        return self._count(Severity.Warning)

    def failing_results(self) -> List[ValidationResult]:
        """Results that contribute to a failed run."""
        blocking = {Severity.Error}
        if self.strict:
            blocking.add(Severity.Warning)
        return [
            result
            for result in self.results
            if any(self.severities[f] in blocking for f in result.failures)
        ]
