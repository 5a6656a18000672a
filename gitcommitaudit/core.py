"""Core functionality for git-commit-audit."""
from pathlib import Path
from typing import Iterable, List, Optional, Union

from rich.console import Console

from .errors import ValidationFailed
from .models import AnalysisReport, Validation, ValidationResult
from .observers import AnalysisObserver, ConsoleLogObserver
from .repository import count_commits, fetch_commits
from .validation import DEFAULT_THRESHOLD, CommitValidator, ValidationConfig

AllowList = Union[str, Iterable[Union[str, Validation]]]


def parse_allow_list(errors: Optional[AllowList]) -> Optional[frozenset]:
    """Turn an ``errors=`` argument into a set of Validation kinds.

    Accepts a comma-separated string or an iterable of names/members.
    """
    if errors is None:
        return None
    if isinstance(errors, str):
        return frozenset(Validation.parse_list(errors))
    return frozenset(
        item if isinstance(item, Validation) else Validation.parse(item)
        for item in errors
    )


class CommitAnalyzer:
    """Validates a batch of commits and decides whether the run passes."""

    def __init__(
        self,
        repo_path: Union[str, Path] = ".",
        config: Optional[ValidationConfig] = None,
        allowed: Optional[Iterable[Validation]] = None,
        strict: bool = False,
    ):
        self.repo_path = Path(repo_path)
        self.config = config if config is not None else ValidationConfig()
        self.allowed = frozenset(allowed) if allowed is not None else None
        self.strict = strict
        self.observers: List[AnalysisObserver] = []

    def add_observer(self, observer: AnalysisObserver) -> None:
        """Add an observer to be notified of analysis progress."""
        self.observers.append(observer)

    def remove_observer(self, observer: AnalysisObserver) -> None:
        self.observers.remove(observer)

    def _filter(self, failures: List[Validation]) -> List[Validation]:
        if self.allowed is None:
            return failures
        return [failure for failure in failures if failure in self.allowed]

    def analyze(self, limit: Optional[int] = None) -> AnalysisReport:
        """Fetch, validate and aggregate without raising on findings.

        Repository errors propagate unchanged.
        """
        commits = fetch_commits(self.repo_path, limit)
        total_commits = count_commits(self.repo_path)

        validator = CommitValidator(self.config)
        results = []
        for commit in commits:
            result = ValidationResult(
                commit=commit, failures=self._filter(validator.validate(commit))
            )
            for observer in self.observers:
                observer.on_commit_validated(result)
            if result.failures:
                results.append(result)

        report = AnalysisReport(
            results=results,
            total_commits=total_commits,
            analyzed_count=len(commits),
            threshold=self.config.threshold,
            path=self.repo_path,
            severities=self.config.severities,
            strict=self.strict,
        )
        for observer in self.observers:
            observer.on_analysis_completed(report)
        return report

    def run(self, limit: Optional[int] = None) -> AnalysisReport:
        """Analyze and raise ValidationFailed when the batch fails."""
        report = self.analyze(limit)
        if report.failed:
            raise ValidationFailed(report.failing_results(), report.severities)
        return report


def analyze_commits(
    path: Union[str, Path] = ".",
    limit: Optional[int] = None,
    threshold: int = DEFAULT_THRESHOLD,
    quiet: bool = False,
    config: Optional[ValidationConfig] = None,
    errors: Optional[AllowList] = None,
    strict: bool = False,
    console: Optional[Console] = None,
    observers: Optional[Iterable[AnalysisObserver]] = None,
) -> None:
    """Analyze commits and raise if any finding has Error severity.

    Args:
        path: Path to the repository (default: current directory)
        limit: Number of commits to analyze (default: all)
        threshold: Minimum subject length, used only when ``config`` is None
        quiet: Print the report only when there are findings; never changes
            the outcome
        config: ValidationConfig for customizing validation behavior
        errors: Only these validation kinds may trigger (names or members)
        strict: Treat warnings as errors
        console: Rich console for the report
        observers: Extra observers such as FileLogObserver

    Raises:
        PathNotFound, NotARepository, GitCommandFailed: If history can't be read
        ValidationFailed: If validation issues with blocking severity are found
    """
    if config is None:
        config = ValidationConfig(threshold=threshold)

    analyzer = CommitAnalyzer(
        path, config=config, allowed=parse_allow_list(errors), strict=strict
    )
    analyzer.add_observer(ConsoleLogObserver(console, quiet=quiet))
    for observer in observers or ():
        analyzer.add_observer(observer)

    analyzer.run(limit)
