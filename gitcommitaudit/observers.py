"""Observer pattern for commit analysis reporting."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .models import AnalysisReport, AnalysisStatus, Severity, ValidationResult

SEVERITY_PREFIXES = {
    Severity.Error: "[red]\\[error][/red]",
    Severity.Warning: "[yellow]\\[warn][/yellow]",
    Severity.Info: "[blue]\\[info][/blue]",
}


class AnalysisObserver(ABC):
    """Abstract base class for analysis observers."""

    @abstractmethod
    def on_commit_validated(self, result: ValidationResult) -> None:
        """Called for every analyzed commit, including clean ones."""
        pass

    @abstractmethod
    def on_analysis_completed(self, report: AnalysisReport) -> None:
        """Called once the whole batch has been validated."""
        pass


class ConsoleLogObserver(AnalysisObserver):
    """Observer that prints the analysis report to the console."""

    def __init__(self, console: Optional[Console] = None, quiet: bool = False):
        self.console = console or Console()
        # Quiet runs print only reports with findings
        self.quiet = quiet

    def on_commit_validated(self, result: ValidationResult) -> None:
        pass

    def on_analysis_completed(self, report: AnalysisReport) -> None:
        if report.status == AnalysisStatus.EMPTY:
            if not self.quiet:
                self.console.print("No commits found in repository.")
            return
        if report.status == AnalysisStatus.ACCEPTABLE:
            if not self.quiet:
                self.console.print("[green]Commit messages are adequately executed.[/green]")
            return

        self.console.print(
            f"Analyzed {report.analyzed_count} of {report.total_commits} "
            f"total commits on path {report.path}\n"
        )
        self.console.print(
            f"Found {len(report.results)} commits with issues "
            f"({report.error_count} errors, {report.warning_count} warnings) "
            f"(threshold: {report.threshold} chars):\n"
        )
        for result in report.results:
            self.console.print(
                f"  {result.commit.hash}: \"{result.commit.subject}\"",
                markup=False,
            )
            for failure in result.failures:
                prefix = SEVERITY_PREFIXES.get(report.severity_of(failure))
                if prefix is None:
                    continue
                self.console.print(f"    {prefix} {escape(str(failure))}")


class FileLogObserver(AnalysisObserver):
    """Observer that logs analysis results to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_commit_validated(self, result: ValidationResult) -> None:
        if not result.failures:
            return
        names = ", ".join(failure.value for failure in result.failures)
        self._log(f"{result.commit.short_hash} failed {names}: {result.commit.subject}")

    def on_analysis_completed(self, report: AnalysisReport) -> None:
        status = "failed" if report.failed else "passed"
        self._log(
            f"Analysis {status}: {len(report.results)} of {report.analyzed_count} "
            f"commits with issues in {report.path}"
        )
