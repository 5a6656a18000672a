"""Commit message checks using Chain of Responsibility pattern.

Unlike a short-circuiting chain, every handler runs: each one records its
own validation kind when it triggers and then passes the commit on, so the
chain yields all failures in a fixed order.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, TYPE_CHECKING

from ..models import Commit, Validation
from . import patterns

if TYPE_CHECKING:
    from .config import ValidationConfig


def is_short(subject: str, threshold: int) -> bool:
    """Check if a subject is shorter than ``threshold`` characters."""
    return len(subject) < threshold


def has_reference(text: str) -> bool:
    """Check if text contains an issue/ticket reference."""
    return bool(patterns.REFERENCE_PATTERN.search(text))


def has_conventional_format(subject: str) -> bool:
    """Check if a subject follows the conventional commits format."""
    return bool(patterns.CONVENTIONAL_PATTERN.match(subject))


def has_vague_language(subject: str) -> bool:
    return any(pattern.search(subject) for pattern in patterns.VAGUE_PATTERNS)


def is_wip_commit(subject: str) -> bool:
    return bool(patterns.WIP_PATTERN.search(subject.strip()))


def first_word(subject: str) -> Optional[str]:
    """Return the first word of the description, skipping any type prefix."""
    description = patterns.CONVENTIONAL_PREFIX_PATTERN.sub("", subject.strip(), count=1)
    match = patterns.FIRST_WORD_PATTERN.search(description.split(" ", 1)[0])
    return match.group(0) if match else None


def is_non_imperative(subject: str) -> bool:
    """Heuristic: the first word ends in -ed, -ing or -s."""
    word = first_word(subject)
    if not word:
        return False
    word = word.lower()
    if word in patterns.IMPERATIVE_EXCEPTIONS:
        return False
    if word.endswith(patterns.IMPERATIVE_ENDINGS):
        return False
    # Keep the stem at least two letters long ("is", "as", "red")
    return any(
        word.endswith(suffix) and len(word) - len(suffix) >= 2
        for suffix in patterns.NON_IMPERATIVE_SUFFIXES
    )


class ValidationHandler(ABC):
    """Abstract base class for validation handlers."""

    kind: Validation

    def __init__(self, next_handler: Optional['ValidationHandler'] = None):
        self.next_handler = next_handler

    def handle(
        self,
        commit: Commit,
        config: 'ValidationConfig',
        failures: Optional[List[Validation]] = None,
    ) -> List[Validation]:
        """Run this check if enabled, then pass to the next handler."""
        if failures is None:
            failures = []
        if config.is_enabled(self.kind) and self.check(commit, config):
            failures.append(self.kind)
        if not self.next_handler:
            return failures
        return self.next_handler.handle(commit, config, failures)

    @abstractmethod
    def check(self, commit: Commit, config: 'ValidationConfig') -> bool:
        """Return True when the commit violates this rule."""
        pass


class ShortCommitHandler(ValidationHandler):
    kind = Validation.ShortCommit

    def check(self, commit: Commit, config: 'ValidationConfig') -> bool:
        return is_short(commit.subject, config.threshold)


class MissingReferenceHandler(ValidationHandler):
    """Looks for an issue reference in the subject and the body."""

    kind = Validation.MissingReference

    def check(self, commit: Commit, config: 'ValidationConfig') -> bool:
        return not (has_reference(commit.subject) or has_reference(commit.body))


class InvalidFormatHandler(ValidationHandler):
    kind = Validation.InvalidFormat

    def check(self, commit: Commit, config: 'ValidationConfig') -> bool:
        return not has_conventional_format(commit.subject)


class VagueLanguageHandler(ValidationHandler):
    kind = Validation.VagueLanguage

    def check(self, commit: Commit, config: 'ValidationConfig') -> bool:
        return has_vague_language(commit.subject)


class WipCommitHandler(ValidationHandler):
    kind = Validation.WipCommit

    def check(self, commit: Commit, config: 'ValidationConfig') -> bool:
        return is_wip_commit(commit.subject)


class NonImperativeHandler(ValidationHandler):
    kind = Validation.NonImperative

    def check(self, commit: Commit, config: 'ValidationConfig') -> bool:
        return is_non_imperative(commit.subject)


def create_validation_chain() -> ValidationHandler:
    """Create the validation chain in evaluation order."""
    non_imperative = NonImperativeHandler()
    wip = WipCommitHandler(non_imperative)
    vague = VagueLanguageHandler(wip)
    conventional = InvalidFormatHandler(vague)
    reference = MissingReferenceHandler(conventional)
    short = ShortCommitHandler(reference)

    return short
