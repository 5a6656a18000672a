"""Commit message validation package."""

from .config import DEFAULT_SEVERITIES, DEFAULT_THRESHOLD, ValidationConfig
from .handlers import (
    ValidationHandler,
    create_validation_chain,
    has_conventional_format,
    has_reference,
    has_vague_language,
    is_non_imperative,
    is_short,
    is_wip_commit,
)
from .validator import CommitValidator, validate_commit

__all__ = [
    'DEFAULT_SEVERITIES',
    'DEFAULT_THRESHOLD',
    'ValidationConfig',
    'ValidationHandler',
    'create_validation_chain',
    'has_conventional_format',
    'has_reference',
    'has_vague_language',
    'is_non_imperative',
    'is_short',
    'is_wip_commit',
    'CommitValidator',
    'validate_commit',
]
