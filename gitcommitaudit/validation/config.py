"""Validation settings: rule toggles, length threshold and severities."""
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ..models import Severity, Validation

DEFAULT_THRESHOLD = 30

DEFAULT_SEVERITIES: Dict[Validation, Severity] = {
    Validation.ShortCommit: Severity.Warning,
    Validation.MissingReference: Severity.Info,
    Validation.InvalidFormat: Severity.Info,
    Validation.VagueLanguage: Severity.Warning,
    Validation.WipCommit: Severity.Error,
    Validation.NonImperative: Severity.Warning,
}

# Boolean field that switches each kind on or off; ShortCommit is
# controlled by the threshold instead.
TOGGLES: Dict[Validation, str] = {
    Validation.MissingReference: "require_issue_ref",
    Validation.InvalidFormat: "require_conventional_format",
    Validation.VagueLanguage: "check_vague_language",
    Validation.WipCommit: "check_wip",
    Validation.NonImperative: "check_imperative",
}


class ValidationConfig(BaseModel):
    """Settings for a validation run.

    Every validation kind always has a severity. Fields can be changed
    after construction and take effect on the next validation call.
    """

    model_config = ConfigDict(strict=True, validate_assignment=True)

    threshold: int = Field(
        default=DEFAULT_THRESHOLD,
        ge=0,
        description="Minimum subject length in characters (0 disables the check)"
    )

    require_issue_ref: bool = Field(
        default=True,
        description="Require an issue reference such as #123 or ABC-123"
    )

    require_conventional_format: bool = Field(
        default=True,
        description="Require a conventional commits prefix (type(scope): ...)"
    )

    check_vague_language: bool = Field(
        default=True,
        description="Flag low-information wording like 'fix bug'"
    )

    check_wip: bool = Field(
        default=True,
        description="Flag work-in-progress markers like 'WIP' or 'fixup!'"
    )

    check_imperative: bool = Field(
        default=True,
        description="Flag subjects that do not start with an imperative verb"
    )

    _severities: Dict[Validation, Severity] = PrivateAttr(
        default_factory=lambda: dict(DEFAULT_SEVERITIES)
    )

    def get_severity(self, validation: Validation) -> Severity:
        return self._severities[Validation(validation)]

    def set_severity(self, validation: Validation, severity: Severity) -> None:
        self._severities[Validation(validation)] = Severity(severity)

    @property
    def severities(self) -> Dict[Validation, Severity]:
        """Snapshot of the severity map."""
        return dict(self._severities)

    def is_enabled(self, validation: Validation) -> bool:
        """Check if a validation kind will be evaluated at all."""
        if validation == Validation.ShortCommit:
            return self.threshold > 0
        return getattr(self, TOGGLES[validation])

    def disable(self, validation: Validation) -> None:
        """Skip a validation kind entirely."""
        if validation == Validation.ShortCommit:
            self.threshold = 0
        else:
            setattr(self, TOGGLES[validation], False)

    def parse_and_set(self, validations: str, severity: Severity) -> None:
        """Set the severity of a comma-separated list of validation names."""
        for validation in Validation.parse_list(validations):
            self.set_severity(validation, severity)

    def parse_and_disable(self, validations: str) -> None:
        for validation in Validation.parse_list(validations):
            self.disable(validation)

    def with_threshold(self, threshold: int) -> 'ValidationConfig':
        """Return a copy of this config with a different threshold."""
        copied = self.model_copy(deep=True)
        copied.threshold = threshold
        return copied
