"""Dataclasses for content generation."""
from dataclasses import dataclass, field
from typing import List, Optional
from drupal_regression.db.models import ContentEntity


@dataclass
class GenerationMessages:
    """Warnings and errors collected while generating content."""
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def extend(self, other: "GenerationMessages") -> None:
        self.warnings.extend(other.warnings)
        self.errors.extend(other.errors)

    def to_dict(self) -> dict:
        return {"warnings": list(self.warnings), "errors": list(self.errors)}


@dataclass
class GenerationResult:
    """Outcome of a single generate() call. ``entity`` is None when the bundle was skipped."""
    messages: GenerationMessages
    entity: Optional[ContentEntity] = None
