"""Feature catalog data models."""

from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field  # type: ignore


BaselineValue = Union[str, bool]


class Classification(str, Enum):
    """Baseline support classification of a web platform feature."""
    WIDELY_AVAILABLE = "widely-available"
    NEWLY_AVAILABLE = "newly-available"
    LIMITED = "limited"

    @classmethod
    def from_baseline(cls, value: Optional[BaselineValue]) -> "Classification":
        """Map the dataset's ``status.baseline`` value onto a classification.

        ``'high'`` is widely available, ``'low'`` is newly available and
        anything else (``False``, missing, unknown strings) is limited.
        """
        if value == "high":
            return cls.WIDELY_AVAILABLE
        if value == "low":
            return cls.NEWLY_AVAILABLE
        return cls.LIMITED

    @property
    def baseline_value(self) -> BaselineValue:
        """Dataset vocabulary for this classification (``'high'``, ``'low'`` or ``False``)."""
        if self is Classification.WIDELY_AVAILABLE:
            return "high"
        if self is Classification.NEWLY_AVAILABLE:
            return "low"
        return False

    @property
    def label(self) -> str:
        """Human-readable label."""
        return {
            Classification.WIDELY_AVAILABLE: "Widely available",
            Classification.NEWLY_AVAILABLE: "Newly available",
            Classification.LIMITED: "Limited availability",
        }[self]


class FeatureInfo(BaseModel):
    """A resolved catalog entry for one feature identifier."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable feature identifier, e.g. 'has'")
    name: str = Field(..., description="Display name")
    description: Optional[str] = Field(None, description="Short description")
    classification: Classification = Field(..., description="Baseline classification")
    baseline_low_date: Optional[str] = Field(None, description="Newly available since")
    baseline_high_date: Optional[str] = Field(None, description="Widely available since")

    @classmethod
    def from_dataset_entry(cls, feature_id: str, entry: Mapping[str, Any]) -> "FeatureInfo":
        """Build an entry from a web-features style record.

        Args:
            feature_id: Key of the record in the dataset
            entry: Mapping with ``name``, optional ``description`` and a ``status`` block

        Returns:
            FeatureInfo for the record

        Raises:
            ValueError: If the record lacks a name or a status block
        """
        if not isinstance(entry, Mapping):
            raise ValueError(f"Feature '{feature_id}' is not a mapping")
        status = entry.get("status")
        if not entry.get("name") or not isinstance(status, Mapping):
            raise ValueError(f"Feature '{feature_id}' is missing a name or status")

        return cls(
            id=feature_id,
            name=entry["name"],
            description=entry.get("description"),
            classification=Classification.from_baseline(status.get("baseline")),
            baseline_low_date=status.get("baseline_low_date"),
            baseline_high_date=status.get("baseline_high_date"),
        )

    @property
    def since(self) -> Optional[str]:
        """Date relevant to the classification, if any."""
        if self.classification is Classification.WIDELY_AVAILABLE:
            return self.baseline_high_date
        if self.classification is Classification.NEWLY_AVAILABLE:
            return self.baseline_low_date
        return None

    def status_text(self) -> str:
        """One-line status, e.g. ``Widely available (since 2024-09-14)``."""
        if self.since:
            return f"{self.classification.label} (since {self.since})"
        return self.classification.label
