"""Detection and finding data models."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field  # type: ignore

from .feature import Classification, FeatureInfo


SNIPPET_LIMIT = 300


class RawDetection(BaseModel):
    """An unresolved feature usage located by a detector."""

    model_config = ConfigDict(frozen=True)

    file: str = Field(..., description="Path of the scanned file")
    line: int = Field(..., ge=1, description="1-based line number")
    column: int = Field(..., ge=1, description="1-based column of the match start")
    feature_id: str = Field(..., description="Detected feature identifier")
    snippet: str = Field("", description="Trimmed source line")
    detector: str = Field(..., description="Tag of the detector that produced it")


class Finding(BaseModel):
    """A detection enriched with the feature's Baseline status."""

    model_config = ConfigDict(frozen=True)

    file: str
    line: int = Field(..., ge=1)
    column: int = Field(..., ge=1)
    feature_id: str
    feature_name: str
    classification: Classification
    baseline_low_date: Optional[str] = None
    baseline_high_date: Optional[str] = None
    snippet: Optional[str] = None
    detector: str

    @classmethod
    def from_detection(cls, detection: RawDetection, info: Optional[FeatureInfo]) -> "Finding":
        """Combine a raw detection with its resolved info.

        Unknown features are reported as limited, named by their identifier.
        """
        if info is None:
            return cls(
                file=detection.file,
                line=detection.line,
                column=detection.column,
                feature_id=detection.feature_id,
                feature_name=detection.feature_id,
                classification=Classification.LIMITED,
                snippet=detection.snippet or None,
                detector=detection.detector,
            )

        return cls(
            file=detection.file,
            line=detection.line,
            column=detection.column,
            feature_id=detection.feature_id,
            feature_name=info.name,
            classification=info.classification,
            baseline_low_date=info.baseline_low_date,
            baseline_high_date=info.baseline_high_date,
            snippet=detection.snippet or None,
            detector=detection.detector,
        )

    @property
    def location(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"

    @property
    def since_text(self) -> str:
        """Parenthesized availability note used by the renderers."""
        if self.classification is Classification.WIDELY_AVAILABLE:
            return f"(widely since {self.baseline_high_date})"
        if self.classification is Classification.NEWLY_AVAILABLE:
            return f"(newly since {self.baseline_low_date})"
        return "(not in Baseline)"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize in the report shape consumed by JSON renderers."""
        data: Dict[str, Any] = {
            "file": self.file,
            "line": self.line,
            "column": self.column,
            "featureId": self.feature_id,
            "featureName": self.feature_name,
            "baseline": self.classification.baseline_value,
        }
        if self.baseline_low_date:
            data["baseline_low_date"] = self.baseline_low_date
        if self.baseline_high_date:
            data["baseline_high_date"] = self.baseline_high_date
        if self.snippet:
            data["snippet"] = self.snippet
        data["detector"] = self.detector
        return data
