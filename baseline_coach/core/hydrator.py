"""Turn raw detections into findings."""

from typing import Iterable, List, Optional

from ..models.detection import Finding, RawDetection
from .resolver import FeatureResolver


def hydrate(detections: Iterable[RawDetection],
            resolver: Optional[FeatureResolver] = None) -> List[Finding]:
    """
    Resolve every detection into a finding.

    Order is preserved and no detection is dropped; identifiers the catalog
    does not know become limited findings named after the identifier.

    Args:
        detections: Raw detections, typically from a single file
        resolver: Resolver to use; defaults to one over the shared catalog

    Returns:
        List of findings, one per detection
    """
    resolver = resolver or FeatureResolver()
    return [Finding.from_detection(d, resolver.resolve(d.feature_id)) for d in detections]
