"""Feature catalog loading with a built-in fallback.

The catalog maps feature identifiers to :class:`FeatureInfo`. It is filled
exactly once per :class:`FeatureCatalog`, on first use, from a pluggable data
source: any callable returning a web-features style mapping::

    {"has": {"name": ":has()", "status": {"baseline": "low", "baseline_low_date": "2023-12-19"}}}

If the source raises or returns something unusable, the small catalog in
:data:`FALLBACK_FEATURES` is used instead and the source is never retried.
"""

import json
import logging
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

import httpx  # type: ignore
from pydantic import Field  # type: ignore
from pydantic_settings import BaseSettings, SettingsConfigDict  # type: ignore

from ..models.feature import FeatureInfo

logger = logging.getLogger(__name__)


CatalogSource = Callable[[], Mapping[str, Any]]

# Redirect records in newer web-features releases; they carry no status.
REDIRECT_KINDS = {"moved", "split"}

FALLBACK_FEATURES: Dict[str, Dict[str, Any]] = {
    "has": {
        "name": ":has() selector",
        "description": "CSS :has() pseudo-class",
        "status": {"baseline": "low", "baseline_low_date": "2023-12-19"},
    },
    "subgrid": {
        "name": "Subgrid",
        "description": "CSS grid subgrid value",
        "status": {"baseline": "low", "baseline_low_date": "2023-09-15"},
    },
    "dialog": {
        "name": "<dialog> element",
        "description": "Modal and non-modal dialogs",
        "status": {"baseline": "high", "baseline_high_date": "2024-09-14"},
    },
    "async-clipboard": {
        "name": "Async Clipboard API",
        "description": "navigator.clipboard",
        "status": {"baseline": "high", "baseline_high_date": "2022-08-01"},
    },
    "share": {
        "name": "Web Share API",
        "description": "navigator.share",
        "status": {"baseline": "low", "baseline_low_date": "2020-01-01"},
    },
    "view-transitions": {
        "name": "View Transitions API",
        "description": "Animated page/view transitions",
        "status": {"baseline": False},
    },
}


class CatalogSettings(BaseSettings):
    """Where to load the feature dataset from.

    Loads from environment variables automatically:
        BASELINE_COACH_FEATURES_PATH, BASELINE_COACH_FEATURES_URL,
        BASELINE_COACH_FEATURES_TIMEOUT
    """

    features_path: Optional[str] = Field(default=None, description="Path to a web-features data.json")
    features_url: Optional[str] = Field(default=None, description="URL serving a web-features data.json")
    features_timeout: float = Field(default=10.0, gt=0, description="HTTP timeout in seconds")

    model_config = SettingsConfigDict(
        env_prefix="BASELINE_COACH_",
        extra="ignore",
    )


def _unwrap_features(data: Any) -> Mapping[str, Any]:
    """Accept both a bare feature mapping and a full ``data.json`` document."""
    if not isinstance(data, Mapping):
        raise ValueError(f"Feature dataset must be a mapping, got {type(data).__name__}")
    features = data.get("features")
    if isinstance(features, Mapping):
        return features
    return data


class JsonFileSource:
    """Read the dataset from a local JSON file."""

    def __init__(self, path: str):
        self.path = Path(path)

    def __call__(self) -> Mapping[str, Any]:
        with open(self.path, "r", encoding="utf-8") as f:
            return _unwrap_features(json.load(f))


class HttpJsonSource:
    """Fetch the dataset once over HTTP."""

    def __init__(self, url: str, timeout: float = 10.0):
        self.url = url
        self.timeout = timeout

    def __call__(self) -> Mapping[str, Any]:
        response = httpx.get(self.url, timeout=self.timeout, follow_redirects=True)
        response.raise_for_status()
        return _unwrap_features(response.json())


def default_source() -> Mapping[str, Any]:
    """Load the dataset configured through :class:`CatalogSettings`.

    Raises:
        LookupError: If no dataset location is configured
    """
    settings = CatalogSettings()
    if settings.features_path:
        return JsonFileSource(settings.features_path)()
    if settings.features_url:
        return HttpJsonSource(settings.features_url, timeout=settings.features_timeout)()
    raise LookupError("No feature dataset configured")


def build_catalog(data: Mapping[str, Any]) -> Dict[str, FeatureInfo]:
    """
    Validate a web-features style mapping and convert it to catalog entries.

    Args:
        data: Mapping from feature identifier to feature record

    Returns:
        Dictionary mapping identifiers to FeatureInfo

    Raises:
        ValueError: If the mapping is empty or any non-redirect record is malformed
    """
    entries: Dict[str, FeatureInfo] = {}
    for feature_id, entry in data.items():
        if isinstance(entry, Mapping) and entry.get("kind") in REDIRECT_KINDS:
            continue
        entries[feature_id] = FeatureInfo.from_dataset_entry(feature_id, entry)

    if not entries:
        raise ValueError("Feature dataset contains no features")
    return entries


class FeatureCatalog:
    """Process-lifetime catalog of feature metadata, loaded at most once."""

    def __init__(self, source: Optional[CatalogSource] = None):
        """
        Initialize the catalog without loading it.

        Args:
            source: Callable returning the dataset; defaults to :func:`default_source`
        """
        self._source: CatalogSource = source or default_source
        self._lock = threading.Lock()
        self._entries: Optional[Mapping[str, FeatureInfo]] = None
        self.source_name: Optional[str] = None

    @property
    def loaded(self) -> bool:
        return self._entries is not None

    def ensure_loaded(self) -> None:
        """Load the catalog on first call; later calls are no-ops.

        Never raises for dataset problems: any failure of the source selects
        the built-in fallback catalog.
        """
        if self._entries is not None:
            return

        with self._lock:
            if self._entries is not None:
                return

            try:
                entries = build_catalog(self._source())
                source_name = "dataset"
            except Exception as e:
                logger.debug("Feature dataset unavailable, using built-in catalog: %s", e)
                entries = build_catalog(FALLBACK_FEATURES)
                source_name = "fallback"

            self.source_name = source_name
            self._entries = MappingProxyType(entries)
            logger.debug("Loaded %d features from %s", len(entries), source_name)

    def get(self, feature_id: str) -> Optional[FeatureInfo]:
        """Exact-match lookup; ``None`` when the identifier is unknown."""
        self.ensure_loaded()
        return self._entries.get(feature_id)  # type: ignore[union-attr]

    def entries(self) -> List[FeatureInfo]:
        """All entries, sorted by identifier."""
        self.ensure_loaded()
        return [self._entries[k] for k in sorted(self._entries)]  # type: ignore[index]

    def __contains__(self, feature_id: object) -> bool:
        self.ensure_loaded()
        return feature_id in self._entries  # type: ignore[operator]

    def __len__(self) -> int:
        self.ensure_loaded()
        return len(self._entries)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[str]:
        self.ensure_loaded()
        return iter(sorted(self._entries))  # type: ignore[arg-type]


# Process-wide default catalog
_default_catalog: Optional[FeatureCatalog] = None
_default_lock = threading.Lock()


def get_default_catalog() -> FeatureCatalog:
    """Return the shared catalog, creating it (unloaded) if needed."""
    global _default_catalog
    if _default_catalog is None:
        with _default_lock:
            if _default_catalog is None:
                _default_catalog = FeatureCatalog()
    return _default_catalog


def set_default_catalog(catalog: FeatureCatalog) -> None:
    """Replace the shared catalog, e.g. with one backed by a custom source."""
    global _default_catalog
    with _default_lock:
        _default_catalog = catalog


def reset_default_catalog() -> None:
    """Drop the shared catalog so the next use starts from scratch."""
    global _default_catalog
    with _default_lock:
        _default_catalog = None


def ensure_loaded() -> None:
    """Load the shared catalog if it has not been loaded yet."""
    get_default_catalog().ensure_loaded()
