"""Feature identifier resolution."""

from typing import Optional

from ..models.feature import FeatureInfo
from .catalog import FeatureCatalog, get_default_catalog


class FeatureResolver:
    """Resolve feature identifiers against a :class:`FeatureCatalog`."""

    def __init__(self, catalog: Optional[FeatureCatalog] = None):
        """
        Initialize the resolver.

        Args:
            catalog: Catalog to query; the process-wide default when omitted
        """
        self._catalog = catalog

    @property
    def catalog(self) -> FeatureCatalog:
        return self._catalog or get_default_catalog()

    def resolve(self, feature_id: str) -> Optional[FeatureInfo]:
        """Return the feature's info, or ``None`` if the catalog lacks it."""
        catalog = self.catalog
        catalog.ensure_loaded()
        return catalog.get(feature_id)


def resolve(feature_id: str) -> Optional[FeatureInfo]:
    """Resolve against the process-wide default catalog."""
    return FeatureResolver().resolve(feature_id)
