"""Core components for Baseline Coach."""

from .catalog import FeatureCatalog, ensure_loaded, get_default_catalog
from .resolver import FeatureResolver, resolve
from .hydrator import hydrate
from .aggregator import FailPolicy, PolicyOutcome, aggregate, evaluate_policy
from .config import CoachConfig
from .scanner import BaselineScanner

__all__ = [
    "FeatureCatalog",
    "ensure_loaded",
    "get_default_catalog",
    "FeatureResolver",
    "resolve",
    "hydrate",
    "FailPolicy",
    "PolicyOutcome",
    "aggregate",
    "evaluate_policy",
    "CoachConfig",
    "BaselineScanner",
]
