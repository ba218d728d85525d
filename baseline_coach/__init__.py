"""
Baseline Coach - web platform feature usage scanner.

This package finds usages of web platform features in stylesheets, markup and
scripts and reports each one's Baseline status (widely available, newly
available or limited).
"""

from .core.scanner import BaselineScanner
from .core.config import CoachConfig
from .core.aggregator import FailPolicy, PolicyOutcome, evaluate_policy
from .models.feature import Classification, FeatureInfo
from .models.detection import RawDetection, Finding
from .models.report import Report

__version__ = "0.1.0"

__all__ = [
    "BaselineScanner",
    "CoachConfig",
    "FailPolicy",
    "PolicyOutcome",
    "evaluate_policy",
    "Classification",
    "FeatureInfo",
    "RawDetection",
    "Finding",
    "Report",
]
