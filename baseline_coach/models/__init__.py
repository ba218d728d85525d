"""Data models for Baseline Coach."""

from .feature import Classification, FeatureInfo
from .detection import RawDetection, Finding
from .report import Report

__all__ = [
    "Classification",
    "FeatureInfo",
    "RawDetection",
    "Finding",
    "Report",
]
