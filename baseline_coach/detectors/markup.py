"""Markup feature patterns."""

import re

from .base import PatternDetector, PatternRule


MARKUP_RULES = (
    PatternRule.compile("dialog", r"<\s*dialog\b", re.IGNORECASE),
)


def markup_detector(**kwargs) -> PatternDetector:
    return PatternDetector("html", MARKUP_RULES, **kwargs)
