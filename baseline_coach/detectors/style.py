"""Stylesheet feature patterns."""

from .base import PatternDetector, PatternRule


STYLE_RULES = (
    PatternRule.compile("has", r":has\("),
    PatternRule.compile("subgrid", r"grid-template-(?:columns|rows)\s*:[^;{}]*\bsubgrid\b"),
    PatternRule.compile("view-transitions", r"@view-transition\b"),
)


def style_detector(**kwargs) -> PatternDetector:
    return PatternDetector("css", STYLE_RULES, **kwargs)
