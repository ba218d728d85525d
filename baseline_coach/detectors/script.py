"""Script feature patterns.

Whitespace is tolerated around member-access dots and before call
parentheses, so ``navigator . share (`` still counts.
"""

from .base import PatternDetector, PatternRule


SCRIPT_RULES = (
    PatternRule.compile("share", r"navigator\s*\.\s*share\s*\("),
    PatternRule.compile("async-clipboard", r"navigator\s*\.\s*clipboard\b"),
    PatternRule.compile("view-transitions", r"document\s*\.\s*startViewTransition\s*\("),
)


def script_detector(**kwargs) -> PatternDetector:
    return PatternDetector("js", SCRIPT_RULES, **kwargs)
