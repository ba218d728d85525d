"""Per-language feature detectors and extension-based dispatch."""

from pathlib import Path
from typing import Callable, Union

from .base import Detector, PatternDetector, PatternRule
from .markup import MARKUP_RULES, markup_detector
from .script import SCRIPT_RULES, script_detector
from .style import STYLE_RULES, style_detector


STYLE_EXTENSIONS = {".css", ".scss", ".sass", ".less"}
MARKUP_EXTENSIONS = {".html", ".htm"}


def detector_factory_for(path: Union[str, Path]) -> Callable[..., Detector]:
    """Pick the detector family for a file by extension; script is the default."""
    suffix = Path(path).suffix.lower()
    if suffix in STYLE_EXTENSIONS:
        return style_detector
    if suffix in MARKUP_EXTENSIONS:
        return markup_detector
    return script_detector


def detector_for(path: Union[str, Path], **kwargs) -> Detector:
    """Build the detector that should scan ``path``."""
    return detector_factory_for(path)(**kwargs)


__all__ = [
    "Detector",
    "PatternDetector",
    "PatternRule",
    "STYLE_RULES",
    "MARKUP_RULES",
    "SCRIPT_RULES",
    "STYLE_EXTENSIONS",
    "MARKUP_EXTENSIONS",
    "style_detector",
    "markup_detector",
    "script_detector",
    "detector_for",
    "detector_factory_for",
]
