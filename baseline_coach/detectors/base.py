"""Line-oriented, table-driven feature detection."""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Protocol, Sequence, Union

from ..models.detection import SNIPPET_LIMIT, RawDetection


_LINE_BREAK = re.compile(r"\r?\n")


@dataclass(frozen=True)
class PatternRule:
    """One row of a detector's pattern table."""

    feature_id: str
    pattern: "re.Pattern[str]"

    @classmethod
    def compile(cls, feature_id: str, regex: str, flags: int = 0) -> "PatternRule":
        return cls(feature_id=feature_id, pattern=re.compile(regex, flags))


class Detector(Protocol):
    """Scanner contract shared by every language family."""

    tag: str

    def scan(self, path: Union[str, Path]) -> List[RawDetection]: ...

    def scan_text(self, text: str, path: Union[str, Path]) -> List[RawDetection]: ...


class PatternDetector:
    """Detector driven entirely by a table of :class:`PatternRule`.

    Each line is matched against every rule; every non-overlapping match
    yields its own detection. Detections come out by line, then rule order,
    then position on the line.
    """

    def __init__(self, tag: str, rules: Sequence[PatternRule], snippet_length: int = SNIPPET_LIMIT):
        self.tag = tag
        self.rules = tuple(rules)
        self.snippet_length = snippet_length

    def scan(self, path: Union[str, Path]) -> List[RawDetection]:
        """Read ``path`` as UTF-8 and scan it. Read errors propagate."""
        with open(path, "r", encoding="utf-8", newline="") as f:
            text = f.read()
        return self.scan_text(text, path)

    def scan_text(self, text: str, path: Union[str, Path]) -> List[RawDetection]:
        return list(self.iter_detections(text, str(path)))

    def iter_detections(self, text: str, path: str) -> Iterator[RawDetection]:
        for line_no, line in enumerate(_LINE_BREAK.split(text), 1):
            for rule in self.rules:
                for match in rule.pattern.finditer(line):
                    yield RawDetection(
                        file=path,
                        line=line_no,
                        column=match.start() + 1,
                        feature_id=rule.feature_id,
                        snippet=line.strip()[:self.snippet_length],
                        detector=self.tag,
                    )
