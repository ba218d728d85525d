"""Scan a project tree for web platform feature usage."""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Union

from ..detectors import detector_for
from ..models.detection import Finding
from ..models.report import Report
from .aggregator import aggregate
from .config import CoachConfig
from .hydrator import hydrate
from .resolver import FeatureResolver

logger = logging.getLogger(__name__)


class BaselineScanner:
    """
    Walk a directory, detect feature usages and build a report.

    File read errors are fatal: they propagate out of :meth:`scan` and no
    partial report is produced.
    """

    def __init__(self, config: Optional[CoachConfig] = None,
                 resolver: Optional[FeatureResolver] = None):
        """
        Initialize the scanner.

        Args:
            config: Scan configuration; defaults apply when omitted
            resolver: Feature resolver; defaults to the shared catalog
        """
        self.config = config or CoachConfig()
        self.resolver = resolver or FeatureResolver()

    def list_files(self, root: Union[str, Path]) -> List[Path]:
        """
        Find files to scan under ``root``.

        Dot-directories, ``node_modules`` and ``config.exclude_dirs`` are
        skipped. Entries are visited in sorted order so the result is
        deterministic.

        Args:
            root: Directory to walk

        Returns:
            List of matching file paths
        """
        excluded = set(self.config.exclude_dirs)
        files: List[Path] = []

        def _raise(error: OSError) -> None:
            raise error

        for dirpath, dirs, names in os.walk(root, onerror=_raise):
            dirs[:] = sorted(
                d for d in dirs
                if d not in excluded and d != "node_modules" and not d.startswith(".")
            )
            for name in sorted(names):
                if self.config.should_include_file(name):
                    files.append(Path(dirpath) / name)

        return files

    def scan_file(self, path: Union[str, Path]) -> List[Finding]:
        """Detect and resolve feature usages in one file."""
        detector = detector_for(path, snippet_length=self.config.snippet_length)
        detections = detector.scan(path)
        logger.debug("%s: %d detections (%s)", path, len(detections), detector.tag)
        return hydrate(detections, self.resolver)

    def scan_files(self, files: List[Path]) -> Report:
        """Scan ``files`` in order and aggregate the findings."""
        if self.config.max_workers > 1 and len(files) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                per_file = list(executor.map(self.scan_file, files))
        else:
            per_file = [self.scan_file(f) for f in files]

        return aggregate(per_file, files_scanned=len(files))

    def scan(self, root: Optional[Union[str, Path]] = None) -> Report:
        """
        Scan every matching file under ``root`` (or ``config.path``).

        Returns:
            Report of all findings

        Raises:
            FileNotFoundError: If the root directory does not exist
            OSError: If a file cannot be read
        """
        root_path = Path(root if root is not None else self.config.path).resolve()
        if not root_path.is_dir():
            raise FileNotFoundError(f"Scan root is not a directory: {root_path}")

        files = self.list_files(root_path)
        logger.info("Scanning %d files under %s", len(files), root_path)

        report = self.scan_files(files)
        logger.info("Found %d feature usages", report.total_findings)
        return report
