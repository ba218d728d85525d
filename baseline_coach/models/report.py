"""Scan report data models."""

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field  # type: ignore

from .detection import Finding
from .feature import Classification


class Report(BaseModel):
    """Findings collected across every scanned file."""

    files_scanned: int = Field(0, ge=0, description="Number of files scanned")
    findings: List[Finding] = Field(default_factory=list, description="Findings in scan order")

    @property
    def total_findings(self) -> int:
        """Total number of findings."""
        return len(self.findings)

    @property
    def has_limited(self) -> bool:
        """Whether any finding is limited."""
        return any(f.classification is Classification.LIMITED for f in self.findings)

    @property
    def has_newly(self) -> bool:
        """Whether any finding is newly available."""
        return any(f.classification is Classification.NEWLY_AVAILABLE for f in self.findings)

    def count_by_classification(self) -> Dict[str, int]:
        """Count findings per classification, every classification present."""
        counts = {c.value: 0 for c in Classification}
        for finding in self.findings:
            counts[finding.classification.value] += 1
        return counts

    def get_findings_by_file(self) -> Dict[str, List[Finding]]:
        """Group findings by file, keeping scan order."""
        grouped: Dict[str, List[Finding]] = {}
        for finding in self.findings:
            grouped.setdefault(finding.file, []).append(finding)
        return grouped

    def to_dict(self) -> Dict[str, Any]:
        """Renderer shape: ``{filesScanned, findings: [...]}``."""
        return {
            "filesScanned": self.files_scanned,
            "findings": [f.to_dict() for f in self.findings],
        }

    def to_json(self) -> str:
        """Export report as JSON."""
        return json.dumps(self.to_dict(), indent=2)

    def display(self, console: Optional[Any] = None) -> None:
        """Pretty print the report using Rich."""
        from rich.console import Console  # type: ignore
        from rich.text import Text  # type: ignore

        console = console or Console()
        styles = {
            Classification.WIDELY_AVAILABLE: "green",
            Classification.NEWLY_AVAILABLE: "yellow",
            Classification.LIMITED: "red",
        }

        console.print(f"\n[bold]Baseline Coach[/bold]: scanned {self.files_scanned} files")

        for finding in self.findings:
            line = Text()
            line.append(f"• {finding.location}  ", style="cyan")
            line.append(f"{finding.feature_name} [{finding.feature_id}]  ")
            line.append(
                f"Baseline: {finding.classification.value} {finding.since_text}",
                style=styles[finding.classification],
            )
            console.print(line, soft_wrap=True)
            if finding.snippet:
                console.print(Text(f"  ↳ {finding.snippet}", style="dim"), soft_wrap=True)

        counts = self.count_by_classification()
        summary = Text()
        summary.append(f"\n{self.total_findings} findings: ")
        summary.append(f"{counts[Classification.WIDELY_AVAILABLE.value]} widely", style="green")
        summary.append(", ")
        summary.append(f"{counts[Classification.NEWLY_AVAILABLE.value]} newly", style="yellow")
        summary.append(", ")
        summary.append(f"{counts[Classification.LIMITED.value]} limited", style="red")
        console.print(summary)

    def to_markdown(self) -> str:
        """Export report as Markdown."""
        counts = self.count_by_classification()
        md = f"""# Baseline Coach Report

## Summary

- **Files Scanned**: {self.files_scanned}
- **Findings**: {self.total_findings}
- **Widely Available**: {counts[Classification.WIDELY_AVAILABLE.value]}
- **Newly Available**: {counts[Classification.NEWLY_AVAILABLE.value]}
- **Limited**: {counts[Classification.LIMITED.value]}

"""

        if self.findings:
            md += "## Findings\n\n"
            md += "| Location | Feature | Baseline | Since |\n"
            md += "|---|---|---|---|\n"
            for finding in self.findings:
                name = finding.feature_name.replace("|", "\\|")
                md += (
                    f"| `{finding.location}` | {name} (`{finding.feature_id}`) "
                    f"| {finding.classification.value} | {finding.since_text.strip('()')} |\n"
                )

        return md

    def save(self, filepath: str, format: str = "json") -> None:
        """Save report to file."""
        if format.lower() == "json":
            content = self.to_json()
        elif format.lower() == "markdown":
            content = self.to_markdown()
        else:
            raise ValueError(f"Unsupported format: {format}")

        with open(filepath, "w", encoding="utf-8") as f:
            f.write(content)
