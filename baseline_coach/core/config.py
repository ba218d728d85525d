"""Configuration management for Baseline Coach."""

from pathlib import Path
from typing import List, Literal

from pydantic import BaseModel, Field, field_validator  # type: ignore

from ..models.detection import SNIPPET_LIMIT


class CoachConfig(BaseModel):
    """Configuration for a scan."""

    # Input
    path: str = Field(default=".", description="Root directory to scan")
    extensions: List[str] = Field(
        default_factory=lambda: ["js", "ts", "css", "html"],
        description="File extensions to include (without the leading dot)"
    )
    exclude_dirs: List[str] = Field(
        default_factory=lambda: ["node_modules"],
        description="Directory names skipped during the walk (dot-directories are always skipped)"
    )

    # Output
    output_format: Literal["console", "json", "markdown"] = Field(
        default="console", description="Report format"
    )
    fail_on: Literal["none", "limited", "newly"] = Field(
        default="none", description="Failure policy"
    )
    snippet_length: int = Field(default=SNIPPET_LIMIT, ge=0, description="Maximum snippet length")
    verbose: bool = Field(default=False, description="Enable verbose logging")

    # Performance
    max_workers: int = Field(default=1, ge=1, description="Worker threads for scanning files")

    @field_validator("extensions", mode="before")
    @classmethod
    def _split_extensions(cls, value):
        if isinstance(value, str):
            value = value.split(",")
        return value

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: List[str]) -> List[str]:
        normalized = [ext.strip().lstrip(".").lower() for ext in value]
        return [ext for ext in normalized if ext]

    @classmethod
    def from_file(cls, config_path: str) -> "CoachConfig":
        """Load configuration from file."""
        import json
        import yaml  # type: ignore

        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in [".yaml", ".yml"]:
                data = yaml.safe_load(f) or {}
            else:
                data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Configuration file must contain a mapping: {config_path}")

        return cls(**data)

    def save(self, config_path: str) -> None:
        """Save configuration to file."""
        import json
        import yaml  # type: ignore

        path = Path(config_path)
        data = self.model_dump()

        with open(path, "w", encoding="utf-8") as f:
            if path.suffix.lower() in [".yaml", ".yml"]:
                yaml.dump(data, f, default_flow_style=False, indent=2)
            else:
                json.dump(data, f, indent=2)

    def should_include_file(self, file_path: str) -> bool:
        """Check if a file name ends with one of the configured extensions."""
        lower = Path(file_path).name.lower()
        return any(lower.endswith("." + ext) for ext in self.extensions)
