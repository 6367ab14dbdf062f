"""Configuration management for methodmatch."""

from pathlib import Path
from typing import Literal
import json

from pydantic import BaseModel, Field

from methodmatch.analysis.match_types import EXACT, FuzzyMode, MatchMode
from methodmatch.analysis.matching_constants import MatchingDefaults


class MatcherConfig(BaseModel):
    """Configuration for the matching engine."""

    mode: Literal["exact", "fuzzy"] = Field(
        default=MatchingDefaults.MODE, description="Comparison mode"
    )
    threshold: float = Field(
        default=MatchingDefaults.FUZZY_THRESHOLD,
        ge=0.0,
        le=1.0,
        description="Minimum coverage for fuzzy matches",
    )

    def to_mode(self) -> MatchMode:
        """Build the match mode described by this configuration."""
        if self.mode == "fuzzy":
            return FuzzyMode(self.threshold)
        return EXACT


class Config(BaseModel):
    """Main configuration for methodmatch."""

    matcher: MatcherConfig = Field(default_factory=MatcherConfig)
    verbose: bool = Field(default=False, description="Enable verbose logging")

    @classmethod
    def load_from_file(cls, config_path: Path) -> "Config":
        """Load configuration from a JSON file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            data = json.load(f)

        return cls(**data)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a JSON file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            json.dump(self.model_dump(), f, indent=2, default=str)

    @classmethod
    def get_default(cls) -> "Config":
        """Get default configuration."""
        return cls()


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file or return default.

    Args:
        config_path: Path to configuration file. If None, default locations are tried.

    Returns:
        Config object
    """
    if config_path is None:
        default_locations = [
            Path.home() / ".config" / "methodmatch" / "config.json",
            Path.cwd() / "methodmatch.json",
        ]

        for location in default_locations:
            if location.exists():
                return Config.load_from_file(location)

        return Config.get_default()

    return Config.load_from_file(config_path)
