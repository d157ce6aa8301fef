"""Configuration management for lines-match."""

from pathlib import Path
import json

from pydantic import BaseModel, Field


class MatchingConfig(BaseModel):
    """Configuration for line matching."""

    strict: bool = Field(
        default=False, description="Fail on the first unmatched non-directive expected line"
    )
    strip_trailing_whitespace: bool = Field(
        default=False, description="Right-strip actual lines before matching"
    )
    encoding: str = Field(default="utf-8", description="Encoding used to read input files")


class OutputConfig(BaseModel):
    """Configuration for command output."""

    verbose: bool = Field(default=False, description="Enable verbose logging")
    show_lines: bool = Field(default=False, description="Print both line sequences on failure")


class Config(BaseModel):
    """Main configuration for lines-match."""

    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def load_from_file(cls, config_path: Path) -> "Config":
        """Load configuration from a JSON file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            data = json.load(f)

        return cls(**data)

    @classmethod
    def get_default(cls) -> "Config":
        """Get default configuration."""
        return cls()


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file or return default.

    Args:
        config_path: Path to configuration file. If None, default locations are searched.

    Returns:
        Config object
    """
    if config_path is None:
        default_locations = [
            Path.home() / ".config" / "lines-match" / "config.json",
            Path.cwd() / "lines-match.json",
        ]

        for location in default_locations:
            if location.exists():
                return Config.load_from_file(location)

        return Config.get_default()

    return Config.load_from_file(config_path)
