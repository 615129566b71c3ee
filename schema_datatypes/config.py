"""
Configuration for loading and reporting data type graphs.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path


@dataclass
class DataTypeConfig:
    """Configuration options for the type graph report."""

    # Logging level for structlog (DEBUG/INFO/WARNING/ERROR)
    log_level: str = "WARNING"

    # Render logs as JSON instead of console text
    json_logs: bool = False

    # Treat types that could not be resolved as a fatal error
    fail_on_unresolved: bool = False

    # Include import sets in the report
    show_imports: bool = True

    # Include summary/description in the report
    show_documentation: bool = True

    @staticmethod
    def from_dict(d: dict) -> DataTypeConfig:
        """Create a config from a dictionary, ignoring unknown keys."""
        config = DataTypeConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    @staticmethod
    def from_file(path: str | Path) -> DataTypeConfig:
        """Load a config from a JSON file."""
        with open(path, encoding="utf-8") as f:
            return DataTypeConfig.from_dict(json.load(f))

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return asdict(self)
