"""
Runtime configuration, read from the environment and an optional .env file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_DATA_PATH = PROJECT_ROOT / "data" / "renewable-electricity.xml"
DEFAULT_SETTINGS_PATH = PROJECT_ROOT / "data" / "settings.xml"


@dataclass
class Config:
    data_path: Path
    settings_path: Path

    @classmethod
    def from_env(cls) -> Config:
        """
        Build a Config from RENEWSTATS_* environment variables.

        Values in a .env file are loaded first; variables already set in the
        environment take precedence.
        """
        load_dotenv()
        return cls(
            data_path=Path(os.getenv("RENEWSTATS_DATA_PATH", DEFAULT_DATA_PATH)),
            settings_path=Path(os.getenv("RENEWSTATS_SETTINGS_PATH", DEFAULT_SETTINGS_PATH)),
        )
