"""Configuration management for the Unicode lookup application."""

import os
import unicodedata
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from the working directory, if there is one
load_dotenv()

DEFAULT_UCD_URL = "https://www.unicode.org/Public/{version}/ucd"
DEFAULT_EMOJI_URL = "https://www.unicode.org/Public/emoji/{emoji_version}"


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Application configuration."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Unicode version of the codepoint table; data files must match it
        self.unicode_version = unicodedata.unidata_version
        self.emoji_version = ".".join(self.unicode_version.split(".")[:2])

        # Data files (Blocks.txt, emoji-test.txt)
        self.data_directory = Path(
            os.getenv(
                "UNILOOKUP_DATA_DIR",
                str(Path.home() / ".cache" / "unilookup" / self.unicode_version),
            )
        ).expanduser()

        # Download settings
        self.offline = _env_flag("UNILOOKUP_OFFLINE")
        self.ucd_url = os.getenv("UNILOOKUP_UCD_URL", DEFAULT_UCD_URL).format(
            version=self.unicode_version
        )
        self.emoji_url = os.getenv("UNILOOKUP_EMOJI_URL", DEFAULT_EMOJI_URL).format(
            emoji_version=self.emoji_version
        )
        self.request_timeout = float(os.getenv("UNILOOKUP_REQUEST_TIMEOUT", "30"))

    @property
    def blocks_url(self) -> str:
        """Get the download URL for Blocks.txt."""
        return f"{self.ucd_url.rstrip('/')}/Blocks.txt"

    @property
    def emoji_test_url(self) -> str:
        """Get the download URL for emoji-test.txt."""
        return f"{self.emoji_url.rstrip('/')}/emoji-test.txt"


def get_config() -> Config:
    """Get application configuration."""
    return Config()
