"""Configuration management for Recipe Converter.

Loads environment variables from system environment and .env file.
Priority order: system environment > .env file > hardcoded defaults
"""

import os

from dotenv import load_dotenv


# Load .env file (if exists, silently continues if missing)
load_dotenv()

PRESET_SERVINGS: tuple[int, ...] = (1, 2, 4, 6, 8, 12)


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Recipe generation service base URL (all three endpoints live under /api)
        self.RECIPE_API_BASE_URL: str = os.getenv("RECIPE_API_BASE_URL", "http://localhost:5000")
        # Total timeout (seconds) for a single generation call. Generation is slow, default: 60
        self.REQUEST_TIMEOUT_S: float = float(os.getenv("REQUEST_TIMEOUT_S", "60"))
        # How long the "copied" acknowledgement stays on after copying a result. Default: 2000 ms
        self.COPY_ACK_MS: int = int(os.getenv("COPY_ACK_MS", "2000"))
        # Maximum image size (in MB) accepted by the upload pipeline. Default: 10 MB
        self.MAX_IMAGE_SIZE_MB: int = int(os.getenv("MAX_IMAGE_SIZE_MB", "10"))
        # Servings committed on startup, must be one of the presets
        self.DEFAULT_SERVINGS: int = int(os.getenv("DEFAULT_SERVINGS", "1"))
        # Stale result handling: when true, a response that completes after a newer
        # dispatch (any modality) still settles its own slot but does not replace
        # the displayed result. Default false keeps last-write-wins.
        self.DISCARD_STALE_RESULTS: bool = os.getenv("DISCARD_STALE_RESULTS", "false").lower() in ("true", "1", "yes")

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If any value is out of range or malformed.
        """
        if not self.RECIPE_API_BASE_URL.startswith(("http://", "https://")):
            raise ValueError(
                f"RECIPE_API_BASE_URL must be an http(s) URL, got: {self.RECIPE_API_BASE_URL}"
            )
        if self.REQUEST_TIMEOUT_S <= 0:
            raise ValueError(
                f"REQUEST_TIMEOUT_S must be positive, got: {self.REQUEST_TIMEOUT_S}"
            )
        if self.COPY_ACK_MS <= 0:
            raise ValueError(
                f"COPY_ACK_MS must be positive, got: {self.COPY_ACK_MS}"
            )
        if self.MAX_IMAGE_SIZE_MB < 1:
            raise ValueError(
                f"MAX_IMAGE_SIZE_MB must be at least 1, got: {self.MAX_IMAGE_SIZE_MB}"
            )
        if self.DEFAULT_SERVINGS not in PRESET_SERVINGS:
            raise ValueError(
                f"DEFAULT_SERVINGS must be one of {PRESET_SERVINGS}, got: {self.DEFAULT_SERVINGS}"
            )


# Create module-level config instance and validate immediately
config = Config()
config.validate()
