"""Shared constants."""

from __future__ import annotations

from typing import Final

EXPECTED_FORMAT: Final[str] = "Expected an argument on the format: key=value"

# Environment
API_TOKEN_ENV: Final[str] = "API_TOKEN"
LOG_LEVEL_ENV: Final[str] = "NODE_DISCOVER_LOG_LEVEL"

# AWS
DEFAULT_AWS_REGION: Final[str] = "us-east-1"
RUNNING_STATE: Final[str] = "running"

# DigitalOcean
DIGITALOCEAN_API_BASE: Final[str] = "https://api.digitalocean.com/v2"
DROPLETS_PER_PAGE: Final[int] = 200
