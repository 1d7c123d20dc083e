"""Centralized config loading: read once at import time."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

# Load .env from project root (parent of hydrator/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

CONFIG_PATH = Path(__file__).resolve().parent / "config.yaml"

_config = yaml.safe_load(CONFIG_PATH.read_text())

# Environment overrides (set in .env or the shell)
if os.environ.get("HYDRATOR_CONTENT_SOURCE"):
    _config["content_source"] = os.environ["HYDRATOR_CONTENT_SOURCE"]
if os.environ.get("HYDRATOR_POLL_INTERVAL_MS"):
    _config["poll_interval_ms"] = int(os.environ["HYDRATOR_POLL_INTERVAL_MS"])


def get_config() -> dict:
    """Return the loaded config dictionary."""
    return _config
