"""Paths, defaults, and environment detection."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _xdg_config_home() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


ENV_FILE_TEMPLATE = """\
# WhatsApp Chat Extractor settings
# This file is read by wce on every run. Values already set in the
# environment take precedence.

# Directory for exported JSON/CSV files (default: current directory)
# WCE_EXPORT_DIR=~/Downloads

# Text encoding of chat exports
# WCE_ENCODING=utf-8-sig

# Search backend: substring (default), bm25
# WCE_SEARCH_BACKEND=substring

# Group name added to JSON exports and summaries
# WCE_GROUP_NAME=Zero to One
"""

JSON_EXPORT_NAME = "whatsapp_chat_export.json"
CSV_EXPORT_NAME = "whatsapp_chat_export.csv"


@dataclass
class Config:
    """Runtime configuration — resolved from env vars and defaults."""

    env_file: Path = field(default_factory=lambda: _xdg_config_home() / "whatsapp-extractor" / "env")

    export_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("WCE_EXPORT_DIR", ".")).expanduser()
    )
    encoding: str = field(default_factory=lambda: os.environ.get("WCE_ENCODING", "utf-8-sig"))

    search_backend: str = field(
        default_factory=lambda: os.environ.get("WCE_SEARCH_BACKEND", "substring")
    )  # "substring" | "bm25"

    group_name: str | None = field(default_factory=lambda: os.environ.get("WCE_GROUP_NAME") or None)
    json_indent: int = 2

    @property
    def json_export_path(self) -> Path:
        return self.export_dir / JSON_EXPORT_NAME

    @property
    def csv_export_path(self) -> Path:
        return self.export_dir / CSV_EXPORT_NAME

    def export_path(self, fmt: str) -> Path:
        if fmt == "json":
            return self.json_export_path
        if fmt == "csv":
            return self.csv_export_path
        raise ValueError(f"Unknown export format: {fmt!r}. Use 'json' or 'csv'.")

    def load_env_file(self) -> None:
        """Load settings from the env file into os.environ (if not already set)."""
        if not self.env_file.exists():
            return
        for line in self.env_file.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, _, value = line.partition("=")
            key = key.strip()
            value = value.strip().strip("'\"")
            # Don't overwrite keys already in the environment
            if key and key not in os.environ:
                os.environ[key] = value

    def ensure_env_file(self) -> bool:
        """Create the env file from template if it doesn't exist. Returns True if created."""
        if self.env_file.exists():
            return False
        self.env_file.parent.mkdir(parents=True, exist_ok=True)
        self.env_file.write_text(ENV_FILE_TEMPLATE)
        self.env_file.chmod(0o600)
        return True
