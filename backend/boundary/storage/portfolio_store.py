"""
JSON document store for the portfolio record.

Reads the single portfolio document from disk and replaces it wholesale,
keeping a timestamped backup of the previous version. The RAG pipeline
only reads through `load`; uploads go through `replace`.

Dependencies: json, pathlib, backend.core.exceptions
System role: Durable storage for the portfolio document
"""

import json
import logging
import os
import shutil
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from backend.core.exceptions import (
    InvalidPortfolioError,
    PortfolioNotFoundError,
    PortfolioStoreError,
)

logger = logging.getLogger(__name__)


def parse_portfolio(raw: str | bytes) -> dict[str, Any]:
    """
    Parse an uploaded payload into a portfolio document.

    Args:
        raw: JSON text or UTF-8 bytes

    Returns:
        dict: Parsed document

    Raises:
        InvalidPortfolioError: Payload is not a JSON object
    """
    try:
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        document = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidPortfolioError("Invalid JSON format", details={"reason": str(e)}) from e

    if not isinstance(document, dict):
        raise InvalidPortfolioError("Invalid JSON format", details={"reason": "top level must be an object"})
    return document


def validate_portfolio(document: Any) -> None:
    """
    Enforce the minimal portfolio structure: a profile with a non-empty name.

    Raises:
        InvalidPortfolioError: Structure check failed
    """
    profile = document.get("profile") if isinstance(document, dict) else None
    name = profile.get("name") if isinstance(profile, dict) else None
    if not isinstance(name, str) or not name.strip():
        raise InvalidPortfolioError("Invalid portfolio structure: missing profile.name")


class PortfolioStore:
    """Filesystem-backed store for the single portfolio document."""

    def __init__(self, path: Path) -> None:
        """
        Initialize store.

        Args:
            path: Location of portfolio.json
        """
        self._path = Path(path)
        self._write_lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        """
        Read and parse the current document.

        Returns:
            dict: Portfolio document

        Raises:
            PortfolioNotFoundError: File missing
            InvalidPortfolioError: File is not a JSON object
            PortfolioStoreError: Any other read failure
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise PortfolioNotFoundError(str(self._path)) from e
        except OSError as e:
            raise PortfolioStoreError(f"Failed to read portfolio: {e}", str(self._path)) from e

        return parse_portfolio(raw)

    def replace(self, document: dict[str, Any]) -> Path | None:
        """
        Validate and persist a new document, backing up the previous one.

        Args:
            document: New portfolio document

        Returns:
            Path | None: Backup file path, None when no previous document existed

        Raises:
            InvalidPortfolioError: Document failed validation
            PortfolioStoreError: Backup or write failed
        """
        validate_portfolio(document)
        payload = json.dumps(document, indent=2, ensure_ascii=False)

        with self._write_lock:
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                backup_path = self._backup()

                tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
                tmp_path.write_text(payload, encoding="utf-8")
                os.replace(tmp_path, self._path)
            except OSError as e:
                raise PortfolioStoreError(f"Failed to write portfolio: {e}", str(self._path)) from e

        logger.info(
            f"{__name__}:replace - Portfolio replaced at {self._path} "
            f"(backup={backup_path.name if backup_path else None})"
        )
        return backup_path

    def _backup(self) -> Path | None:
        """Copy the current document to portfolio.backup-<timestamp>.json."""
        if not self._path.exists():
            return None

        timestamp = (
            datetime.now(timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z")
            .replace(":", "-")
            .replace(".", "-")
        )
        backup_path = self._path.with_name(f"{self._path.stem}.backup-{timestamp}.json")
        shutil.copyfile(self._path, backup_path)
        return backup_path
