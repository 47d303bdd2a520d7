"""
JSON export of statistics.

Exports are written atomically: the document is serialized first, written to
a temporary file beside the target and moved into place with ``os.replace``.
"""

from __future__ import annotations

import json
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

import structlog

from .analysis.models import StatisticsResult

logger = structlog.get_logger(__name__)


def build_export(
    stats: StatisticsResult,
    url: Optional[str] = None,
    title: Optional[str] = None,
    timestamp: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Build the export document ``{timestamp, url, title, statistics}``."""
    moment = timestamp or datetime.now(timezone.utc)
    return {
        "timestamp": moment.isoformat().replace("+00:00", "Z"),
        "url": url or "",
        "title": title or "",
        "statistics": stats.to_dict(),
    }


def default_export_name(timestamp: Optional[datetime] = None) -> str:
    moment = timestamp or datetime.now(timezone.utc)
    return f"word-count-{int(moment.timestamp() * 1000)}.json"


def write_export(target_path: Path, document: Dict[str, Any]) -> Path:
    """
    Atomically write an export document as JSON.

    Args:
        target_path: File to write; parent directories are created
        document: Export document from ``build_export``

    Returns:
        The path written

    Raises:
        OSError: If the file cannot be written
        ValueError: If the document cannot be serialized
    """
    target_path = Path(target_path)
    target_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        json_content = json.dumps(document, indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        logger.error("Failed to serialize export", error=str(e))
        raise ValueError(f"Cannot serialize export to JSON: {e}") from e

    temp_file_path: Optional[Path] = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=target_path.parent,
            prefix=f".{target_path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as temp_file:
            temp_file_path = Path(temp_file.name)
            temp_file.write(json_content)
            temp_file.flush()
            os.fsync(temp_file.fileno())

        os.replace(temp_file_path, target_path)
        logger.debug("Export written", target=str(target_path))
        return target_path
    finally:
        if temp_file_path is not None and temp_file_path.exists():
            temp_file_path.unlink(missing_ok=True)
