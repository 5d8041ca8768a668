# -*- coding: utf-8 -*-
"""
I/O utilities for intake artifacts

Helpers for reading saved web pages and writing JSON with consistent
encoding and logging.

Examples:
    from dv_intake.utils.io import read_document, save_json
    html = read_document("archive/Applicant1/confirmation.html")
    save_json([r.to_dict() for r in records], "data/output/records.json")

"""
import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Union

logger = logging.getLogger(__name__)


# ============================================================================
# DOCUMENTS
# ============================================================================

def read_document(path: Union[str, Path]) -> str:
    """
    Read a saved web page as text.

    Browser "save as" output is UTF-8 in practice; undecodable bytes are
    replaced rather than failing the whole document.

    Raises:
        OSError: File cannot be opened or read
    """
    path = Path(path)
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        return f.read()


# ============================================================================
# JSON
# ============================================================================

def save_json(
    data: Any,
    path: Union[str, Path],
    indent: int = 2,
) -> str:
    """
    Save data to JSON file.

    Args:
        data: Data to save (must be JSON-serializable)
        path: Output path
        indent: Indentation level (default 2)

    Returns:
        Path string
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=indent, ensure_ascii=False, default=_serialize)

    logger.info(f"Saved {path} ({_size_str(path)})")
    return str(path)


# ============================================================================
# HELPERS
# ============================================================================

def _serialize(obj: Any) -> Any:
    """Convert non-JSON-serializable objects."""
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Path):
        return str(obj)
    if hasattr(obj, 'to_dict'):
        return obj.to_dict()
    return str(obj)


def _size_str(path: Path) -> str:
    """Human-readable file size."""
    size = path.stat().st_size
    for unit in ['B', 'KB', 'MB', 'GB']:
        if size < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} TB"
