# -*- coding: utf-8 -*-
"""
Export helpers

Shapes consolidated records for the export boundary: the artifact name built
from the caller's date and category, a pandas DataFrame with human column
headers for row-based consumers, and JSON/CSV writers.

Examples:
export_filename("2024-09-05T00:00:00.000Z", "celibataire")
    # '2024-09-05_celibataire.xlsx'
    df = records_to_frame(result.records)

"""
# Standard library
from pathlib import Path
from typing import Any, Iterable, Union

# Third-party
import pandas as pd

# Local
from dv_intake.utils.dataclasses import RECORD_KEYS, PersonRecord
from dv_intake.utils.io import save_json
from dv_intake.utils.logger import get_logger

logger = get_logger(__name__)

# Serialized key -> column header, in downstream order
COLUMN_HEADERS = {
    "entrantName": "Entrant Name",
    "confirmationNumber": "Confirmation Number",
    "yearOfBirth": "Year of Birth",
    "firstName": "First Name",
    "gender": "Gender",
    "country": "Country",
    "phoneNumber": "Phone Number",
    "email": "Email",
    "maritalStatus": "Marital Status",
    "numberOfChildren": "Number of Children",
    "folder": "Folder",
}


def export_filename(date: Any, category: str, extension: str = "xlsx") -> str:
    """
    Name of the export artifact: '<YYYY-MM-DD>_<category>.<extension>'.

    Args:
        date: Anything pandas can read as a timestamp (ISO strings included)
        category: Caller-supplied label, used verbatim

    Raises:
        ValueError: Missing category or unparseable date
    """
    if not category or not str(category).strip():
        raise ValueError("Export category is required")
    if date is None or (isinstance(date, str) and not date.strip()):
        raise ValueError("Export date is required")

    try:
        formatted = pd.Timestamp(date).strftime("%Y-%m-%d")
    except (ValueError, TypeError) as e:
        raise ValueError(f"Unreadable export date {date!r}: {e}") from e

    return f"{formatted}_{str(category).strip()}.{extension}"


def records_to_frame(records: Iterable[PersonRecord]) -> pd.DataFrame:
    """One row per record, columns in downstream order with human headers."""
    rows = [record.to_dict() for record in records]
    df = pd.DataFrame(rows, columns=list(RECORD_KEYS.values()))
    return df.rename(columns=COLUMN_HEADERS)


def save_records_json(records: Iterable[PersonRecord], path: Union[str, Path]) -> str:
    return save_json([record.to_dict() for record in records], path)


def save_records_csv(records: Iterable[PersonRecord], path: Union[str, Path]) -> str:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df = records_to_frame(records)
    df.to_csv(path, index=False, encoding='utf-8')
    logger.info(f"Saved {len(df)} records to {path}")
    return str(path)
