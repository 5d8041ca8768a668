# -*- coding: utf-8 -*-
"""
Core data structures for the intake pipeline

Single source of truth for the document kinds, extracted documents and the
consolidated applicant record. Import from this module rather than redefining
field names elsewhere.

Examples:
    from dv_intake.utils.dataclasses import DocumentKind, RawDocument, PersonRecord

    record = PersonRecord.blank(folder="Applicant1")
    record = record.overlay({"entrant_name": "Jane Doe"})
    record.to_dict()
    # {'entrantName': 'Jane Doe', 'confirmationNumber': 'Missing', ...}

"""
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from pathlib import Path
from typing import Dict, List, Mapping

DEFAULT_SENTINEL = "Missing"


# ============================================================================
# ENUMS
# ============================================================================

class DocumentKind(Enum):
    """Document kinds, assigned once by the classifier."""
    ENTRANT = "entrant"    # Entry confirmation page
    VISA = "visa"          # Electronic Diversity Visa application page
    UNKNOWN = "unknown"    # Unreadable or empty


# ============================================================================
# FIELD NAMES
# ============================================================================

ENTRANT_FIELDS = ["entrant_name", "confirmation_number", "year_of_birth"]

VISA_FIELDS = [
    "first_name",
    "gender",
    "country",
    "phone_number",
    "email",
    "marital_status",
    "number_of_children",
]

# Downstream export order, attribute name -> serialized key
RECORD_KEYS = {
    "entrant_name": "entrantName",
    "confirmation_number": "confirmationNumber",
    "year_of_birth": "yearOfBirth",
    "first_name": "firstName",
    "gender": "gender",
    "country": "country",
    "phone_number": "phoneNumber",
    "email": "email",
    "marital_status": "maritalStatus",
    "number_of_children": "numberOfChildren",
    "folder": "folder",
}


# ============================================================================
# EXTRACTED DOCUMENTS
# ============================================================================

@dataclass(frozen=True)
class RawDocument:
    """
    One classified and extracted document.

    Attributes:
        path: File the document was read from
        folder_key: Key of the immediate containing folder
        kind: Classification result, never re-derived from fields
        fields: Extracted field name -> value (sentinel when absent)
    """
    path: Path
    folder_key: str
    kind: DocumentKind
    fields: Mapping[str, str] = field(default_factory=dict)

    def get(self, name: str, default: str = DEFAULT_SENTINEL) -> str:
        return self.fields.get(name, default)


# ============================================================================
# CONSOLIDATED RECORD
# ============================================================================

@dataclass(frozen=True)
class PersonRecord:
    """
    Consolidated applicant record.

    Every field is a string: either an extracted value or the sentinel.
    """
    entrant_name: str = DEFAULT_SENTINEL
    confirmation_number: str = DEFAULT_SENTINEL
    year_of_birth: str = DEFAULT_SENTINEL
    first_name: str = DEFAULT_SENTINEL
    gender: str = DEFAULT_SENTINEL
    country: str = DEFAULT_SENTINEL
    phone_number: str = DEFAULT_SENTINEL
    email: str = DEFAULT_SENTINEL
    marital_status: str = DEFAULT_SENTINEL
    number_of_children: str = DEFAULT_SENTINEL
    folder: str = DEFAULT_SENTINEL

    @classmethod
    def blank(cls, folder: str, sentinel: str = DEFAULT_SENTINEL) -> "PersonRecord":
        """All-sentinel template carrying only the folder key."""
        values = {f.name: sentinel for f in fields(cls)}
        values["folder"] = folder
        return cls(**values)

    def overlay(self, values: Mapping[str, str]) -> "PersonRecord":
        """Return a copy with known fields replaced; unknown keys are ignored."""
        known = {k: str(v) for k, v in values.items() if k in RECORD_KEYS}
        return replace(self, **known)

    def is_blank(self, names: List[str], sentinel: str = DEFAULT_SENTINEL) -> bool:
        return all(getattr(self, name) == sentinel for name in names)

    def to_dict(self) -> Dict[str, str]:
        """Flat mapping in downstream field order, camelCase keys."""
        return {key: getattr(self, attr) for attr, key in RECORD_KEYS.items()}
