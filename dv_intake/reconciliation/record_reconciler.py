# -*- coding: utf-8 -*-
"""
Record

Merges the extracted confirmation and application pages of each folder into
one consolidated record per applicant.

Pipeline per folder:
    1. Split documents by their classified kind (never by field contents)
    2. Match each entrant to the first application, in discovery order, whose
       first name is a case-insensitive substring of the entrant name
    3. Merge onto an all-sentinel template: entrant fields, then visa fields
    4. Emit records for applications no entrant in the folder claims

Examples:
reconciler = RecordReconciler()
        records = reconciler.reconcile(documents)
        [r.to_dict() for r in records]

"""
# Standard library
from typing import Dict, Iterable, List, Optional, Sequence

# Local
from config.intake_config import INTAKE_CONFIG, RECONCILE_CONFIG
from dv_intake.utils.dataclasses import (
    ENTRANT_FIELDS,
    VISA_FIELDS,
    DocumentKind,
    PersonRecord,
    RawDocument,
)
from dv_intake.utils.logger import get_logger

logger = get_logger(__name__)


def _setting(value: Optional[bool], name: str) -> bool:
    return RECONCILE_CONFIG[name] if value is None else value


class RecordReconciler:
    """
    Groups documents by folder and merges entrant/visa pairs.

    Policy switches (default from RECONCILE_CONFIG):
        drop_blank_entrants: an entrant whose three fields are all sentinel
            yields a blank record, no visa overlay
        keep_last_per_folder: only the last record of each folder is kept
        emit_unmatched_visas: an application no entrant claims gets its own
            record (entrant fields left sentinel)
        never_drop_folders: a folder that produced no record still yields one
            all-sentinel record carrying its key
    """

    def __init__(
        self,
        sentinel: Optional[str] = None,
        drop_blank_entrants: Optional[bool] = None,
        keep_last_per_folder: Optional[bool] = None,
        emit_unmatched_visas: Optional[bool] = None,
        never_drop_folders: Optional[bool] = None,
    ):
        self.sentinel = sentinel if sentinel is not None else INTAKE_CONFIG['sentinel']
        self.drop_blank_entrants = _setting(drop_blank_entrants, 'drop_blank_entrants')
        self.keep_last_per_folder = _setting(keep_last_per_folder, 'keep_last_per_folder')
        self.emit_unmatched_visas = _setting(emit_unmatched_visas, 'emit_unmatched_visas')
        self.never_drop_folders = _setting(never_drop_folders, 'never_drop_folders')

    # ==================== PUBLIC API ====================

    def reconcile(
        self,
        documents: Iterable[RawDocument],
        folder_order: Optional[Sequence[str]] = None,
    ) -> List[PersonRecord]:
        """
        Build the consolidated records.

        Args:
            documents: Extracted documents in discovery order
            folder_order: Folder keys in traversal order. Folders listed here
                but without documents are represented only under
                never_drop_folders. Defaults to first-seen document order.

        Returns:
            Records ordered by folder, then by document discovery order.
            Empty when there is nothing to reconcile.
        """
        groups = self.group(documents)

        order = list(dict.fromkeys(folder_order or []))
        listed = set(order)
        order.extend(key for key in groups if key not in listed)

        records = []
        for folder_key in order:
            folder_records = self.reconcile_folder(folder_key, groups.get(folder_key, []))

            if not folder_records and self.never_drop_folders:
                logger.debug(f"Folder {folder_key} produced no record, emitting blank")
                folder_records = [PersonRecord.blank(folder_key, self.sentinel)]

            if self.keep_last_per_folder:
                folder_records = folder_records[-1:]

            records.extend(folder_records)

        logger.info(f"Reconciled {len(records)} records from {len(groups)} folders")
        return records

    def group(self, documents: Iterable[RawDocument]) -> Dict[str, List[RawDocument]]:
        """Partition documents by folder key, preserving first-seen order."""
        groups: Dict[str, List[RawDocument]] = {}
        for document in documents:
            groups.setdefault(document.folder_key, []).append(document)
        return groups

    def reconcile_folder(self, folder_key: str, documents: List[RawDocument]) -> List[PersonRecord]:
        """Records for one folder: one per entrant, then unclaimed applications."""
        entrants = [d for d in documents if d.kind is DocumentKind.ENTRANT]
        visas = [d for d in documents if d.kind is DocumentKind.VISA]

        records = []
        for entrant in entrants:
            visa = self.match(entrant, visas)
            records.append(self.merge(folder_key, entrant, visa))

        if self.emit_unmatched_visas:
            emitted_names = set()
            for visa in visas:
                if any(self.names_match(entrant, visa) for entrant in entrants):
                    continue
                name = visa.get('first_name', self.sentinel).casefold()
                if name != self.sentinel.casefold() and name in emitted_names:
                    continue
                emitted_names.add(name)
                records.append(self.merge(folder_key, None, visa))

        return records

    # ==================== MATCHING ====================

    def names_match(self, entrant: RawDocument, visa: RawDocument) -> bool:
        """Visa first name is a non-empty, case-insensitive substring of the entrant name."""
        first_name = visa.get('first_name', self.sentinel).strip()
        entrant_name = entrant.get('entrant_name', self.sentinel)
        if not first_name or first_name == self.sentinel or entrant_name == self.sentinel:
            return False
        return first_name.casefold() in entrant_name.casefold()

    def match(self, entrant: RawDocument, visas: List[RawDocument]) -> Optional[RawDocument]:
        """First matching application in discovery order, or None."""
        return next((visa for visa in visas if self.names_match(entrant, visa)), None)

    # ==================== MERGING ====================

    def merge(
        self,
        folder_key: str,
        entrant: Optional[RawDocument],
        visa: Optional[RawDocument],
    ) -> PersonRecord:
        """Overlay entrant then visa fields on a blank record for the folder."""
        record = PersonRecord.blank(folder_key, self.sentinel)

        if entrant is not None:
            entrant_values = {name: entrant.get(name, self.sentinel) for name in ENTRANT_FIELDS}
            record = record.overlay(entrant_values)
            if self.drop_blank_entrants and record.is_blank(ENTRANT_FIELDS, self.sentinel):
                logger.debug(f"Blank entrant in {folder_key} ({entrant.path.name}), dropping fields")
                return PersonRecord.blank(folder_key, self.sentinel)

        if visa is not None:
            record = record.overlay({name: visa.get(name, self.sentinel) for name in VISA_FIELDS})

        return record
