# -*- coding: utf-8 -*-
"""
Intake Processor

Orchestrates the intake pipeline over a decompressed archive:

    1. Walk the tree (ArchiveWalker), fixing the folder traversal order
    2. Read, classify and extract every page, one folder per work unit
    3. Reconcile the extracted documents into consolidated records

Folders are independent, so extraction can run on a thread pool. Each folder's
documents land in the slot of its precomputed traversal index, which keeps the
output order independent of worker completion order.

Examples:
processor = IntakeProcessor("tmp/extracted", num_workers=4)
    result = processor.process()
    result.records[0].to_dict()

"""
# Standard library
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from threading import Lock
from typing import Any, Dict, List, Optional, Union

# Third-party
from tqdm import tqdm

# Local
from config.intake_config import INTAKE_CONFIG
from dv_intake.extraction.entrant_extractor import extract_entrant_fields
from dv_intake.extraction.markup import parse_html
from dv_intake.extraction.visa_extractor import extract_visa_fields
from dv_intake.ingestion.archive_walker import ArchiveWalker, FolderEntry
from dv_intake.ingestion.document_classifier import DocumentClassifier
from dv_intake.reconciliation.record_reconciler import RecordReconciler
from dv_intake.utils.dataclasses import DocumentKind, PersonRecord, RawDocument
from dv_intake.utils.errors import EmptyResultError
from dv_intake.utils.io import read_document
from dv_intake.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class IntakeResult:
    """Records in output order plus run statistics."""
    records: List[PersonRecord]
    stats: Dict[str, Any] = field(default_factory=dict)

    def to_dicts(self) -> List[Dict[str, str]]:
        return [record.to_dict() for record in self.records]


class IntakeProcessor:
    """
    Walk -> classify -> extract -> reconcile.

    Raises from process():
        ArchiveFormatError: root missing or not a directory
        EmptyResultError: no saved page anywhere under the root
    """

    def __init__(
        self,
        root: Union[str, Path],
        folder_key_policy: Optional[str] = None,
        num_workers: Optional[int] = None,
        reconciler: Optional[RecordReconciler] = None,
        classifier: Optional[DocumentClassifier] = None,
        walker: Optional[ArchiveWalker] = None,
        sentinel: Optional[str] = None,
        show_progress: bool = False,
    ):
        """
        Args:
            root: Root of the decompressed archive
            folder_key_policy: 'relative' or 'basename' (default: config)
            num_workers: Extraction threads; 1 runs sequentially
            reconciler: RecordReconciler (created from config if not provided)
            classifier: DocumentClassifier (created if not provided)
            walker: ArchiveWalker (created for root if not provided)
            sentinel: Value for absent fields (default: config)
            show_progress: Show a tqdm bar over folders
        """
        self.sentinel = sentinel if sentinel is not None else INTAKE_CONFIG['sentinel']
        self.walker = walker or ArchiveWalker(root, folder_key_policy=folder_key_policy)
        self.classifier = classifier or DocumentClassifier()
        self.reconciler = reconciler or RecordReconciler(sentinel=self.sentinel)
        self.num_workers = max(1, num_workers or INTAKE_CONFIG['num_workers'])
        self.show_progress = show_progress

        self.stats = self._empty_stats()
        self._stats_lock = Lock()

        logger.info(f"IntakeProcessor initialized: root={self.walker.root}, "
                    f"folder keys={self.walker.folder_key_policy}, workers={self.num_workers}")

    # ==================== PIPELINE ====================

    def process(self) -> IntakeResult:
        """Run the whole pipeline and return the records in traversal order."""
        logger.info("=" * 60)
        logger.info("STARTING INTAKE")
        logger.info("=" * 60)

        self.stats = self._empty_stats()
        folders = [f for f in self.walker.iter_folders() if f.documents or not f.has_subfolders]
        self.stats["folders"] = len(folders)

        total_documents = sum(len(f.documents) for f in folders)
        if total_documents == 0:
            logger.warning(f"No documents found under {self.walker.root}")
            raise EmptyResultError()

        logger.info(f"Extracting {total_documents} documents from {len(folders)} folders...")
        documents = self.extract_folders(folders)

        for document in documents:
            self.stats["by_kind"][document.kind.value] += 1

        records = self.reconciler.reconcile(
            documents, folder_order=[f.folder_key for f in folders]
        )
        if not records:
            logger.warning("Documents found but no record reconciled, emitting one blank record")
            records = [PersonRecord.blank(self.sentinel, self.sentinel)]

        self.stats["documents"] = len(documents)
        self.stats["records"] = len(records)

        logger.info("=" * 60)
        logger.info("INTAKE COMPLETE")
        logger.info(f"Folders: {self.stats['folders']}")
        logger.info(f"Documents: {self.stats['documents']} {self.stats['by_kind']}")
        logger.info(f"Unreadable: {len(self.stats['unreadable'])}")
        logger.info(f"Records: {self.stats['records']}")
        logger.info("=" * 60)

        return IntakeResult(records=records, stats=dict(self.stats))

    def extract_folders(self, folders: List[FolderEntry]) -> List[RawDocument]:
        """Extract every folder; result order follows the folders list."""
        slots: List[List[RawDocument]] = [[] for _ in folders]

        with tqdm(total=len(folders), desc="Extracting folders", unit="folder",
                  disable=not self.show_progress) as pbar:
            if self.num_workers == 1:
                for index, folder in enumerate(folders):
                    slots[index] = self.extract_folder(folder)
                    pbar.update(1)
            else:
                with ThreadPoolExecutor(max_workers=self.num_workers) as executor:
                    futures = {
                        executor.submit(self.extract_folder, folder): index
                        for index, folder in enumerate(folders)
                    }
                    for future in as_completed(futures):
                        slots[futures[future]] = future.result()
                        pbar.update(1)

        return [document for slot in slots for document in slot]

    def extract_folder(self, folder: FolderEntry) -> List[RawDocument]:
        return [self.extract_document(path, folder.folder_key) for path in folder.documents]

    def extract_document(self, path: Path, folder_key: str) -> RawDocument:
        """
        Read, classify and extract one page.

        An unreadable file is logged and yields an UNKNOWN document with no
        fields, so its folder can still be represented.
        """
        try:
            markup = read_document(path)
        except OSError as e:
            logger.error(f"Error reading {path}: {e}")
            with self._stats_lock:
                self.stats["unreadable"].append(str(path))
            return RawDocument(path=path, folder_key=folder_key, kind=DocumentKind.UNKNOWN)

        soup = parse_html(markup)
        kind = self.classifier.classify(soup, path.name)

        if kind is DocumentKind.VISA:
            fields = extract_visa_fields(soup, sentinel=self.sentinel)
        elif kind is DocumentKind.ENTRANT:
            fields = extract_entrant_fields(soup, sentinel=self.sentinel)
        else:
            fields = {}

        logger.debug(f"{kind.value}: {path.name} in {folder_key}")
        return RawDocument(path=path, folder_key=folder_key, kind=kind, fields=fields)

    # ==================== UTILITIES ====================

    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "folders": 0,
            "documents": 0,
            "by_kind": {kind.value: 0 for kind in DocumentKind},
            "unreadable": [],
            "records": 0,
        }
