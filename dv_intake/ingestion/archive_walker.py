# -*- coding: utf-8 -*-
"""
Archive

Walks a decompressed archive of browser-saved web pages (one applicant per
folder, arbitrarily nested) and enumerates the saved pages with the key of
the folder that contains them. Companion resource folders written by "save
webpage as" are never descended into.

Examples:
walker = ArchiveWalker("tmp/extracted", folder_key_policy="relative")
    for path, folder_key in walker:
        print(folder_key, path.name)
    # 05- SEPTEMBRE/DOUAGHRI IHAB  confirmation.html

"""
# Standard library
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple, Union

# Local
from config.intake_config import INTAKE_CONFIG
from dv_intake.utils.errors import ArchiveFormatError
from dv_intake.utils.logger import get_logger

logger = get_logger(__name__)

FOLDER_KEY_POLICIES = ('relative', 'basename')


@dataclass
class FolderEntry:
    """
    One visited folder.

    Attributes:
        path: Absolute folder path
        folder_key: Key under the walker's folder key policy
        documents: Saved pages directly inside the folder, sorted by name
        has_subfolders: Whether any non-resource subfolder was found
    """
    path: Path
    folder_key: str
    documents: List[Path] = field(default_factory=list)
    has_subfolders: bool = False


class ArchiveWalker:
    """
    Depth-first, restartable enumeration of saved pages under a root.

    Each iteration re-reads the tree. Within a folder, pages come before
    subfolders and both are visited in name order, so the discovery order
    is stable for a given tree.

    A folder that cannot be listed is logged and omitted with its whole
    subtree; siblings are still visited.
    """

    def __init__(
        self,
        root: Union[str, Path],
        folder_key_policy: Optional[str] = None,
        document_extensions: Optional[Sequence[str]] = None,
        resource_suffixes: Optional[Sequence[str]] = None,
    ):
        """
        Args:
            root: Root of the decompressed archive
            folder_key_policy: 'relative' (path under root, '.' for the root
                itself) or 'basename' (folder name only)
            document_extensions: Recognized page extensions (case-insensitive)
            resource_suffixes: Directory name suffixes to skip entirely
        """
        self.root = Path(root)
        self.folder_key_policy = folder_key_policy or INTAKE_CONFIG['folder_key_policy']
        if self.folder_key_policy not in FOLDER_KEY_POLICIES:
            raise ValueError(
                f"Unknown folder key policy {self.folder_key_policy!r}, "
                f"expected one of {FOLDER_KEY_POLICIES}"
            )

        extensions = document_extensions or INTAKE_CONFIG['document_extensions']
        self.document_extensions = tuple(ext.lower() for ext in extensions)
        self.resource_suffixes = tuple(resource_suffixes or INTAKE_CONFIG['resource_suffixes'])

    def __iter__(self) -> Iterator[Tuple[Path, str]]:
        for folder in self.iter_folders():
            for path in folder.documents:
                yield path, folder.folder_key

    def iter_folders(self) -> Iterator[FolderEntry]:
        """
        Yield every visited folder, depth-first, parents before children.

        Raises:
            ArchiveFormatError: Root is missing or not a directory
        """
        if not self.root.is_dir():
            raise ArchiveFormatError(f"Archive root is not a directory: {self.root}")

        yield from self._walk(self.root)

    def is_document(self, name: str) -> bool:
        return name.lower().endswith(self.document_extensions)

    def is_resource_folder(self, name: str) -> bool:
        return name.endswith(self.resource_suffixes)

    def folder_key(self, folder: Path) -> str:
        if self.folder_key_policy == 'basename':
            return folder.name
        return folder.relative_to(self.root).as_posix()

    def _walk(self, folder: Path) -> Iterator[FolderEntry]:
        try:
            with os.scandir(folder) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            logger.error(f"Skipping unreadable folder {folder}: {e}")
            return

        entry = FolderEntry(path=folder, folder_key=self.folder_key(folder))
        subfolders = []

        for item in entries:
            try:
                if item.is_dir(follow_symlinks=False):
                    if self.is_resource_folder(item.name):
                        logger.debug(f"Skipping resource folder {item.path}")
                        continue
                    subfolders.append(Path(item.path))
                elif item.is_file() and self.is_document(item.name):
                    entry.documents.append(Path(item.path))
            except OSError as e:
                logger.error(f"Skipping unreadable entry {item.path}: {e}")

        entry.has_subfolders = bool(subfolders)
        logger.debug(f"Folder {entry.folder_key}: {len(entry.documents)} documents, "
                     f"{len(subfolders)} subfolders")
        yield entry

        for subfolder in subfolders:
            yield from self._walk(subfolder)
