# -*- coding: utf-8 -*-
"""
Intake errors

Only archive-level problems and "nothing extracted" conditions are raised to
the caller. Per-document and per-folder failures are contained where they
happen and never reach this hierarchy.

"""


class IntakeError(Exception):
    """Base class for errors surfaced to the intake caller."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ArchiveFormatError(IntakeError):
    """Root is missing or is not a directory tree."""


class EmptyResultError(IntakeError):
    """Walk completed but no document was found. Nothing to export."""

    def __init__(self, message: str = "No data found in the folder"):
        super().__init__(message)
