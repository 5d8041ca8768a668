# -*- coding: utf-8 -*-
"""
Document

Labels each saved page as an entry confirmation or a visa application. The
visa application template always carries a fixed marker phrase in its title
(and usually in the saved file name); anything else with text is treated as a
confirmation page. Empty pages are UNKNOWN so they degrade to sentinel output.

Examples:
classifier = DocumentClassifier()
    classifier.classify(html, "Electronic Diversity Visa Program.html")
    # DocumentKind.VISA

"""
# Standard library
from typing import Optional

# Local
from config.intake_config import INTAKE_CONFIG
from dv_intake.extraction.markup import Markup, page_text, parse_html, title_text
from dv_intake.utils.dataclasses import DocumentKind
from dv_intake.utils.logger import get_logger

logger = get_logger(__name__)


class DocumentClassifier:
    """Marker-phrase classifier for the two known page templates."""

    def __init__(self, visa_marker: Optional[str] = None):
        self.visa_marker = visa_marker or INTAKE_CONFIG['visa_marker']

    def classify(self, markup: Markup, filename: str = "") -> DocumentKind:
        """
        Args:
            markup: Raw page text or an already parsed page
            filename: Saved file name, checked for the marker as well

        Returns:
            DocumentKind.VISA, ENTRANT, or UNKNOWN for pages without text
        """
        soup = parse_html(markup)
        title = title_text(soup)

        if self.visa_marker in title or self.visa_marker in filename:
            return DocumentKind.VISA

        if not title and not page_text(soup).strip():
            logger.debug(f"No text in {filename or 'document'}, classified unknown")
            return DocumentKind.UNKNOWN

        return DocumentKind.ENTRANT
