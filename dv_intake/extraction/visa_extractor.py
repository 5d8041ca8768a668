# -*- coding: utf-8 -*-
"""
Visa

Pulls the applicant fields out of an Electronic Diversity Visa application
page. The page is a stack of cards, each a header (the question label) and a
body (the answer). A table maps each header label to the field it fills and
the rule that trims its body:

    full         whole body text, trimmed
    first_line   first line of the body (stacked answers)
    first_token  first word of the first line (descriptive trailing text)
    anchored     span between two adjacent labels inside one body

A section that is not found gives the sentinel for that field only.

Examples:
fields = extract_visa_fields(html)
    fields['first_name'], fields['marital_status']
    # ('JANE', 'Married')

"""
# Standard library
import re
from typing import Dict, List, Optional

# Third-party
from bs4 import BeautifulSoup

# Local
from config.intake_config import INTAKE_CONFIG, VISA_SECTIONS
from dv_intake.extraction.markup import Markup, parse_html
from dv_intake.utils.logger import get_logger

logger = get_logger(__name__)

HEADER_SELECTOR = 'div.card-header'
BODY_SELECTOR = 'div.card-body'

RULES = ('full', 'first_line', 'first_token', 'anchored')


# ============================================================================
# SECTION LOOKUP
# ============================================================================

def find_section_body(soup: BeautifulSoup, label: str) -> Optional[str]:
    """
    Body text of the first card whose header contains label.

    A card with several bodies yields their texts joined by newlines, so
    first_line still lands in the first body.

    Returns:
        Raw body text, or None when no such card exists
    """
    for header in soup.select(HEADER_SELECTOR):
        if label not in header.get_text():
            continue
        card = header.parent
        bodies = card.select(BODY_SELECTOR) if card is not None else []
        if bodies:
            return "\n".join(body.get_text() for body in bodies)
    return None


def find_anchored_span(soup: BeautifulSoup, label: str, until: str) -> Optional[str]:
    """
    Text between two adjacent field labels inside a card body.

    The value may only contain word characters, whitespace, apostrophes and
    hyphens, which is what the name fields of the form allow.
    """
    pattern = re.compile(re.escape(label) + r"\s*([\w\s'-]+)(?=" + re.escape(until) + r")")
    for body in soup.select(BODY_SELECTOR):
        text = body.get_text()
        if label not in text:
            continue
        match = pattern.search(text)
        if match:
            return match.group(1)
    return None


# ============================================================================
# RULES
# ============================================================================

def _first_line(text: str) -> str:
    return text.strip().split("\n")[0].strip()


def apply_rule(rule: str, text: Optional[str]) -> str:
    """Trim located text according to its rule; '' when nothing is left."""
    if text is None:
        return ""
    if rule == 'first_line':
        return _first_line(text)
    if rule == 'first_token':
        tokens = _first_line(text).split()
        return tokens[0] if tokens else ""
    return text.strip()


# ============================================================================
# EXTRACTION
# ============================================================================

def extract_visa_fields(
    markup: Markup,
    sentinel: Optional[str] = None,
    sections: Optional[List[Dict]] = None,
) -> Dict[str, str]:
    """
    Extract the application page fields.

    Args:
        markup: Raw page HTML or an already parsed page
        sentinel: Value for absent fields (default: configured sentinel)
        sections: Section table (default: VISA_SECTIONS)

    Returns:
        Dict with first_name, gender, country, phone_number, email,
        marital_status, number_of_children
    """
    sentinel = sentinel if sentinel is not None else INTAKE_CONFIG['sentinel']
    sections = sections or VISA_SECTIONS
    soup = parse_html(markup)

    fields = {}
    for entry in sections:
        rule = entry['rule']
        if rule not in RULES:
            raise ValueError(f"Unknown visa rule {rule!r} for {entry['field']}")

        if rule == 'anchored':
            located = find_anchored_span(soup, entry['label'], entry['until'])
        else:
            located = find_section_body(soup, entry['label'])

        value = apply_rule(rule, located)
        if not value:
            logger.debug(f"Visa field {entry['field']} not found ({entry['label']!r})")
            value = sentinel
        fields[entry['field']] = value

    return fields
