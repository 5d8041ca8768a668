# -*- coding: utf-8 -*-
"""
Entrant

Pulls the entrant name, confirmation number and year of birth out of an entry
confirmation page. Each field is found independently by scanning the page text
for its literal label and capturing what follows it. A label alone on its line
takes the next line (the value cell of a saved table), unless that line is
another label. The year is restricted to a 4-digit token on the label's own
line. A missing label or an empty capture gives the sentinel for that field
only.

Examples:
extract_entrant_fields("Entrant Name: Jane Doe\\nYear of Birth: 1990")
    # {'entrant_name': 'Jane Doe', 'confirmation_number': 'Missing',
    #  'year_of_birth': '1990'}

"""
# Standard library
import re
from typing import Dict, Iterable, List, Optional

# Local
from config.intake_config import ENTRANT_LABELS, INTAKE_CONFIG
from dv_intake.extraction.markup import Markup, page_text
from dv_intake.utils.logger import get_logger

logger = get_logger(__name__)

# Capture pattern per rule, appended to the escaped label
RULE_PATTERNS = {
    'line': r'\s*([^\n]+)',
    'year': r'[^\S\n]*(\d{4})',
}


def compile_label_patterns(labels: List[Dict]) -> Dict[str, re.Pattern]:
    """Build one regex per table entry: field -> label + rule capture."""
    patterns = {}
    for entry in labels:
        rule = RULE_PATTERNS.get(entry['rule'])
        if rule is None:
            raise ValueError(f"Unknown entrant rule {entry['rule']!r} for {entry['field']}")
        patterns[entry['field']] = re.compile(re.escape(entry['label']) + rule)
    return patterns


_DEFAULT_PATTERNS = compile_label_patterns(ENTRANT_LABELS)
_DEFAULT_LABELS = tuple(entry['label'] for entry in ENTRANT_LABELS)


def extract_entrant_fields(
    markup: Markup,
    sentinel: Optional[str] = None,
    patterns: Optional[Dict[str, re.Pattern]] = None,
    labels: Optional[Iterable[str]] = None,
) -> Dict[str, str]:
    """
    Extract the confirmation page fields.

    Args:
        markup: Raw page (HTML or plain text) or an already parsed page
        sentinel: Value for absent fields (default: configured sentinel)
        patterns: Compiled label patterns (default: ENTRANT_LABELS)
        labels: Label strings a capture may not start with (default: ENTRANT_LABELS)

    Returns:
        Dict with entrant_name, confirmation_number, year_of_birth
    """
    sentinel = sentinel if sentinel is not None else INTAKE_CONFIG['sentinel']
    patterns = patterns or _DEFAULT_PATTERNS
    labels = tuple(labels) if labels is not None else _DEFAULT_LABELS
    text = page_text(markup)

    fields = {}
    for name, pattern in patterns.items():
        match = pattern.search(text)
        value = match.group(1).strip() if match else ""
        # Empty label followed by the next label's line
        if labels and value.startswith(labels):
            value = ""
        if not value:
            logger.debug(f"Entrant field {name} not found")
            value = sentinel
        fields[name] = value

    return fields
