# -*- coding: utf-8 -*-
"""
Module: intake_config.py
Package: config
Purpose: Configuration for archive walking, extraction and reconciliation

Deployment-specific values (sentinel text, folder key policy, worker count,
data path) come from .env; label tables and policy defaults are defined here.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


# ============================================================================
# PATHS (from .env)
# ============================================================================

BASE_DIR = Path(__file__).resolve().parent.parent  # Project root
DATA_PATH = Path(os.getenv('DATA_PATH', 'data/'))

if not DATA_PATH.is_absolute():
    DATA_PATH = BASE_DIR / DATA_PATH

OUTPUT_PATH = DATA_PATH / "output"
LOGS_PATH = DATA_PATH / "logs"


# ============================================================================
# ARCHIVE WALK + CLASSIFICATION
# ============================================================================

INTAKE_CONFIG = {
    # Literal written for any absent or unextractable value
    'sentinel': os.getenv('INTAKE_SENTINEL', 'Missing'),

    # 'relative' (path under the root) or 'basename' (folder name only)
    'folder_key_policy': os.getenv('INTAKE_FOLDER_KEY', 'relative'),

    'num_workers': int(os.getenv('INTAKE_NUM_WORKERS', '1')),

    # Matched case-insensitively against the file suffix
    'document_extensions': ['.html', '.htm'],

    # Companion folders written by "save webpage as", per browser locale
    'resource_suffixes': ['_files', '_fichiers', '-Dateien', '_archivos'],

    # Present in the <title> (or file name) of every visa application page
    'visa_marker': 'Electronic Diversity Visa Program',
}


# ============================================================================
# LABEL TABLES
# ============================================================================

# Confirmation page: label -> rest of line ('line') or a 4-digit token ('year')
ENTRANT_LABELS = [
    {'field': 'entrant_name', 'label': 'Entrant Name:', 'rule': 'line'},
    {'field': 'confirmation_number', 'label': 'Confirmation Number:', 'rule': 'line'},
    {'field': 'year_of_birth', 'label': 'Year of Birth:', 'rule': 'year'},
]

# Application page: card header label -> card body, trimmed by rule
#   full         whole body text
#   first_line   first line of the body
#   first_token  first whitespace-delimited token of the first line
#   anchored     span between 'label' and 'until' inside a body
VISA_SECTIONS = [
    {'field': 'first_name', 'label': 'b. First Name', 'rule': 'anchored',
     'until': 'c. Middle Name'},
    {'field': 'gender', 'label': '2. Gender', 'rule': 'full'},
    {'field': 'country', 'label': '5. Country Where You Were Born', 'rule': 'full'},
    {'field': 'phone_number', 'label': '10. Phone Number', 'rule': 'full'},
    {'field': 'email', 'label': '11. E-mail Address', 'rule': 'first_line'},
    {'field': 'marital_status', 'label': '13. What is your current marital status?',
     'rule': 'first_token'},
    {'field': 'number_of_children', 'label': '14. Number of Children',
     'rule': 'first_line'},
]


# ============================================================================
# RECONCILIATION POLICY
# ============================================================================

RECONCILE_CONFIG = {
    # Replace an entrant whose three fields are all sentinel by a blank record
    'drop_blank_entrants': _env_bool('INTAKE_DROP_BLANK_ENTRANTS', False),

    # Keep only the last record emitted for each folder
    'keep_last_per_folder': _env_bool('INTAKE_KEEP_LAST_PER_FOLDER', False),

    # Emit a record for a visa page no entrant in its folder claims
    'emit_unmatched_visas': _env_bool('INTAKE_EMIT_UNMATCHED_VISAS', True),

    # Emit a blank record for a document folder that produced nothing
    'never_drop_folders': _env_bool('INTAKE_NEVER_DROP_FOLDERS', False),
}
