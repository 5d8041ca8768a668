# -*- coding: utf-8 -*-
"""
Ingestion package for reading the decompressed archive.

Contains archive_walker (depth-first enumeration of saved pages, skipping
"save webpage as" resource folders) and document_classifier (confirmation vs.
visa application pages).
"""
