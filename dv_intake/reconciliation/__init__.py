# -*- coding: utf-8 -*-
"""
Reconciliation package.

Contains record_reconciler (per-folder entrant/visa matching and merging into
consolidated records).
"""
