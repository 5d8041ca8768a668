# -*- coding: utf-8 -*-
"""
Diversity visa archive intake package.

Top-level package for the intake pipeline: archive walking and document
classification, entrant/visa field extraction, record reconciliation and
export helpers.
"""
