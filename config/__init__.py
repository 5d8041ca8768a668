# -*- coding: utf-8 -*-
"""
Configuration package for the intake pipeline.

Contains intake_config (walk, extraction and reconciliation settings loaded
from .env with in-code defaults).
"""
