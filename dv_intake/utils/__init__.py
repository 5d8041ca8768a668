# -*- coding: utf-8 -*-
"""
Utilities package for common functionality across the intake pipeline.

Contains logging setup, I/O helpers, the shared dataclasses and the
intake error hierarchy.
"""
