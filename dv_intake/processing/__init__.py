# -*- coding: utf-8 -*-
"""
Processing package for end-to-end intake runs.

Contains intake_processor (walk, extract and reconcile orchestration) and
export (artifact naming, DataFrame shaping, JSON/CSV writers).
"""
