# -*- coding: utf-8 -*-
"""
Extraction package for label-anchored field scans.

Contains markup (shared BeautifulSoup parsing), entrant_extractor (confirmation
page fields) and visa_extractor (application page card sections).
"""
