#===============================================================================
#  DeskMenu | registry.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Merges entries from all application folders into one registry keyed by
#  identifier. The first folder to declare an identifier owns it.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping

from .fs_discovery import application_dirs, scan_applications_folder
from .models import DesktopEntry

logger = logging.getLogger(__name__)

Registry = Mapping[str, DesktopEntry]


def merge_entries(entry_lists: Iterable[Iterable[DesktopEntry]]) -> Registry:
    """Merge per-folder entry lists, given in precedence order.

    A later entry with an identifier already present is dropped as a whole,
    even when the kept one is invisible.
    """
    merged: Dict[str, DesktopEntry] = {}
    for entries in entry_lists:
        for entry in entries:
            if entry.identifier in merged:
                logger.debug("Shadowed: %s", entry.identifier)
                continue
            merged[entry.identifier] = entry
    return MappingProxyType(merged)


def read_entries(env: Mapping[str, str]) -> Registry:
    """Enumerate application folders, scan each, and merge the results."""
    dirs = application_dirs(env)
    logger.debug("Application folders: %s", ", ".join(str(d) for d in dirs))
    return merge_entries(scan_applications_folder(d, env) for d in dirs)
