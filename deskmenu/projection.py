#===============================================================================
#  DeskMenu | projection.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Menu ordering and the per-entry text shown to (and matched against) the user.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Sequence

from .models import DesktopEntry, EntryField


def sort_entries(
    entries: Iterable[DesktopEntry],
    usage: Optional[Mapping[str, int]] = None,
) -> List[DesktopEntry]:
    """Drop invisible entries and order the rest for display.

    Entries are ordered by lowercased name; ties keep their input order. With
    a usage mapping, more frequently launched entries come first.
    """
    visible = [e for e in entries if e.visible]
    if usage:
        return sorted(visible, key=lambda e: (-usage.get(e.identifier, 0), e.display_name.lower()))
    return sorted(visible, key=lambda e: e.display_name.lower())


def project(entry: DesktopEntry, field: EntryField) -> str:
    if field is EntryField.IDENTIFIER:
        return entry.identifier
    if field is EntryField.COMMAND:
        parts = entry.command_line.split()
        return parts[0] if parts else entry.display_name
    return entry.display_name


def render_menu(entries: Sequence[DesktopEntry], field: EntryField) -> str:
    """One projected line per entry, each newline-terminated."""
    return "".join(f"{project(e, field)}\n" for e in entries)


def find_entry(entries: Sequence[DesktopEntry], field: EntryField, choice: str) -> Optional[DesktopEntry]:
    """First entry whose projection equals choice exactly."""
    for entry in entries:
        if project(entry, field) == choice:
            return entry
    return None
