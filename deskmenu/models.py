#===============================================================================
#  DeskMenu | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Shared data models used across the launcher.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EntryField(str, Enum):
    """Which field of an entry is shown in the menu and matched against."""
    NAME = "name"
    IDENTIFIER = "identifier"
    COMMAND = "command"

    @classmethod
    def parse(cls, value: str) -> "EntryField":
        # "filename" is the older spelling of "identifier"
        if value == "filename":
            return cls.IDENTIFIER
        return cls(value)


@dataclass(frozen=True)
class DesktopEntry:
    """Represents one resolved application entry from a .desktop file."""
    identifier: str                           # file stem, dedup key
    display_name: str                         # Name=
    command_line: str                         # Exec=, untokenized
    working_directory: Optional[str] = None   # Path=
    requires_terminal: bool = False           # Terminal=true
    visible: bool = True                      # computed once at resolution
