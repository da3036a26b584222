#===============================================================================
#  DeskMenu | entry_parser.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Decodes .desktop files and turns the [Desktop Entry] section into a
#  DesktopEntry, including the visibility rules (TryExec, NoDisplay, Hidden).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import configparser
import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional

from .constants import (
    ENTRY_SECTION,
    ENTRY_TYPE_APPLICATION,
    ENV_PATH,
    KEY_EXEC,
    KEY_HIDDEN,
    KEY_NAME,
    KEY_NO_DISPLAY,
    KEY_PATH,
    KEY_TERMINAL,
    KEY_TRY_EXEC,
    KEY_TYPE,
    TRUE_VALUE,
)
from .errors import EntryDecodeError
from .models import DesktopEntry

logger = logging.getLogger(__name__)

Sections = Dict[str, Dict[str, str]]


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        delimiters=("=",),
        comment_prefixes=("#",),
        inline_comment_prefixes=None,
        interpolation=None,
        strict=False,
        empty_lines_in_values=False,
        default_section="\0",  # keep a literal [DEFAULT] group from leaking into others
    )
    # Keys are case-sensitive (Name vs name)
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    return parser


def parse_desktop_text(text: str, source: str = "<string>") -> Sections:
    """Decode desktop-entry text into {section: {key: value}}."""
    parser = _new_parser()
    try:
        parser.read_string(text, source=source)
    except configparser.Error as e:
        raise EntryDecodeError(f"Malformed desktop file {source}: {e}") from e
    return {name: dict(parser.items(name, raw=True)) for name in parser.sections()}


def read_desktop_file(path: Path) -> Sections:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise EntryDecodeError(f"Could not read {path}: {e}") from e
    return parse_desktop_text(text, source=str(path))


def exec_exists(try_exec: str, env: Mapping[str, str]) -> bool:
    """Check whether a TryExec hint resolves to an existing file.

    Resolution order:
      1) the hint as a literal path
      2) every $PATH directory joined with the hint's base name
    """
    # os.path.exists treats EACCES and ENAMETOOLONG as "not found"
    if os.path.exists(try_exec):
        return True

    name = Path(try_exec).name
    if not name:
        return False
    search = env.get(ENV_PATH) or ""
    return any(os.path.exists(os.path.join(d, name)) for d in search.split(os.pathsep) if d)


def entry_from_sections(identifier: str, sections: Sections, env: Mapping[str, str]) -> Optional[DesktopEntry]:
    """Build an entry from decoded sections, or None if it isn't a usable application.

    Rules:
    - Type must be exactly "Application"
    - Name and Exec must be present and non-empty
    - visible = TryExec resolves (or is absent) and neither NoDisplay nor Hidden is "true"
    """
    section = sections.get(ENTRY_SECTION)
    if section is None:
        return None
    if section.get(KEY_TYPE) != ENTRY_TYPE_APPLICATION:
        return None

    name = section.get(KEY_NAME) or ""
    command_line = section.get(KEY_EXEC) or ""
    if not name or not command_line:
        return None

    try_exec = section.get(KEY_TRY_EXEC)
    found = exec_exists(try_exec, env) if try_exec else True

    visible = (
        found
        and section.get(KEY_NO_DISPLAY) != TRUE_VALUE
        and section.get(KEY_HIDDEN) != TRUE_VALUE
    )

    return DesktopEntry(
        identifier=identifier,
        display_name=name,
        command_line=command_line,
        working_directory=section.get(KEY_PATH) or None,
        requires_terminal=section.get(KEY_TERMINAL) == TRUE_VALUE,
        visible=visible,
    )


def load_entry(path: Path, env: Mapping[str, str]) -> Optional[DesktopEntry]:
    """Read one .desktop file; malformed or non-application files yield None."""
    try:
        sections = read_desktop_file(path)
    except EntryDecodeError as e:
        logger.debug("Skipping %s", e)
        return None

    entry = entry_from_sections(path.stem, sections, env)
    if entry is None:
        logger.debug("Discarding %s: not a launchable application", path)
    return entry
