#===============================================================================
#  DeskMenu | fs_discovery.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Filesystem discovery utilities: which application folders to search, and
#  which desktop entries live in one of them.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Mapping

from .constants import (
    APP_FOLDER_NAME,
    DEFAULT_DATA_DIRS,
    ENTRY_SUFFIX,
    ENV_DATA_DIRS,
    ENV_DATA_HOME,
    ENV_HOME,
    HOME_DATA_SUBPATH,
)
from .entry_parser import load_entry
from .errors import ConfigError
from .models import DesktopEntry

logger = logging.getLogger(__name__)


def application_dirs(env: Mapping[str, str]) -> List[Path]:
    """Return the application folders to search, highest precedence first.

    Resolution order:
      1) $XDG_DATA_HOME/applications, else $HOME/.local/share/applications
      2) each entry of $XDG_DATA_DIRS joined with applications, else
         /usr/local/share/applications and /usr/share/applications

    Folders are not checked for existence here; missing ones scan as empty.
    """
    data_home = env.get(ENV_DATA_HOME) or ""
    if data_home:
        primary = Path(data_home) / APP_FOLDER_NAME
    else:
        home = env.get(ENV_HOME) or ""
        if not home:
            raise ConfigError(
                f"Could not determine the user data directory: neither ${ENV_DATA_HOME} nor ${ENV_HOME} is set."
            )
        primary = Path(home) / HOME_DATA_SUBPATH / APP_FOLDER_NAME

    data_dirs = env.get(ENV_DATA_DIRS) or ""
    if data_dirs:
        secondary = [Path(d) for d in data_dirs.split(os.pathsep) if d]
    else:
        secondary = [Path(d) for d in DEFAULT_DATA_DIRS]

    return [primary] + [d / APP_FOLDER_NAME for d in secondary]


def list_entry_files(folder: Path) -> List[Path]:
    """List *.desktop files directly inside folder (no recursion)."""
    try:
        items = sorted(folder.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.debug("Skipping %s: %s", folder, e)
        return []
    return [p for p in items if p.suffix == ENTRY_SUFFIX and p.is_file()]


def scan_applications_folder(folder: Path, env: Mapping[str, str]) -> List[DesktopEntry]:
    """Scan one application folder and return the entries it declares.

    Files that fail to decode, or that don't describe an application, are
    skipped; they never abort the scan.
    """
    entries: List[DesktopEntry] = []
    for path in list_entry_files(folder):
        entry = load_entry(path, env)
        if entry is not None:
            entries.append(entry)
    return entries
