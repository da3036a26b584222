#===============================================================================
#  DeskMenu | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Central place for registry folder naming, desktop entry keys and
#  environment variable names.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

APP_TITLE = "deskmenu"
APP_VERSION = "0.3.0"

APP_FOLDER_NAME = "applications"
HOME_DATA_SUBPATH = ".local/share"
DEFAULT_DATA_DIRS = ("/usr/local/share", "/usr/share")

ENTRY_SUFFIX = ".desktop"
ENTRY_SECTION = "Desktop Entry"
ENTRY_TYPE_APPLICATION = "Application"

# --- Desktop entry keys ---
KEY_TYPE = "Type"
KEY_NAME = "Name"
KEY_EXEC = "Exec"
KEY_TRY_EXEC = "TryExec"
KEY_PATH = "Path"
KEY_TERMINAL = "Terminal"
KEY_NO_DISPLAY = "NoDisplay"
KEY_HIDDEN = "Hidden"

# Only this literal counts as true; "True", "1", "yes" do not.
TRUE_VALUE = "true"

TERMINAL_PLACEHOLDER = "{}"

# --- Environment ---
ENV_DATA_HOME = "XDG_DATA_HOME"
ENV_HOME = "HOME"
ENV_DATA_DIRS = "XDG_DATA_DIRS"
ENV_PATH = "PATH"
