#===============================================================================
#  DeskMenu | picker.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Hands the menu to an external picker (dmenu, rofi -dmenu, fzf, ...) and
#  reads back the chosen line.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import subprocess

from .errors import ConfigError, TokenizeError
from .tokenizer import split_command

logger = logging.getLogger(__name__)


def run_picker(command: str, menu_text: str) -> str:
    """Run the picker with menu_text on stdin and return its trimmed output.

    Blocks until the picker exits. The picker's exit status is ignored; an
    aborted picker simply yields an empty string.
    """
    try:
        argv = split_command(command)
    except TokenizeError as e:
        raise ConfigError("Invalid dmenu command.") from e

    logger.debug("Running picker: %s", argv)
    try:
        p = subprocess.Popen(
            argv,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
        )
    except OSError as e:
        raise ConfigError(f"Could not start dmenu command {argv[0]!r}: {e}") from e

    out, _ = p.communicate(menu_text.encode("utf-8"))
    logger.debug("Picker exited with status %s", p.returncode)
    return out.decode("utf-8", errors="replace").strip()
