#===============================================================================
#  DeskMenu | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Launches the picked entry (optionally wrapped in a terminal) or, when the
#  picked line matches no entry, runs it as a plain command.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import subprocess
import sys
from enum import Enum
from typing import List, Optional, Sequence, TextIO, Tuple

from .constants import TERMINAL_PLACEHOLDER
from .errors import ConfigError, InvalidCommandError, TokenizeError
from .models import DesktopEntry, EntryField
from .projection import find_entry
from .tokenizer import split_command

logger = logging.getLogger(__name__)


class LaunchOutcome(Enum):
    LAUNCHED = "launched"
    SPAWN_FAILED = "spawn_failed"
    FALLBACK_RAN = "fallback_ran"
    NOTHING_CHOSEN = "nothing_chosen"


def build_command(entry: DesktopEntry, terminal_template: Optional[str] = None) -> List[str]:
    """Return the argv for an entry, wrapped in the terminal template if it needs one."""
    command_string = entry.command_line
    if terminal_template is not None and entry.requires_terminal:
        if TERMINAL_PLACEHOLDER not in terminal_template:
            raise ConfigError("Invalid terminal command")
        command_string = terminal_template.replace(TERMINAL_PLACEHOLDER, command_string)

    try:
        return split_command(command_string)
    except TokenizeError as e:
        raise InvalidCommandError("Invalid exec key.") from e


def spawn_detached(argv: Sequence[str], cwd: Optional[str] = None) -> None:
    """Start argv and return immediately. The child is never waited on."""
    # New session so the app outlives the terminal/picker that started us.
    subprocess.Popen(list(argv), cwd=cwd, start_new_session=True)


def run_fallback(choice: str, stdout: TextIO, stderr: TextIO) -> int:
    """Run the raw choice as a command, echo its output, report its status."""
    try:
        argv = split_command(choice)
    except TokenizeError as e:
        raise InvalidCommandError("Invalid command.") from e

    logger.debug("No entry matched, running %s", argv)
    try:
        result = subprocess.run(argv, stdout=subprocess.PIPE)
    except (OSError, ValueError) as e:
        raise InvalidCommandError(f"Invalid command. {e}") from e

    out = result.stdout.decode("utf-8", errors="replace")
    stdout.write(out if out.endswith("\n") else out + "\n")
    stdout.flush()
    stderr.write(f"Command exited with status {result.returncode}\n")
    return result.returncode


def launch_choice(
    choice: str,
    entries: Sequence[DesktopEntry],
    field: EntryField,
    terminal_template: Optional[str] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> Tuple[LaunchOutcome, Optional[DesktopEntry]]:
    """Turn the picker's choice into a running process.

    entries must be the visible, sorted entries the menu was built from.
    Returns the outcome and the matched entry (None when nothing matched).

    flow:
      - empty choice: picker was aborted, nothing happens
      - no entry matches: run the choice itself (run_fallback)
      - match: build argv (terminal wrap + split), spawn detached in Path=
    """
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    if not choice:
        return LaunchOutcome.NOTHING_CHOSEN, None

    entry = find_entry(entries, field, choice)
    if entry is None:
        run_fallback(choice, stdout, stderr)
        return LaunchOutcome.FALLBACK_RAN, None

    argv = build_command(entry, terminal_template)
    logger.debug("Launching %s: %s (cwd=%s)", entry.identifier, argv, entry.working_directory)
    try:
        spawn_detached(argv, entry.working_directory)
    except (OSError, ValueError) as e:
        # ValueError: NUL byte in argv or Path=
        stderr.write(f"Application exited with error: {e}\n")
        return LaunchOutcome.SPAWN_FAILED, entry
    return LaunchOutcome.LAUNCHED, entry
