#===============================================================================
#  DeskMenu | cli.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Entry point: discover entries, show the menu (or print it), launch the
#  choice. Converts fatal LauncherErrors into an exit status.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, Optional, Sequence, TextIO

from .config import LauncherConfig, parse_config
from .errors import LauncherError
from .launcher import LaunchOutcome, launch_choice
from .picker import run_picker
from .projection import render_menu, sort_entries
from .registry import read_entries
from .state import load_usage, record_launch, save_usage

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool, stream: TextIO) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=stream,
    )


def run(cfg: LauncherConfig, env: Mapping[str, str], stdout: TextIO, stderr: TextIO) -> LaunchOutcome:
    usage = load_usage(cfg.usage_log) if cfg.usage_log else {}

    entries = sort_entries(read_entries(env).values(), usage)
    menu = render_menu(entries, cfg.field)

    if cfg.dmenu is None:
        stdout.write(menu)
        stdout.flush()
        return LaunchOutcome.NOTHING_CHOSEN

    choice = run_picker(cfg.dmenu, menu)
    outcome, entry = launch_choice(choice, entries, cfg.field, cfg.terminal, stdout, stderr)

    if outcome is LaunchOutcome.LAUNCHED and entry is not None and cfg.usage_log:
        record_launch(usage, entry.identifier)
        try:
            save_usage(cfg.usage_log, usage)
        except OSError as e:
            logger.warning("Could not save usage log %s: %s", cfg.usage_log, e)
    return outcome


def main(
    argv: Optional[Sequence[str]] = None,
    env: Optional[Mapping[str, str]] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    env = dict(os.environ) if env is None else env

    cfg = parse_config(argv)
    setup_logging(cfg.verbose, stderr)

    try:
        run(cfg, env, stdout, stderr)
    except LauncherError as e:
        stderr.write(f"error: {e}\n")
        return 1
    return 0
