#===============================================================================
#  DeskMenu | config.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Command-line options and the run configuration built from them.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from .constants import APP_TITLE, APP_VERSION, TERMINAL_PLACEHOLDER
from .models import EntryField


@dataclass(frozen=True)
class LauncherConfig:
    field: EntryField = EntryField.NAME
    dmenu: Optional[str] = None
    terminal: Optional[str] = None
    usage_log: Optional[Path] = None
    verbose: bool = False


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog=APP_TITLE,
        description="List desktop applications, pick one with dmenu (or similar) and launch it.",
    )
    ap.add_argument(
        "--entry-type",
        default="name",
        choices=["name", "identifier", "command", "filename"],
        help="Field shown in the menu and matched against the choice (default: name).",
    )
    ap.add_argument(
        "--dmenu",
        metavar="CMD",
        help="Command used to invoke dmenu or an equivalent. Without it the menu is printed to stdout.",
    )
    ap.add_argument(
        "--terminal",
        metavar="TEMPLATE",
        help=f"Terminal used for Terminal=true apps; put {TERMINAL_PLACEHOLDER} where the app command goes.",
    )
    ap.add_argument(
        "--usage-log",
        metavar="PATH",
        type=Path,
        help="JSON file of launch counts; frequently used apps are listed first.",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Log discovery details to stderr.")
    ap.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return ap


def parse_config(argv: Optional[Sequence[str]] = None) -> LauncherConfig:
    args = build_parser().parse_args(argv)
    return LauncherConfig(
        field=EntryField.parse(args.entry_type),
        dmenu=args.dmenu,
        terminal=args.terminal,
        usage_log=args.usage_log,
        verbose=args.verbose,
    )
