#===============================================================================
#  DeskMenu | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Exception types shared across the launcher. Anything deriving from
#  LauncherError aborts the run with a non-zero exit status.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations


class LauncherError(RuntimeError):
    """Fatal error; the run stops and the message goes to stderr."""


class ConfigError(LauncherError):
    """Bad environment or command-line configuration."""


class InvalidCommandError(LauncherError):
    """A chosen command or Exec key could not be turned into a process."""


class TokenizeError(LauncherError, ValueError):
    """Command text could not be split into argv tokens."""


class EntryDecodeError(LauncherError):
    """A registry file is malformed. Recovered per file, never fatal."""
