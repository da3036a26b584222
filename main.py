#===============================================================================
#  DeskMenu  |  Desktop Application Launcher
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Collects the .desktop application entries found in the XDG data folders,
#  hands them to dmenu (or any picker that reads lines on stdin and writes
#  the chosen one on stdout) and launches the selection.
#  Supports:
#    - User entries shadowing system entries with the same file name
#    - TryExec / NoDisplay / Hidden visibility rules
#    - Terminal=true apps wrapped in a terminal template ("xterm -e {}")
#    - Running the typed text as a command when it matches no entry
#    - Optional usage log that lists frequently launched apps first
#
#  Folder Conventions
#  ------------------
#    $XDG_DATA_HOME/applications          (or ~/.local/share/applications)
#    <each $XDG_DATA_DIRS>/applications   (or /usr/local/share, /usr/share)
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Permission Notice (Personal/Internal Use)
#  -----------------------------------------
#  You may use, copy, and modify this software for personal or internal use.
#  Redistribution or public release should include this header and credit the
#  author. If you plan to open-source this project, consider replacing this
#  section with an OSI-approved license (e.g., MIT) for clarity.
#===============================================================================

from deskmenu.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
