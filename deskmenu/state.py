#===============================================================================
#  DeskMenu | state.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Load/save of the optional usage log (launch counts per entry identifier),
#  used to float frequently launched apps to the top of the menu.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict

logger = logging.getLogger(__name__)


def load_usage(usage_path: Path) -> Dict[str, int]:
    """Load launch counts from disk (or start empty)."""
    if not usage_path.exists():
        return {}
    try:
        data = json.loads(usage_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable usage log %s: %s", usage_path, e)
        return {}
    if not isinstance(data, dict):
        return {}
    return {k: v for k, v in data.items() if isinstance(v, int) and not isinstance(v, bool)}


def record_launch(usage: Dict[str, int], identifier: str) -> None:
    usage[identifier] = usage.get(identifier, 0) + 1


def save_usage(usage_path: Path, usage: Dict[str, int]) -> None:
    """Persist launch counts to disk."""
    usage_path.parent.mkdir(parents=True, exist_ok=True)
    usage_path.write_text(json.dumps(usage, indent=2, sort_keys=True), encoding="utf-8")
