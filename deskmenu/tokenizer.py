#===============================================================================
#  DeskMenu | tokenizer.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Shell-style splitting of command strings into argv lists.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import shlex
from typing import List

from .errors import TokenizeError


def split_command(text: str) -> List[str]:
    """Split text into argv tokens.

    Honors whitespace, single/double quotes and backslash escapes. There is
    no variable expansion, globbing or comment stripping. Raises
    TokenizeError on unbalanced quotes, a trailing escape, or empty input.
    """
    lexer = shlex.shlex(text, posix=True, punctuation_chars=False)
    lexer.whitespace_split = True
    lexer.commenters = ""
    try:
        tokens = list(lexer)
    except ValueError as e:
        raise TokenizeError(f"Cannot split {text!r}: {e}") from e
    if not tokens:
        raise TokenizeError("Empty command")
    return tokens
