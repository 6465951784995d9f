"""Whitespace and length rules shared by tokenization and key phrase extraction.

Python's notion of whitespace is wider than the one documents were originally
scored with: ``str.split()`` and ``str.strip()`` also break on the information
separators ``\\x1c``-``\\x1f`` and on ``\\x85``, and they keep ``\\ufeff``. The
helpers below use the narrower set so token boundaries stay the same.
"""

from __future__ import annotations

import re
from typing import List

WHITESPACE = (
    " \t\n\v\f\r"
    "\u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_WHITESPACE_RUN = re.compile(f"[{re.escape(WHITESPACE)}]+")


def split_words(text: str) -> List[str]:
    return [word for word in _WHITESPACE_RUN.split(text) if word]


def strip(text: str) -> str:
    return text.strip(WHITESPACE)


def truncate_code_units(text: str, limit: int) -> str:
    """Cut ``text`` to at most ``limit`` UTF-16 code units.

    Characters outside the Basic Multilingual Plane count as two units. A
    character that would straddle the limit is dropped whole.
    """
    units = 0
    for index, char in enumerate(text):
        units += 2 if ord(char) > 0xFFFF else 1
        if units > limit:
            return text[:index]
    return text


__all__ = ["WHITESPACE", "split_words", "strip", "truncate_code_units"]
