"""
Unicode-aware string normalization.

Stages (each toggled by `NormalizeOptions`, applied in this order):
- remove_diacritics: NFD decomposition, combining marks dropped.
- to_lower_case: lowercase.
- remove_punctuation: every run of non letter/digit characters becomes one
  space.
- collapse_whitespace: whitespace runs collapsed to one space, then trimmed.

The result is never None; `None` input becomes "" and other non-strings go
through `str()`.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Optional

from .options import NormalizeOptions

# `\w` minus underscore: Unicode letters and digits
_NON_ALNUM_RE = re.compile(r"[\W_]+")
_WS_RE = re.compile(r"\s+")

_DEFAULT_OPTS = NormalizeOptions()


def strip_diacritics(s: str) -> str:
    decomposed = unicodedata.normalize("NFD", s)
    return "".join(ch for ch in decomposed if not unicodedata.category(ch).startswith("M"))


def normalize_string(s, opts: Optional[NormalizeOptions] = None) -> str:
    """Normalize `s` for comparison.

    Example: normalize_string("Room #42, Bldg. 7") -> "room 42 bldg 7"
    """
    opts = opts or _DEFAULT_OPTS
    out = "" if s is None else str(s)

    if opts.remove_diacritics:
        out = strip_diacritics(out)
    if opts.to_lower_case:
        out = out.lower()
    if opts.remove_punctuation:
        out = _NON_ALNUM_RE.sub(" ", out)
    if opts.collapse_whitespace:
        out = _WS_RE.sub(" ", out).strip()
    return out
