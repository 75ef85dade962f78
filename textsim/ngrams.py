"""
Character n-gram tokenization.

Summary:
- `ngrams` slides a window of size n over a (normalized, optionally padded)
  string; `all_ngrams` concatenates every size in [min_n, max_n].

Defaults:
- Normalize with `normalize_string`, strip all whitespace, no padding.
- n is clamped to [1, min(MAX_NGRAM_SIZE, len(text))].
"""

from __future__ import annotations

import re
from typing import List, Optional

from . import config
from .normalize import normalize_string
from .options import AllNgramsOptions, NgramOptions, Token

_WS_RE = re.compile(r"\s+")

_DEFAULT_OPTS = NgramOptions()


def _clamp_size(n: int, length: int) -> int:
    return max(1, min(int(n), config.MAX_NGRAM_SIZE, length))


def ngrams(s, n: int = config.DEFAULT_NGRAM_SIZE, opts: Optional[NgramOptions] = None) -> List[Token]:
    """Character n-grams of `s`, in window order.

    ngrams("abcde", 3) -> ["abc", "bcd", "cde"]

    A prepared string not longer than n is returned as the single token; an
    empty one yields [].
    """
    opts = opts or _DEFAULT_OPTS
    text = "" if s is None else str(s)

    if opts.normalize:
        text = normalize_string(text, opts.normalize_opts)
    size = _clamp_size(n, len(text))

    if not opts.preserve_whitespace:
        text = _WS_RE.sub("", text)

    if opts.pad:
        pad = (opts.pad_char or config.DEFAULT_PAD_CHAR) * (size - 1)
        text = pad + text + pad

    if not text:
        return []
    if len(text) <= size:
        return [text]
    return [text[i:i + size] for i in range(len(text) - size + 1)]


def all_ngrams(s, opts: Optional[AllNgramsOptions] = None) -> List[Token]:
    """Concatenate `ngrams(s, n)` for n = min_n..max_n, smallest size first.

    max_n defaults to min(MAX_NGRAM_SIZE, len(s)). Returns [] for empty input
    or when min_n > max_n.
    """
    opts = opts or AllNgramsOptions()
    text = "" if s is None else str(s)
    if not text:
        return []

    max_n = opts.max_n if opts.max_n is not None else min(config.MAX_NGRAM_SIZE, len(text))
    out: List[Token] = []
    for n in range(opts.min_n, max_n + 1):
        out.extend(ngrams(text, n, opts.ngram_options))
    return out
