"""
Shared type aliases and option objects.

`Token`, `Corpus`, `Vocabulary`... are plain aliases: they document intent
and carry no runtime behavior.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np

from . import config

Token = str
Corpus = Sequence[str]
Vocabulary = List[Token]
SparseDoc = Dict[Token, float]
DenseMatrix = np.ndarray

WEIGHTINGS = ("tf", "tfidf")


@dataclass(frozen=True)
class NormalizeOptions:
    """Stages of `normalize_string`, applied in field order when enabled."""

    remove_diacritics: bool = True
    to_lower_case: bool = True
    remove_punctuation: bool = True
    collapse_whitespace: bool = True


@dataclass(frozen=True)
class NgramOptions:
    normalize: bool = True
    pad: bool = False
    pad_char: str = config.DEFAULT_PAD_CHAR
    preserve_whitespace: bool = False
    normalize_opts: Optional[NormalizeOptions] = None


@dataclass(frozen=True)
class AllNgramsOptions:
    min_n: int = 1
    max_n: Optional[int] = None  # None -> min(MAX_NGRAM_SIZE, len(s))
    ngram_options: Optional[NgramOptions] = None


@dataclass(frozen=True)
class EmbeddingOptions:
    """Options for n-gram vocabularies and TF / TF-IDF embeddings.

    - n: n-gram size.
    - min_count: tokens seen fewer times across the corpus are dropped from
      the vocabulary.
    - ngram_opts: forwarded to `ngrams`.
    - weighting: "tf" (default) or "tfidf".
    """

    n: int = config.DEFAULT_NGRAM_SIZE
    min_count: int = 1
    ngram_opts: Optional[NgramOptions] = None
    weighting: str = "tf"

    def __post_init__(self):
        if self.weighting not in WEIGHTINGS:
            raise ValueError(
                f"Unknown weighting {self.weighting!r}; expected one of {WEIGHTINGS}"
            )
