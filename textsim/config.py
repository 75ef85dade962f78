"""
Default settings for textsim.

Plain module-level settings; callers override by passing explicit arguments.
"""

import logging
import os
import sys

# N-grams
DEFAULT_NGRAM_SIZE = 3
MAX_NGRAM_SIZE = 10  # hard cap for ngrams/all_ngrams
DEFAULT_PAD_CHAR = "_"

# NMF factorization (scikit-learn)
NMF_INIT = "nndsvda"  # falls back to "random" when k > min(rows, cols)
NMF_MAX_ITER = 500
NMF_RANDOM_STATE = 0

# Logging
LOG_LEVEL = os.environ.get("TEXTSIM_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Install a stdout handler on the `textsim` logger.

    The library never calls this on import; applications opt in.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("textsim")
    logger.setLevel(level.upper())
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger
