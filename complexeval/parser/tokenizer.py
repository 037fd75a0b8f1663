"""Normalize a raw expression string into a flat list of tokens.

Every character is first separated by an internal delimiter, then a fixed
sequence of whole-string rewrites re-merges the multi-character tokens
(digit runs, decimals, function names) and canonicalizes synonyms. The order
of the rewrites matters: later ones assume the earlier normalizations.
"""

from __future__ import annotations

import logging
import math
import re

log = logging.getLogger(__name__)

_SEP = "\x1f"

PI_DIGITS = repr(math.pi)

_SPACES_RE = re.compile(r" +")
_DIGITS_RE = re.compile(rf"([0-9]+){_SEP}([0-9]+)")
_DECIMAL_RE = re.compile(rf"([0-9]+){_SEP}[.,]{_SEP}([0-9]+)")

# (pattern, replacement) pairs applied in order after digits are merged
_REWRITES = [
    (re.compile(rf"\*{_SEP}\*"), "^"),
    (re.compile("π"), PI_DIGITS),
    (re.compile(rf"p{_SEP}i"), PI_DIGITS),
    (re.compile("[ij]"), "j"),
    (re.compile(rf"-{_SEP}\+"), "-"),
    (re.compile(rf"\+{_SEP}-"), "-"),
    (re.compile(rf"\+{_SEP}\+"), "+"),
    (re.compile(rf"-{_SEP}-"), "+"),
    (re.compile(rf"e{_SEP}(?:x{_SEP}p|\^)"), "exp"),
    (re.compile(rf"l{_SEP}(?:o{_SEP}g|n)"), "ln"),
]


def tokenize(text: str) -> list[str]:
    """Split an expression into normalized tokens.

    >>> tokenize("2e^(jπ/2)")
    ['2', 'exp', '(', 'j', '3.141592653589793', '/', '2', ')']
    """
    text = _SPACES_RE.sub(" ", text.strip().lower())
    joined = _SEP.join(text)

    # Each pass merges neighbouring pairs, so long runs need several passes
    while True:
        merged = _DIGITS_RE.sub(r"\1\2", joined)
        if len(merged) == len(joined):
            break
        joined = merged

    joined = _DECIMAL_RE.sub(r"\1.\2", joined)
    for pattern, replacement in _REWRITES:
        joined = pattern.sub(replacement, joined)

    tokens = [t for t in joined.split(_SEP) if t]
    log.debug("Tokenized %r into %s", text, tokens)
    return tokens
