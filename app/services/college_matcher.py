"""
Finds mentions of known colleges in free text.

Two passes run over the case-folded text:

1. Exact: every college name and alias is searched with word boundaries.
2. Approximate: windows of consecutive words (one word up to the longest
   alias) are scored against the same vocabulary with the normalized
   Levenshtein distance. A window is accepted only when its distance to
   the closest term is strictly below the threshold.

The index is built once per process with ``init_matcher`` and is read-only
afterwards.
"""
import logging
import re
import threading
from typing import Iterable, Optional

from rapidfuzz import process
from rapidfuzz.distance import Levenshtein

from app.core.config import settings

logger = logging.getLogger(__name__)

WORD_RE = re.compile(r"[\w-]+")
MIN_WINDOW_CHARS = 4


def _as_dict(college) -> dict:
    if isinstance(college, dict):
        return dict(college)
    return college.to_dict()


class CollegeMatcher:
    def __init__(self, colleges: Iterable, threshold: Optional[float] = None):
        self.threshold = settings.MATCH_THRESHOLD if threshold is None else threshold
        self.colleges = {}   # canonical name -> college record
        self.terms = {}      # case-folded name or alias -> canonical name

        for college in colleges:
            record = _as_dict(college)
            name = record["name"]
            self.colleges[name] = record
            self.terms[name.casefold()] = name
            for alias in record.get("aliases") or []:
                self.terms.setdefault(alias.casefold(), name)

        self._vocabulary = list(self.terms)
        self._patterns = [
            (re.compile(rf"\b{re.escape(term)}\b"), name) for term, name in self.terms.items()
        ]
        self.max_window = max((len(term.split()) for term in self._vocabulary), default=1)

    def _exact(self, text: str) -> set:
        return {name for pattern, name in self._patterns if pattern.search(text)}

    def _windows(self, text: str):
        words = WORD_RE.findall(text)
        for size in range(1, self.max_window + 1):
            for start in range(len(words) - size + 1):
                window = " ".join(words[start:start + size])
                if len(window) >= MIN_WINDOW_CHARS:
                    yield window

    def _approximate(self, text: str) -> set:
        found = set()
        for window in self._windows(text):
            best = process.extractOne(
                window,
                self._vocabulary,
                scorer=Levenshtein.normalized_distance,
                score_cutoff=self.threshold,
            )
            if best is not None and best[1] < self.threshold:
                found.add(self.terms[best[0]])
        return found

    def match_names(self, text) -> list[str]:
        if not isinstance(text, str) or not text.strip():
            return []
        folded = text.casefold()
        return sorted(self._exact(folded) | self._approximate(folded))

    def match(self, text) -> list[dict]:
        """Canonical college records mentioned in `text`, ordered by name."""
        return [self.colleges[name] for name in self.match_names(text)]


_matcher: Optional[CollegeMatcher] = None
_matcher_lock = threading.Lock()


def init_matcher(colleges: Iterable, threshold: Optional[float] = None) -> CollegeMatcher:
    """Builds the process-wide matcher once. Later calls return the existing one."""
    global _matcher
    with _matcher_lock:
        if _matcher is None:
            _matcher = CollegeMatcher(colleges, threshold)
            logger.info(f"College matcher ready: {len(_matcher.colleges)} colleges, {len(_matcher.terms)} terms")
        return _matcher


def get_matcher() -> CollegeMatcher:
    if _matcher is None:
        raise RuntimeError("College matcher is not initialised. Call init_matcher() at startup.")
    return _matcher


def reset_matcher():
    global _matcher
    with _matcher_lock:
        _matcher = None
