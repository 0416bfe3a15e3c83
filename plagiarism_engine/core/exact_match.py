import hashlib
from typing import Dict, List, Set, Tuple

from .logging_config import LoggerMixin
from .models import Fingerprint
from .text_processing import tokenize
from .validation import ParameterValidator, validate_inputs


def hash_window(text: str) -> str:
    """MD5 digest of a window; used for equality only, not for security."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def create_fingerprints(normalized_text: str, window_size: int = 50) -> List[Fingerprint]:
    """
    Hash every ``window_size``-word window of the text, stride one word.

    Documents shorter than the window have no fingerprints at all, so their
    fingerprint similarity is always 0.
    """
    tokens = tokenize(normalized_text)
    fingerprints = []
    for position in range(len(tokens) - window_size + 1):
        window = ' '.join(tokens[position:position + window_size])
        fingerprints.append(Fingerprint(hash=hash_window(window), position=position, content=window))
    return fingerprints


def match_fingerprints(target: List[Fingerprint], source: List[Fingerprint]) -> List[Fingerprint]:
    """Target fingerprints whose hash also occurs in the source, in target order."""
    source_hashes = {fp.hash for fp in source}
    return [fp for fp in target if fp.hash in source_hashes]


def fingerprint_similarity(target: List[Fingerprint], matches: List[Fingerprint]) -> float:
    """
    Share of the target's windows found in the source.

    The denominator is the target's own window count, so the score is not
    symmetric between two documents of different length.
    """
    return len(matches) / max(len(target), 1)


class FingerprintMatcher(LoggerMixin):
    """
    Detects verbatim copied passages by hashing fixed-size word windows
    and looking up exact hash collisions between target and reference.
    """

    @validate_inputs(
        window_size=lambda x: ParameterValidator.validate_positive_integer(x, "window_size", min_value=1)
    )
    def __init__(self, window_size: int = 50):
        """
        Initialize the fingerprint matcher.

        :param window_size: Number of consecutive words hashed per fingerprint
        """
        self.window_size = window_size
        self._fingerprints: Dict[str, List[Fingerprint]] = {}
        self._hash_sets: Dict[str, Set[str]] = {}

    def fingerprints(self, normalized_text: str) -> List[Fingerprint]:
        cached = self._fingerprints.get(normalized_text)
        if cached is None:
            cached = create_fingerprints(normalized_text, self.window_size)
            self._fingerprints[normalized_text] = cached
        return cached

    def _hashes(self, normalized_text: str) -> Set[str]:
        cached = self._hash_sets.get(normalized_text)
        if cached is None:
            cached = {fp.hash for fp in self.fingerprints(normalized_text)}
            self._hash_sets[normalized_text] = cached
        return cached

    def find_matches(self, target_text: str, source_text: str) -> List[Fingerprint]:
        """
        :param target_text: Normalized target text
        :param source_text: Normalized reference text
        :return: Target fingerprints that collide with a reference window
        """
        source_hashes = self._hashes(source_text)
        return [fp for fp in self.fingerprints(target_text) if fp.hash in source_hashes]

    def compute(self, target_text: str, source_text: str) -> Tuple[float, List[Fingerprint]]:
        """
        Fingerprint similarity of the target against one reference.

        :return: (similarity in [0, 1], matching target fingerprints)
        """
        target = self.fingerprints(target_text)
        matches = self.find_matches(target_text, source_text)
        similarity = fingerprint_similarity(target, matches)
        self.logger.debug(f"Fingerprint similarity: {len(matches)}/{len(target)} windows matched")
        return similarity, matches
