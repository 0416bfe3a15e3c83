"""
Text normalization and tokenization helpers shared by every scorer.
"""

import math
import re
from collections import Counter
from typing import Dict, List, Optional

_NON_WORD = re.compile(r'[^\w\s]')
_WHITESPACE = re.compile(r'\s+')
# A run of non-terminators closed by terminal punctuation, or a trailing fragment
_SENTENCE = re.compile(r'[^.!?]+[.!?]+|[^.!?]+$')


def normalize_text(text: str) -> str:
    """
    Lowercase, drop everything that is not a word character or whitespace,
    and collapse whitespace runs to one space.
    """
    if not text:
        return ""
    text = text.lower()
    text = _NON_WORD.sub('', text)
    text = _WHITESPACE.sub(' ', text)
    return text.strip()


def tokenize(normalized_text: str) -> List[str]:
    # Normalized text only ever holds single spaces, so an empty string has no tokens
    return normalized_text.split(' ') if normalized_text else []


def generate_ngrams(normalized_text: str, n: int) -> List[str]:
    """Contiguous ``n``-token phrases in document order."""
    tokens = tokenize(normalized_text)
    if len(tokens) < n:
        return []
    return [' '.join(tokens[i:i + n]) for i in range(len(tokens) - n + 1)]


def term_frequency(normalized_text: str) -> Dict[str, float]:
    """Word -> occurrences divided by the document's token count."""
    tokens = tokenize(normalized_text)
    if not tokens:
        return {}
    total = len(tokens)
    return {word: count / total for word, count in Counter(tokens).items()}


def split_sentences(text: str, limit: Optional[int] = None) -> List[str]:
    """
    Split raw text on terminal punctuation (``.``, ``!``, ``?``).

    Text without any terminator comes back as a single sentence. Blank
    fragments are dropped. ``limit`` keeps only the first sentences.
    """
    sentences = [match.strip() for match in _SENTENCE.findall(text or "")]
    sentences = [sentence for sentence in sentences if sentence]
    if limit is not None:
        sentences = sentences[:limit]
    return sentences


def count_words(text: str) -> int:
    return len(text.split()) if text else 0


def to_percent(score: float) -> int:
    """Fraction in [0, 1] to an integer percentage, rounding halves up."""
    return int(math.floor(score * 100 + 0.5))
