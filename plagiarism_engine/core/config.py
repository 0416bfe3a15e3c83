"""
Engine configuration.

Every threshold the scorers use is a configuration point with the defaults
below. ``EngineConfig.from_env`` reads ``PLAGIARISM_*`` variables, loading a
``.env`` file first when one is present.
"""

import math
import os
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from dotenv import load_dotenv

from .validation import ParameterValidator, ParameterValidationError

ENV_PREFIX = "PLAGIARISM_"


@dataclass(frozen=True)
class EngineConfig:
    # Fingerprint / n-gram
    fingerprint_window: int = 50
    ngram_sizes: Tuple[int, ...] = (2, 3)
    max_matching_phrases: int = 5

    # Aggregation weights: cosine, n-gram, fingerprint
    cosine_weight: float = 0.40
    ngram_weight: float = 0.35
    fingerprint_weight: float = 0.25

    # Risk bands (percent, applied to the max overall similarity)
    high_threshold: int = 80
    medium_threshold: int = 50
    low_threshold: int = 25

    # Sentence diagnostics (fractional cosine similarity)
    exact_match_threshold: float = 0.9
    near_match_threshold: float = 0.7

    # Recommendations
    min_word_count: int = 500
    dominant_fingerprint_threshold: int = 50

    # Report
    top_results: int = 10

    # Execution
    max_workers: int = 1
    show_progress: bool = False
    max_references: Optional[int] = None
    max_sentences: Optional[int] = None

    def __post_init__(self):
        for name, min_value, max_value in (
            ("fingerprint_window", 1, None),
            ("max_matching_phrases", 0, None),
            ("top_results", 1, None),
            ("max_workers", 1, 64),
            ("min_word_count", 0, None),
            ("low_threshold", 0, 100),
            ("medium_threshold", 0, 100),
            ("high_threshold", 0, 100),
            ("dominant_fingerprint_threshold", 0, 100),
        ):
            self._store(name, ParameterValidator.validate_positive_integer(
                getattr(self, name), name, min_value=min_value, max_value=max_value))

        if not self.ngram_sizes:
            raise ParameterValidationError("ngram_sizes must not be empty", field="ngram_sizes", value=self.ngram_sizes)
        self._store("ngram_sizes", tuple(
            ParameterValidator.validate_positive_integer(n, "ngram_sizes") for n in self.ngram_sizes))

        for name in ("cosine_weight", "ngram_weight", "fingerprint_weight",
                     "exact_match_threshold", "near_match_threshold"):
            self._store(name, ParameterValidator.validate_probability(getattr(self, name), name))

        weights = (self.cosine_weight, self.ngram_weight, self.fingerprint_weight)
        if not math.isclose(sum(weights), 1.0, abs_tol=1e-9):
            raise ParameterValidationError(
                f"Aggregation weights must sum to 1, got {sum(weights):.4f}",
                field="weights",
                value=weights
            )

        if not self.low_threshold <= self.medium_threshold <= self.high_threshold:
            raise ParameterValidationError(
                "Risk bands must satisfy low <= medium <= high",
                field="thresholds",
                value=(self.low_threshold, self.medium_threshold, self.high_threshold)
            )

        if self.near_match_threshold > self.exact_match_threshold:
            raise ParameterValidationError(
                "near_match_threshold must not exceed exact_match_threshold",
                field="near_match_threshold",
                value=self.near_match_threshold
            )

        for name in ("max_references", "max_sentences"):
            if getattr(self, name) is not None:
                self._store(name, ParameterValidator.validate_positive_integer(getattr(self, name), name))

    def _store(self, name: str, value) -> None:
        # Frozen dataclass: keep the converted value, not the raw input
        object.__setattr__(self, name, value)

    def with_overrides(self, **changes) -> "EngineConfig":
        return replace(self, **changes)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "EngineConfig":
        """
        Build a configuration from ``PLAGIARISM_*`` environment variables.

        Unset variables keep their defaults. ``PLAGIARISM_NGRAM_SIZES`` is a
        comma separated list such as ``2,3``.
        """
        load_dotenv(env_file)

        overrides = {}
        for name, parser in _ENV_PARSERS.items():
            raw = os.getenv(ENV_PREFIX + name.upper())
            if raw is None or raw.strip() == "":
                continue
            try:
                overrides[name] = parser(raw.strip())
            except ValueError as e:
                raise ParameterValidationError(
                    f"Invalid value for {ENV_PREFIX}{name.upper()}: {raw!r}",
                    field=name,
                    value=raw
                ) from e
        return cls(**overrides)


def _parse_bool(raw: str) -> bool:
    lowered = raw.lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ValueError(raw)


def _parse_sizes(raw: str) -> Tuple[int, ...]:
    return tuple(int(part) for part in raw.split(",") if part.strip())


_ENV_PARSERS: dict = {
    "fingerprint_window": int,
    "ngram_sizes": _parse_sizes,
    "max_matching_phrases": int,
    "cosine_weight": float,
    "ngram_weight": float,
    "fingerprint_weight": float,
    "high_threshold": int,
    "medium_threshold": int,
    "low_threshold": int,
    "exact_match_threshold": float,
    "near_match_threshold": float,
    "min_word_count": int,
    "dominant_fingerprint_threshold": int,
    "top_results": int,
    "max_workers": int,
    "show_progress": _parse_bool,
    "max_references": int,
    "max_sentences": int,
}


DEFAULT_CONFIG = EngineConfig()
