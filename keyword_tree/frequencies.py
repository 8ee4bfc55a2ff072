"""
Relative keyword frequencies for training samples.

A raw sample is a mapping from word to occurrence count. Before a sample
can be used for training (or, later, for classification) it is normalized
over the classifier's fixed keyword list so the values sum to 1.0.
"""

import logging
from typing import Dict, Iterable, List, Mapping

logger = logging.getLogger(__name__)

# word -> count (raw) or word -> relative frequency (normalized)
Frequencies = Dict[str, float]


def build_vocabulary(freqs: Mapping[str, Iterable[Mapping[str, float]]]) -> List[str]:
    """
    Collect the keyword list from every sample of every class.

    The result is sorted so retraining on the same corpus always yields the
    same keyword order.

    Args:
        freqs: Mapping from class label to that class's raw samples

    Returns:
        Sorted list of distinct words

    Raises:
        ValueError: If a word is empty or contains whitespace
    """
    words = set()
    for samples in freqs.values():
        for sample in samples:
            words.update(sample.keys())

    for word in words:
        if not word or any(c.isspace() for c in word):
            raise ValueError(f"Invalid keyword {word!r}: keywords must be non-empty and contain no whitespace")

    vocabulary = sorted(words)
    logger.debug("Vocabulary has %d keywords", len(vocabulary))
    return vocabulary


def normalize_keywords(counts: Mapping[str, float], keywords: Iterable[str]) -> Frequencies:
    """
    Convert raw word counts into relative frequencies over ``keywords``.

    Words outside the keyword list are ignored. A sample with no keyword
    occurrences at all normalizes to all zeros instead of failing.

    Args:
        counts: Raw word -> count mapping
        keywords: The classifier's keyword list

    Returns:
        New mapping with an entry for every keyword

    Raises:
        ValueError: If a count is negative
    """
    keywords = list(keywords)
    total = 0.0
    for word in keywords:
        count = counts.get(word, 0)
        if count < 0:
            raise ValueError(f"Negative count {count} for keyword {word!r}")
        total += count
    if total == 0:
        total = 1
    scaler = 1 / total

    return {word: counts.get(word, 0) * scaler for word in keywords}


def normalize_samples(
    freqs: Mapping[str, Iterable[Mapping[str, float]]],
    keywords: List[str]
) -> List[Frequencies]:
    """Normalize every sample of every class, in class then sample order."""
    return [
        normalize_keywords(sample, keywords)
        for samples in freqs.values()
        for sample in samples
    ]
