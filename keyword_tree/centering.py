"""
Threshold centering for a converted classifier tree.

Bisection leaves every threshold right next to a training value. Centering
walks the tree top-down with the training vectors that reach each branch and
moves the threshold to the midpoint between the largest value on the false
side and the smallest value on the true side.
"""

import logging
from typing import List, Mapping, Sequence, Tuple

from .classifier import Branch, Classifier, ClassifierNode, Leaf
from .frequencies import Frequencies, normalize_samples

logger = logging.getLogger(__name__)


def split_on_node(
    vectors: Sequence[Frequencies],
    keyword: str,
    threshold: float
) -> Tuple[List[Frequencies], List[Frequencies]]:
    """Partition vectors into (above threshold, at or below threshold)."""
    true_side = []
    false_side = []
    for vector in vectors:
        if vector.get(keyword, 0.0) > threshold:
            true_side.append(vector)
        else:
            false_side.append(vector)
    return true_side, false_side


def center_node(vectors: Sequence[Frequencies], node: ClassifierNode) -> ClassifierNode:
    """
    Center the thresholds of ``node`` and everything below it.

    A side that no vector falls on keeps the current threshold as its bound,
    so a branch with data on one side only moves halfway towards that data,
    and a branch reached by no data keeps its threshold.

    Args:
        vectors: Normalized training vectors reaching ``node``
        node: Subtree to center

    Returns:
        New subtree with centered thresholds
    """
    if isinstance(node, Leaf):
        return node

    lower_side = None
    upper_side = None
    for vector in vectors:
        value = vector.get(node.keyword, 0.0)
        if value <= node.threshold:
            if lower_side is None or value > lower_side:
                lower_side = value
        elif upper_side is None or value < upper_side:
            upper_side = value

    # TODO: decide whether a one-sided branch should instead snap to its data.
    if lower_side is None:
        lower_side = node.threshold
    if upper_side is None:
        upper_side = node.threshold

    threshold = (lower_side + upper_side) / 2
    if lower_side < upper_side <= threshold:
        # Adjacent floats: keep the partition rather than flip ``upper_side``.
        threshold = lower_side

    if threshold != node.threshold:
        logger.debug("Centered %s: %r -> %r", node.keyword, node.threshold, threshold)

    true_vectors, false_vectors = split_on_node(vectors, node.keyword, threshold)
    return Branch(
        keyword=node.keyword,
        threshold=threshold,
        true_branch=center_node(true_vectors, node.true_branch),
        false_branch=center_node(false_vectors, node.false_branch),
    )


def center_thresholds(
    classifier: Classifier,
    freqs: Mapping[str, Sequence[Mapping[str, float]]]
) -> Classifier:
    """
    Center every threshold of ``classifier`` against the full training set.

    Args:
        classifier: Converted classifier
        freqs: The raw training samples, class label -> samples

    Returns:
        New classifier with the same keywords and tree shape
    """
    vectors = normalize_samples(freqs, list(classifier.keywords))
    return Classifier(
        keywords=classifier.keywords,
        tree_root=center_node(vectors, classifier.tree_root),
    )
