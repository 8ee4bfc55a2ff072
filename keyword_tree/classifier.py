"""
Runtime representation of a trained keyword classifier.

The tree is a strict binary tree of ``Branch`` nodes, each testing
``frequency[keyword] > threshold``, ending in ``Leaf`` nodes that name a
class. Nodes are immutable; threshold centering builds new ones.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union

from .fields import format_field_label


@dataclass(frozen=True)
class Leaf:
    classification: str


@dataclass(frozen=True)
class Branch:
    """
    Attributes:
        keyword: Keyword whose frequency is tested
        threshold: Samples with a frequency strictly above it go true
        true_branch: Subtree for frequencies above the threshold
        false_branch: Subtree for everything else
    """
    keyword: str
    threshold: float
    true_branch: "ClassifierNode"
    false_branch: "ClassifierNode"

    @property
    def field_label(self) -> str:
        return format_field_label(self.keyword, self.threshold)


ClassifierNode = Union[Leaf, Branch]


@dataclass(frozen=True)
class Classifier:
    keywords: Tuple[str, ...]
    tree_root: ClassifierNode


def iter_branches(node: ClassifierNode) -> Iterator[Branch]:
    """Yield every branch of the tree, depth first, true side before false."""
    if isinstance(node, Leaf):
        return
    yield node
    yield from iter_branches(node.true_branch)
    yield from iter_branches(node.false_branch)


def iter_leaves(node: ClassifierNode) -> Iterator[Leaf]:
    if isinstance(node, Leaf):
        yield node
        return
    yield from iter_leaves(node.true_branch)
    yield from iter_leaves(node.false_branch)


def tree_depth(node: ClassifierNode) -> int:
    """Number of branches on the longest root-to-leaf path."""
    if isinstance(node, Leaf):
        return 0
    return 1 + max(tree_depth(node.true_branch), tree_depth(node.false_branch))


def count_leaves(node: ClassifierNode) -> int:
    return sum(1 for _ in iter_leaves(node))


def leaf_labels(node: ClassifierNode) -> List[str]:
    return [leaf.classification for leaf in iter_leaves(node)]
