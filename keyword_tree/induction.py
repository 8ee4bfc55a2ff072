"""
Decision tree induction over synthesized boolean fields.

The induction strategy sits behind the small ``TreeInducer`` interface:
entries and fields go in, an induced tree (or ``None``) comes out. The
default implementation delegates the search to scikit-learn's
``DecisionTreeClassifier`` and reads its fitted ``tree_`` arrays back into
``InducedLeaf``/``InducedBranch`` nodes.
"""

import logging
from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Optional, Union

import numpy as np
from sklearn.tree import DecisionTreeClassifier

from .fields import DataSet, Field

logger = logging.getLogger(__name__)

CRITERIA = ('entropy', 'gini', 'log_loss')


@dataclass
class InducedLeaf:
    """Leaf of an induced tree; ``value`` is None when no entry reached it."""
    value: Optional[str]


@dataclass
class InducedBranch:
    """Branch of an induced tree, children keyed by the field's outcome."""
    field: Field
    branches: Dict[bool, "InducedNode"]


InducedNode = Union[InducedLeaf, InducedBranch]


class TreeInducer(ABC):
    """
    Abstract tree induction strategy.

    Implementations choose, at each node, the field that best separates the
    remaining entries by class and recurse on the field's true and false
    groups until the entries are pure or no field helps.
    """

    @abstractmethod
    def generate_tree(self, dataset: DataSet) -> Optional[InducedNode]:
        """
        Induce a tree for ``dataset``.

        Args:
            dataset: Entries with field values aligned to ``dataset.fields``

        Returns:
            Root of the induced tree, or None if induction cannot proceed
        """
        pass


def _majority_label(dataset: DataSet) -> str:
    counts = Counter(entry.label for entry in dataset.entries)
    # Highest count first, ties broken by label order.
    return min(counts, key=lambda label: (-counts[label], label))


class SklearnTreeInducer(TreeInducer):
    """
    Tree induction backed by ``sklearn.tree.DecisionTreeClassifier``.

    Field values become a boolean feature matrix; a split on feature ``i``
    sends false (``<= 0.5``) entries left and true entries right.
    """

    def __init__(
        self,
        criterion: str = 'entropy',
        max_depth: Optional[int] = None,
        min_samples_split: int = 2,
        min_samples_leaf: int = 1,
        min_impurity_decrease: float = 1e-9,
        random_state: int = 42
    ):
        """
        Initialize the inducer.

        Args:
            criterion: Split criterion ('entropy', 'gini' or 'log_loss')
            max_depth: Maximum depth of the tree (None for unlimited)
            min_samples_split: Minimum entries required to split a node
            min_samples_leaf: Minimum entries required at a leaf
            min_impurity_decrease: Smallest weighted impurity decrease a split
                must achieve; zero-gain splits are refused
            random_state: Seed for tie-breaking between equally good fields

        Raises:
            ValueError: If criterion is not recognized
        """
        if criterion not in CRITERIA:
            raise ValueError(f"Unknown criterion {criterion!r}, expected one of {CRITERIA}")
        self.criterion = criterion
        self.max_depth = max_depth
        self.min_samples_split = min_samples_split
        self.min_samples_leaf = min_samples_leaf
        self.min_impurity_decrease = min_impurity_decrease
        self.random_state = random_state
        self.classifier: Optional[DecisionTreeClassifier] = None

    def generate_tree(self, dataset: DataSet) -> Optional[InducedNode]:
        if not dataset.entries:
            logger.debug("No entries, cannot induce a tree")
            return None
        if not dataset.fields:
            return InducedLeaf(_majority_label(dataset))

        X = np.array([entry.field_values for entry in dataset.entries], dtype=bool)
        y = np.array([entry.label for entry in dataset.entries])
        if X.shape[1] != len(dataset.fields):
            raise ValueError(
                f"Entries carry {X.shape[1]} field values but the data set has {len(dataset.fields)} fields"
            )

        self.classifier = DecisionTreeClassifier(
            criterion=self.criterion,
            max_depth=self.max_depth,
            min_samples_split=self.min_samples_split,
            min_samples_leaf=self.min_samples_leaf,
            min_impurity_decrease=self.min_impurity_decrease,
            random_state=self.random_state
        )
        self.classifier.fit(X, y)

        tree = self.classifier.tree_
        classes = self.classifier.classes_

        def build_node(node_id: int) -> InducedNode:
            left_child = tree.children_left[node_id]
            right_child = tree.children_right[node_id]

            if left_child == right_child:
                if tree.n_node_samples[node_id] == 0:
                    return InducedLeaf(None)
                class_counts = tree.value[node_id][0]
                return InducedLeaf(str(classes[int(np.argmax(class_counts))]))

            false_node = build_node(left_child)
            true_node = build_node(right_child)
            if isinstance(false_node, InducedLeaf) and false_node == true_node:
                # Both outcomes lead to the same class, the split separates nothing.
                return false_node
            return InducedBranch(
                field=dataset.fields[tree.feature[node_id]],
                branches={False: false_node, True: true_node}
            )

        logger.debug(
            "Induced tree: depth=%d, leaves=%d",
            self.classifier.get_depth(), self.classifier.get_n_leaves()
        )
        return build_node(0)


INDUCERS = {
    'sklearn': SklearnTreeInducer,
}


def create_inducer(inducer_type: str = 'sklearn', **params) -> TreeInducer:
    """
    Factory function to create a tree inducer by name.

    Args:
        inducer_type: Registered inducer name ('sklearn')
        **params: Constructor parameters for the inducer

    Returns:
        TreeInducer instance

    Raises:
        ValueError: If inducer_type is not recognized
    """
    if inducer_type not in INDUCERS:
        raise ValueError(f"Unknown inducer type: {inducer_type}. Choose from {sorted(INDUCERS)}")
    return INDUCERS[inducer_type](**params)


def format_induced_tree(node: InducedNode, indent: int = 0) -> str:
    """Render an induced tree as indented text, true branch first."""
    pad = '  ' * indent
    if isinstance(node, InducedLeaf):
        return pad + (node.value if node.value is not None else '<empty>')
    lines = [f"{pad}[{node.field.label}]"]
    for outcome in (True, False):
        lines.append(f"{pad}  {outcome}:")
        lines.append(format_induced_tree(node.branches[outcome], indent + 2))
    return '\n'.join(lines)


def count_empty_leaves(node: InducedNode) -> int:
    """Number of leaves that no training entry reached."""
    if isinstance(node, InducedLeaf):
        return int(node.value is None)
    return sum(count_empty_leaves(child) for child in node.branches.values())
