"""
Conversion of an induced tree into classifier nodes.
"""

from typing import Tuple

import regex as re  # type: ignore

from .classifier import Branch, ClassifierNode, Leaf
from .errors import FieldLabelError
from .induction import InducedLeaf, InducedNode

UNKNOWN_CLASSIFICATION = 'Unknown'

# "<keyword> > <threshold>", exactly three space-separated tokens.
_FIELD_LABEL = re.compile(r'^(\S+) (>) (\S+)$')


def parse_field_label(label: str) -> Tuple[str, float]:
    """
    Split a canonical field label into its keyword and threshold.

    Raises:
        FieldLabelError: If the label does not follow the convention
    """
    match = _FIELD_LABEL.match(label)
    if match is None:
        raise FieldLabelError(label)
    try:
        threshold = float(match.group(3))
    except ValueError:
        raise FieldLabelError(label) from None
    return match.group(1), threshold


def convert_tree(node: InducedNode) -> ClassifierNode:
    """
    Rewrite an induced tree as classifier nodes.

    Leaves that no training entry reached become ``Unknown`` leaves.
    """
    if isinstance(node, InducedLeaf):
        if node.value is None:
            return Leaf(UNKNOWN_CLASSIFICATION)
        return Leaf(str(node.value))

    keyword, threshold = parse_field_label(str(node.field))
    return Branch(
        keyword=keyword,
        threshold=threshold,
        false_branch=convert_tree(node.branches[False]),
        true_branch=convert_tree(node.branches[True]),
    )
