"""
Tests for classifier.py module.

Run with: pytest keyword_tree/classifier_test.py -v
"""

import dataclasses

import pytest

from .classifier import (
    Branch,
    Classifier,
    Leaf,
    count_leaves,
    iter_branches,
    iter_leaves,
    leaf_labels,
    tree_depth,
)


@pytest.fixture
def tree():
    return Branch(
        keyword='func',
        threshold=0.2,
        true_branch=Leaf('Go'),
        false_branch=Branch(
            keyword='def',
            threshold=0.1,
            true_branch=Leaf('Python'),
            false_branch=Leaf('Java'),
        ),
    )


class TestTreeHelpers:
    """Tests for tree traversal helpers."""

    def test_iter_branches(self, tree):
        """Test depth-first branch order."""
        assert [b.keyword for b in iter_branches(tree)] == ['func', 'def']
        assert list(iter_branches(Leaf('Go'))) == []

    def test_iter_leaves(self, tree):
        """Test leaves in true-before-false order."""
        assert list(iter_leaves(tree)) == [Leaf('Go'), Leaf('Python'), Leaf('Java')]
        assert leaf_labels(tree) == ['Go', 'Python', 'Java']

    def test_depth_and_leaves(self, tree):
        """Test tree depth and leaf count."""
        assert tree_depth(tree) == 2
        assert tree_depth(Leaf('Go')) == 0
        assert count_leaves(tree) == 3


class TestNodes:
    """Tests for node dataclasses."""

    def test_field_label(self, tree):
        """Test the canonical label of a branch."""
        assert tree.field_label == 'func > 0.2'

    def test_nodes_are_immutable(self, tree):
        """Test that trained trees cannot be modified in place."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            tree.threshold = 0.5

    def test_classifier_equality(self, tree):
        """Test value equality of whole classifiers."""
        assert Classifier(('def', 'func'), tree) == Classifier(('def', 'func'), tree)
        assert Classifier(('def', 'func'), tree) != Classifier(('def', 'func'), Leaf('Go'))
