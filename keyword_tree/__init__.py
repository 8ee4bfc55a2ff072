"""
Keyword Decision Tree Trainer

Trains a compact decision tree that predicts a label (such as a programming
language) from the relative frequencies of keywords in a sample.
"""

from .centering import center_thresholds
from .classifier import Branch, Classifier, Leaf
from .conversion import UNKNOWN_CLASSIFICATION, convert_tree, parse_field_label
from .errors import FieldLabelError, TrainingError, TreeGenerationError
from .fields import DataSet, Field, TreeEntry, create_bisecting_float_fields
from .frequencies import build_vocabulary, normalize_keywords
from .induction import (
    InducedBranch,
    InducedLeaf,
    SklearnTreeInducer,
    TreeInducer,
    create_inducer,
)
from .trainer import ClassifierTrainer, generate_classifier

__version__ = "0.1.0"
__all__ = [
    "ClassifierTrainer",
    "generate_classifier",
    "Classifier",
    "Branch",
    "Leaf",
    "UNKNOWN_CLASSIFICATION",
    "build_vocabulary",
    "normalize_keywords",
    "DataSet",
    "Field",
    "TreeEntry",
    "create_bisecting_float_fields",
    "TreeInducer",
    "SklearnTreeInducer",
    "InducedLeaf",
    "InducedBranch",
    "create_inducer",
    "convert_tree",
    "parse_field_label",
    "center_thresholds",
    "TrainingError",
    "TreeGenerationError",
    "FieldLabelError",
]
