"""Keyword decision tree training pipeline.

This module turns per-class keyword counts into a compact ``Classifier``:

    raw counts -> normalized frequencies -> bisecting boolean fields
        -> induced tree -> classifier nodes -> centered thresholds

Example usage:

    from keyword_tree import ClassifierTrainer

    freqs = {
        'Go': [{'func': 3, 'package': 1}, {'func': 5, ':=': 2}],
        'Python': [{'def': 4, 'self': 3}, {'def': 1, 'import': 2}],
    }
    trainer = ClassifierTrainer(verbosity=0)
    classifier = trainer.fit(freqs)
    print(trainer.get_training_stats())
"""

from typing import Any, Dict, Mapping, Optional, Sequence

from .centering import center_thresholds
from .classifier import Classifier, count_leaves, tree_depth
from .config import get_trainer_config
from .conversion import convert_tree
from .errors import TreeGenerationError
from .fields import DataSet, TreeEntry, create_bisecting_float_fields
from .frequencies import build_vocabulary, normalize_keywords
from .induction import TreeInducer, count_empty_leaves, create_inducer, format_induced_tree

RawFrequencies = Mapping[str, Sequence[Mapping[str, float]]]


class ClassifierTrainer:
    """Trains a keyword decision tree classifier from raw word counts.

    Attributes:
        inducer: Tree induction strategy
        verbosity: Verbosity level (0=silent, 1=progress, 2=detailed)
    """

    def __init__(
        self,
        inducer: Optional[TreeInducer] = None,
        inducer_type: Optional[str] = None,
        criterion: Optional[str] = None,
        max_depth: Optional[int] = None,
        min_samples_split: Optional[int] = None,
        min_samples_leaf: Optional[int] = None,
        min_impurity_decrease: Optional[float] = None,
        random_state: Optional[int] = None,
        verbosity: Optional[int] = None
    ):
        """Initialize the trainer.

        Unset arguments are read from the environment (see ``config``).

        Args:
            inducer: Ready-made tree inducer; overrides the inducer options
            inducer_type: Registered inducer name (default: 'sklearn')
            criterion: Split criterion ('entropy', 'gini' or 'log_loss')
            max_depth: Maximum depth of the induced tree (None for unlimited)
            min_samples_split: Minimum entries required to split a node
            min_samples_leaf: Minimum entries required at a leaf
            min_impurity_decrease: Smallest impurity decrease a split must achieve
            random_state: Seed for tie-breaking between equally good fields
            verbosity: Verbosity level (0=silent, 1=progress, 2=detailed)
        """
        config = get_trainer_config()

        self.verbosity = verbosity if verbosity is not None else config['verbosity']

        if inducer is None:
            params = {
                'criterion': criterion or config['criterion'],
                'max_depth': max_depth if max_depth is not None else config['max_depth'],
                'min_samples_split': min_samples_split or config['min_samples_split'],
                'min_samples_leaf': min_samples_leaf or config['min_samples_leaf'],
                'min_impurity_decrease': (
                    min_impurity_decrease if min_impurity_decrease is not None
                    else config['min_impurity_decrease']
                ),
                'random_state': random_state if random_state is not None else config['random_state'],
            }
            inducer = create_inducer(inducer_type or config['inducer'], **params)
        self.inducer = inducer

        self._train_stats: Optional[Dict[str, Any]] = None

    def _build_dataset(self, freqs: RawFrequencies, keywords: Sequence[str]) -> DataSet:
        dataset = DataSet()

        if self.verbosity >= 1:
            print("Generating entries...")
        for label, samples in freqs.items():
            if not label:
                raise ValueError("Class labels must be non-empty")
            for sample in samples:
                dataset.entries.append(TreeEntry(
                    label=label,
                    freqs=normalize_keywords(sample, keywords),
                ))

        if self.verbosity >= 1:
            print("Generating fields...")
        for keyword in keywords:
            create_bisecting_float_fields(dataset, keyword)

        if self.verbosity >= 2:
            print(f"  {len(dataset.entries)} entries, {len(dataset.fields)} fields")
        return dataset

    def fit(self, freqs: RawFrequencies) -> Classifier:
        """Train a classifier.

        Args:
            freqs: Mapping from class label to that class's raw word counts

        Returns:
            Trained classifier with centered thresholds

        Raises:
            ValueError: If a class label or keyword is invalid
            TreeGenerationError: If no tree could be induced
            FieldLabelError: If a field label could not be parsed back
        """
        keywords = build_vocabulary(freqs)
        dataset = self._build_dataset(freqs, keywords)

        if self.verbosity >= 1:
            print("Generating tree...")
        tree = self.inducer.generate_tree(dataset)
        if tree is None:
            raise TreeGenerationError("Failed to generate tree.")

        if self.verbosity >= 2:
            print("Tree is:")
            print(format_induced_tree(tree))

        classifier = Classifier(keywords=tuple(keywords), tree_root=convert_tree(tree))
        classifier = center_thresholds(classifier, freqs)

        self._train_stats = {
            'n_samples': len(dataset.entries),
            'n_classes': len({entry.label for entry in dataset.entries}),
            'n_keywords': len(keywords),
            'n_fields': len(dataset.fields),
            'tree_depth': tree_depth(classifier.tree_root),
            'tree_n_leaves': count_leaves(classifier.tree_root),
            'n_unknown_leaves': count_empty_leaves(tree),
        }

        if self.verbosity >= 1:
            print("\nTraining Results:")
            print(f"  Samples:     {self._train_stats['n_samples']}")
            print(f"  Keywords:    {self._train_stats['n_keywords']}")
            print(f"  Tree depth:  {self._train_stats['tree_depth']}")
            print(f"  Tree leaves: {self._train_stats['tree_n_leaves']}")

        return classifier

    def get_training_stats(self) -> Optional[Dict[str, Any]]:
        """Get statistics from the last training run.

        Returns:
            Dictionary with training statistics, or None if not trained
        """
        return self._train_stats


def generate_classifier(freqs: RawFrequencies, **trainer_params) -> Classifier:
    """Train a classifier with a one-off ``ClassifierTrainer``."""
    return ClassifierTrainer(**trainer_params).fit(freqs)
