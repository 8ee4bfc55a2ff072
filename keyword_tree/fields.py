"""
Boolean threshold fields synthesized from continuous keyword frequencies.

Tree induction only works with boolean fields, so every keyword frequency is
turned into a handful of ``"<keyword> > <threshold>"`` tests. The thresholds
bisect the sorted distinct frequencies observed for that keyword, which is
the smallest set of cuts that tells every pair of distinct values apart.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from .frequencies import Frequencies

logger = logging.getLogger(__name__)


@dataclass
class TreeEntry:
    """
    One labeled training sample prepared for induction.

    Attributes:
        label: Class label of the sample
        freqs: Normalized keyword frequencies
        field_values: Boolean value of every field, index-aligned with
            ``DataSet.fields``
    """
    label: str
    freqs: Frequencies
    field_values: List[bool] = field(default_factory=list)


@dataclass(frozen=True)
class Field:
    """
    A boolean predicate ``getter(entry) > threshold``.

    Attributes:
        label: Canonical ``"<keyword> > <threshold>"`` label
        threshold: Cut value
        getter: Extracts the continuous value from an entry
    """
    label: str
    threshold: float
    getter: Callable[[TreeEntry], float] = field(repr=False, compare=False)

    def evaluate(self, entry: TreeEntry) -> bool:
        return self.getter(entry) > self.threshold

    def __str__(self) -> str:
        return self.label


@dataclass
class DataSet:
    """Entries plus the fields whose values they carry."""
    entries: List[TreeEntry] = field(default_factory=list)
    fields: List[Field] = field(default_factory=list)


def format_field_label(keyword: str, threshold: float) -> str:
    # repr() is the shortest string that parses back to the same float.
    return f"{keyword} > {threshold!r}"


def bisecting_thresholds(values: Iterable[float]) -> List[float]:
    """
    Cut points separating every pair of distinct values.

    Args:
        values: Observed values, in any order, duplicates allowed

    Returns:
        Ascending midpoints between consecutive distinct values
    """
    distinct = sorted(set(float(v) for v in values))
    thresholds = []
    for lower, upper in zip(distinct, distinct[1:]):
        midpoint = (lower + upper) / 2
        if midpoint >= upper:
            # Adjacent floats: the midpoint rounded up onto ``upper``.
            midpoint = lower
        thresholds.append(midpoint)
    return thresholds


def _append_field_value(entry: TreeEntry, value: bool) -> None:
    entry.field_values.append(value)


def create_bisecting_float_fields(
    dataset: DataSet,
    keyword: str,
    getter: Optional[Callable[[TreeEntry], float]] = None,
    assigner: Optional[Callable[[TreeEntry, bool], None]] = None
) -> List[Field]:
    """
    Add the bisecting fields for one keyword to ``dataset``.

    Each new field is appended to ``dataset.fields`` and its value is
    assigned to every entry right away, so entries stay index-aligned with
    the field list.

    Args:
        dataset: Data set to extend
        keyword: Keyword the fields test
        getter: Reads the keyword's value from an entry (default: the
            entry's normalized frequency for ``keyword``)
        assigner: Stores a field value on an entry (default: append to
            ``entry.field_values``)

    Returns:
        The fields that were created, in ascending threshold order
    """
    if getter is None:
        def getter(entry: TreeEntry) -> float:
            return entry.freqs.get(keyword, 0.0)
    if assigner is None:
        assigner = _append_field_value

    created = []
    for threshold in bisecting_thresholds(getter(e) for e in dataset.entries):
        new_field = Field(
            label=format_field_label(keyword, threshold),
            threshold=threshold,
            getter=getter,
        )
        dataset.fields.append(new_field)
        for entry in dataset.entries:
            assigner(entry, new_field.evaluate(entry))
        created.append(new_field)

    logger.debug("Keyword %r: %d bisecting fields", keyword, len(created))
    return created
