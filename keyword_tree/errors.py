"""
Exceptions raised while training a keyword decision tree.
"""


class TrainingError(RuntimeError):
    """Base class for fatal training failures."""


class TreeGenerationError(TrainingError):
    """Raised when tree induction produced no tree at all."""


class FieldLabelError(TrainingError):
    """
    Raised when a branch label cannot be parsed back into (keyword, threshold).

    This means field synthesis and tree conversion disagree about the label
    format. It is an internal failure, never a problem with the input data.
    """

    def __init__(self, label: str):
        super().__init__(f"unknown branch field: {label}")
        self.label = label
