__version__ = "0.1.0"

from abc import ABC, abstractmethod
from enum import Enum
from typing import TypeVar

Alphabet = TypeVar("Alphabet")


class SequenceKind(str, Enum):
    """The biological variant a sequence belongs to. Variants form the pipeline DNA -> RNA -> PROTEIN."""

    DNA = "dna"
    RNA = "rna"
    PROTEIN = "protein"

    @staticmethod
    def sequence_kind_str_to_kind(kind: str) -> "SequenceKind":
        """Resolves either a member name (``DNA``) or a member value (``dna``) to a SequenceKind"""
        if isinstance(kind, SequenceKind):
            return kind
        if kind in SequenceKind.__members__:
            return SequenceKind[kind]
        return SequenceKind(kind)


class AbstractSequence(ABC):
    """Shared AbstractSequence base class simplifies imports for type checking"""

    identifier: str
    alphabet: Alphabet

    @property
    @abstractmethod
    def kind(self) -> SequenceKind:
        """Returns the SequenceKind of this sequence"""

    @property
    @abstractmethod
    def symbols(self) -> str:
        """Returns the current symbols of this sequence as a string"""

    @abstractmethod
    def render(self) -> str:
        """Returns the ``>identifier`` / symbols display form of this sequence"""
