from enum import Enum
from string import ascii_uppercase
from typing import FrozenSet


class Alphabet(Enum):
    DNA = "ATGC"
    RNA = "AUGC"
    # uppercase letters that do not name an amino acid are excluded; X is kept as the unknown residue
    PROTEIN = "".join(c for c in ascii_uppercase if c not in "BJOUZ")

    @property
    def symbols(self) -> FrozenSet[str]:
        """Returns the set of characters permitted by this Alphabet"""
        return frozenset(self.value)

    def contains(self, char: str) -> bool:
        """Returns True iff ``char`` is a single character permitted by this Alphabet. Membership is case-sensitive."""
        return isinstance(char, str) and len(char) == 1 and char in self.value

    def is_nucleotide_alphabet(self) -> bool:
        return self is not Alphabet.PROTEIN


ALPHABET_TO_NUCLEOTIDE_COMPLEMENT = {
    Alphabet.DNA: {"A": "T", "T": "A", "G": "C", "C": "G"},
    Alphabet.RNA: {"A": "U", "U": "A", "G": "C", "C": "G"},
}
