import logging
from typing import Dict, Iterator, Optional, Union

from Bio.Seq import MutableSeq, Seq

from bioseqkit import AbstractSequence, SequenceKind
from bioseqkit.exc import EmptySequenceFastaError
from bioseqkit.sequence.alphabet import Alphabet, ALPHABET_TO_NUCLEOTIDE_COMPLEMENT
from bioseqkit.util.object_validation import ObjectValidation

logger = logging.getLogger(__name__)

CODON_LENGTH = 3
# stand-in for a codon table: every codon, partial or not, translates to this residue
PLACEHOLDER_AMINO_ACID = "A"


class BioSequence(AbstractSequence):
    """A mutable sequence of symbols constrained to an alphabet.

    Every character of the sequence is a member of the alphabet, both after construction and after every
    successful :meth:`mutate`. Concrete variants fix the alphabet; see :class:`DNASequence`,
    :class:`RNASequence` and :class:`ProteinSequence`.
    """

    _sequence: MutableSeq

    def __init__(self, identifier: str, data: str, alphabet: Alphabet):
        """
            Parameters
        ----------
            identifier
                Sequence name. Never checked against the alphabet.
            data
                The initial contents of the sequence
            alphabet
                Alphabet

        Raises
        ------
            InvalidAlphabetError
                If ``data`` contains a character outside of ``alphabet``.
        """
        ObjectValidation.require_symbols_in_alphabet(data, alphabet)
        self._identifier = identifier
        self._alphabet = alphabet
        self._sequence = MutableSeq(data)

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def sequence(self) -> Seq:
        """Returns an immutable copy of the symbols. Edits go through :meth:`mutate`."""
        return Seq(str(self._sequence))

    @property
    def symbols(self) -> str:
        return str(self._sequence)

    @property
    def length(self) -> int:
        return len(self._sequence)

    @property
    def is_empty(self) -> bool:
        """Is this a len 0 sequence?"""
        return len(self._sequence) == 0

    def __len__(self):
        return len(self._sequence)

    def __eq__(self, other):
        if not isinstance(other, BioSequence):
            return False
        return self.kind == other.kind and self.identifier == other.identifier and self.symbols == other.symbols

    # symbols change in place, so instances cannot be hashed
    __hash__ = None

    def __str__(self):
        return self.render()

    def __repr__(self):
        return "<{}>".format(self.summary())

    def summary(self) -> str:
        """Returns a short string summary of this Sequence"""
        return "{}: {};\n  Alphabet={};\n  Length={}".format(
            type(self).__name__, self.identifier, self.alphabet.name, len(self)
        )

    def render(self) -> str:
        """Returns the display form of this sequence: ``>`` followed by the identifier, a newline, then the symbols"""
        return ">{}\n{}".format(self.identifier, self.symbols)

    def to_fasta(self, num_chars: Optional[int] = 60) -> str:
        """Returns a FASTA-formatted string for this sequence. These are line-broken every num_chars.

        Parameters
        ----------
        num_chars:
            Number of characters per line. Defaults to 60, which is the same as BioPython.
        """
        if self.is_empty:
            raise EmptySequenceFastaError("Cannot write FASTA for empty Sequence")

        symbols = self.symbols
        r = [f">{self.identifier}"]
        for i in range(0, len(symbols), num_chars):
            r.append(symbols[i : i + num_chars])
        return "\n".join(r)

    def to_dict(self) -> Dict[str, str]:
        return dict(identifier=self.identifier, symbols=self.symbols, kind=self.kind.name)

    def mutate(self, position: int, value: str):
        """Replaces the symbol at ``position`` with ``value``.

        Both arguments are checked before anything is written, so a failed call leaves the sequence unchanged.

        Parameters
        ----------
        position
            0-based index into the current symbols. Negative indices are rejected.
        value
            Replacement character, which must be part of this sequence's alphabet.

        Raises
        ------
        PositionOutOfRangeError
            If ``position`` is not in ``[0, len(self))``.
        InvalidCharacterError
            If ``value`` is not a single character of the alphabet.
        """
        ObjectValidation.require_position_in_range(position, len(self))
        ObjectValidation.require_character_in_alphabet(value, self.alphabet)
        self._sequence[position] = value

    def find_motif(self, motif: str) -> int:
        """Returns the 0-based position of the leftmost occurrence of ``motif``, or -1 if it does not occur.

        The search is purely textual; ``motif`` is not checked against the alphabet.
        """
        return self.symbols.find(motif)


class NucleotideSequence(BioSequence):
    """Base for sequences that have a base-pairing complement"""

    def complement(self) -> str:
        """Returns the base-pairing complement of this sequence, position by position.

        Characters without a partner are passed through unchanged.
        """
        complement_map = ALPHABET_TO_NUCLEOTIDE_COMPLEMENT[self.alphabet]
        return "".join(complement_map.get(c, c) for c in self.symbols)

    def reverse_complement(self) -> str:
        """Returns the complement of this sequence read in the opposite direction"""
        return self.complement()[::-1]


class DNASequence(NucleotideSequence):
    def __init__(self, identifier: str, data: str):
        super().__init__(identifier, data, Alphabet.DNA)

    @property
    def kind(self) -> SequenceKind:
        return SequenceKind.DNA

    def transcribe(self) -> "RNASequence":
        """Returns a new RNASequence with the same identifier, where every T has been replaced by U.
        This sequence is not modified."""
        logger.debug(f"Transcribing DNA sequence {self.identifier} of length {len(self)}")
        return RNASequence(self.identifier, str(Seq(self.symbols).transcribe()))


class RNASequence(NucleotideSequence):
    def __init__(self, identifier: str, data: str):
        super().__init__(identifier, data, Alphabet.RNA)

    @property
    def kind(self) -> SequenceKind:
        return SequenceKind.RNA

    def iter_codons(self) -> Iterator[str]:
        """Yields consecutive groups of three symbols, left to right. If the length is not a multiple of three,
        the final group is shorter."""
        symbols = self.symbols
        for i in range(0, len(symbols), CODON_LENGTH):
            yield symbols[i : i + CODON_LENGTH]

    def transcribe(self) -> "ProteinSequence":
        """Returns a new ProteinSequence with the same identifier and one residue per codon.

        This is a simplified translation: every codon, including a trailing partial codon, becomes
        :data:`PLACEHOLDER_AMINO_ACID` regardless of its content.
        """
        logger.debug(f"Transcribing RNA sequence {self.identifier} of length {len(self)}")
        return ProteinSequence(self.identifier, "".join(PLACEHOLDER_AMINO_ACID for _ in self.iter_codons()))


class ProteinSequence(BioSequence):
    def __init__(self, identifier: str, data: str):
        super().__init__(identifier, data, Alphabet.PROTEIN)

    @property
    def kind(self) -> SequenceKind:
        return SequenceKind.PROTEIN


SEQUENCE_KIND_TO_CLASS = {
    SequenceKind.DNA: DNASequence,
    SequenceKind.RNA: RNASequence,
    SequenceKind.PROTEIN: ProteinSequence,
}


def make_sequence(kind: Union[SequenceKind, str], identifier: str, data: str) -> BioSequence:
    """Builds the sequence variant named by ``kind``.

    Args:
        kind: A :class:`SequenceKind`, or the name or value of one.
        identifier: Sequence name.
        data: Initial symbols.

    Returns:
        A :class:`DNASequence`, :class:`RNASequence` or :class:`ProteinSequence`.

    Raises:
        ValueError if ``kind`` does not name a SequenceKind.
    """
    return SEQUENCE_KIND_TO_CLASS[SequenceKind.sequence_kind_str_to_kind(kind)](identifier, data)
