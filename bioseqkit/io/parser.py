"""
Parse and write the ``>identifier`` / symbols text convention produced by
:meth:`~bioseqkit.sequence.sequence.BioSequence.render`.

Everything here works on strings held in memory; BioSeqKit does not open files.
"""
import logging
from io import StringIO
from typing import Dict, Iterable, Union

from Bio import SeqIO

from bioseqkit import SequenceKind
from bioseqkit.io.exc import DuplicateSequenceException, InvalidInputError
from bioseqkit.sequence.sequence import BioSequence, make_sequence

logger = logging.getLogger(__name__)


def text_to_sequences(text: str, kind: Union[SequenceKind, str] = SequenceKind.DNA) -> Dict[str, BioSequence]:
    """Parser that converts FASTA-style text to a dictionary of sequences, with identifiers as keys.

    Args:
        text: One or more records, each a ``>`` header line followed by symbol lines.
        kind: The variant to build every record as.

    Returns:
        Dictionary mapping the identifier of each record to a :class:`~bioseqkit.sequence.sequence.BioSequence`.
        The whole header line, without the leading ``>``, is used as the identifier. Trailing whitespace on the
        header line is not part of the identifier, so identifiers that end in whitespace do not survive a round
        trip through :func:`sequences_to_text`.

    Raises:
        DuplicateSequenceException if two records share an identifier.
        InvalidInputError if non-empty text does not begin with a header line.
        InvalidAlphabetError if a record contains symbols outside of the alphabet for ``kind``.
    """
    sequences = {}
    if not text.strip():
        return sequences
    if not text.lstrip().startswith(">"):
        raise InvalidInputError("Text must begin with a '>' header line")
    for rec in SeqIO.parse(StringIO(text), format="fasta"):
        if rec.description in sequences:
            raise DuplicateSequenceException(f"Sequence identifier {rec.description} is duplicated")
        sequences[rec.description] = make_sequence(kind, rec.description, str(rec.seq))
    logger.info(f"Parsed {len(sequences)} sequences")
    return sequences


def text_to_sequence(text: str, kind: Union[SequenceKind, str] = SequenceKind.DNA) -> BioSequence:
    """Convenience function for text holding exactly one record.

    Raises:
        InvalidInputError if ``text`` does not contain exactly one record.
    """
    sequences = text_to_sequences(text, kind)
    if len(sequences) != 1:
        raise InvalidInputError(f"Expected exactly one record, found {len(sequences)}")
    return next(iter(sequences.values()))


def sequences_to_text(sequences: Iterable[BioSequence]) -> str:
    """Renders each sequence and joins the records with newlines."""
    return "\n".join(seq.render() for seq in sequences)
