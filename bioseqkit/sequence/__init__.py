"""
The :class:`BioSequence` class defines a mutable sequence constrained to an :class:`Alphabet`. The concrete variants
:class:`DNASequence`, :class:`RNASequence` and :class:`ProteinSequence` form a transcription pipeline
DNA -> RNA -> Protein, where each ``transcribe()`` builds a new object of the next variant.
"""

from bioseqkit.sequence.alphabet import Alphabet  # noqa: F401
from bioseqkit.sequence.sequence import (  # noqa: F401
    BioSequence,
    NucleotideSequence,
    DNASequence,
    RNASequence,
    ProteinSequence,
    make_sequence,
)
