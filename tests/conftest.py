import pytest

from bioseqkit.sequence import DNASequence, RNASequence


@pytest.fixture
def dna() -> DNASequence:
    return DNASequence("DNA1", "ATGC")


@pytest.fixture
def rna() -> RNASequence:
    return RNASequence("RNA1", "AUUC")
