import pytest

from bioseqkit import SequenceKind
from bioseqkit.sequence import DNASequence, RNASequence, ProteinSequence


class TestDNASequence:
    @pytest.mark.parametrize(
        "data,expected",
        [
            ("ATGC", "TACG"),
            ("ATTC", "TAAG"),
            ("", ""),
            ("AAAA", "TTTT"),
        ],
    )
    def test_complement(self, data, expected):
        seq = DNASequence("id", data)
        assert seq.complement() == expected
        assert seq.symbols == data

    @pytest.mark.parametrize("data", ["ATGC", "GATTACA", "CCCGGGAT", ""])
    def test_complement_twice(self, data):
        once = DNASequence("id", data).complement()
        assert DNASequence("id", once).complement() == data

    def test_reverse_complement(self):
        assert DNASequence("id", "AATGC").reverse_complement() == "GCATT"

    @pytest.mark.parametrize(
        "data,expected",
        [
            ("ATGC", "AUGC"),
            ("TTTT", "UUUU"),
            ("GCGC", "GCGC"),
            ("", ""),
        ],
    )
    def test_transcribe(self, data, expected):
        dna = DNASequence("DNA1", data)
        rna = dna.transcribe()
        assert isinstance(rna, RNASequence)
        assert rna.kind == SequenceKind.RNA
        assert rna.identifier == "DNA1"
        assert rna.symbols == expected
        assert dna.symbols == data

    def test_transcribe_returns_independent_object(self, dna):
        rna = dna.transcribe()
        dna.mutate(0, "G")
        assert rna.symbols == "AUGC"
        rna.mutate(0, "C")
        assert dna.symbols == "GTGC"


class TestRNASequence:
    @pytest.mark.parametrize(
        "data,expected",
        [
            ("AUUC", "UAAG"),
            ("AUGC", "UACG"),
            ("", ""),
        ],
    )
    def test_complement(self, data, expected):
        assert RNASequence("id", data).complement() == expected

    @pytest.mark.parametrize("data", ["AUGC", "GAUUACA", ""])
    def test_complement_twice(self, data):
        once = RNASequence("id", data).complement()
        assert RNASequence("id", once).complement() == data

    def test_reverse_complement(self):
        assert RNASequence("id", "AAUGC").reverse_complement() == "GCAUU"

    @pytest.mark.parametrize(
        "data,expected",
        [
            ("AUUC", ["AUU", "C"]),
            ("AUGGCC", ["AUG", "GCC"]),
            ("AU", ["AU"]),
            ("", []),
        ],
    )
    def test_iter_codons(self, data, expected):
        assert list(RNASequence("id", data).iter_codons()) == expected

    @pytest.mark.parametrize(
        "data,expected",
        [
            ("AUUC", "AA"),
            ("AUG", "A"),
            ("AUGGCCUAA", "AAA"),
            ("AUGGCCUAAG", "AAAA"),
            ("A", "A"),
            ("", ""),
        ],
    )
    def test_transcribe(self, data, expected):
        rna = RNASequence("RNA1", data)
        protein = rna.transcribe()
        assert isinstance(protein, ProteinSequence)
        assert protein.kind == SequenceKind.PROTEIN
        assert protein.identifier == "RNA1"
        assert protein.symbols == expected
        assert len(protein) == -(-len(data) // 3)
        assert rna.symbols == data

    def test_transcribe_shared_fixture(self, rna):
        assert rna.transcribe().symbols == "AA"
        assert rna.symbols == "AUUC"


class TestProteinSequence:
    def test_terminal(self):
        protein = ProteinSequence("p", "MKV")
        assert not hasattr(protein, "transcribe")
        assert not hasattr(protein, "complement")
        assert not protein.alphabet.is_nucleotide_alphabet()


def test_scenario():
    dna = DNASequence("DNA1", "ATGC")
    assert dna.render() == ">DNA1\nATGC"
    assert len(dna) == 4

    dna.mutate(2, "T")
    assert dna.symbols == "ATTC"
    assert dna.find_motif("TT") == 1
    assert dna.find_motif("GGG") == -1
    assert dna.complement() == "TAAG"

    rna = dna.transcribe()
    assert rna.symbols == "AUUC"
    assert rna.complement() == "UAAG"

    protein = rna.transcribe()
    assert protein.symbols == "AA"
    assert protein.render() == ">DNA1\nAA"
