"""
Data models. These models allow for validation of inputs to a BioSeqKit model, acting as a JSON schema for serializing
and deserializing the models.
"""
from typing import ClassVar, List, Type

from marshmallow import Schema  # noqa: F401
from marshmallow_dataclass import dataclass

from bioseqkit import SequenceKind
from bioseqkit.polynomial import Polynomial
from bioseqkit.sequence.sequence import BioSequence, make_sequence


@dataclass
class BaseModel:
    """Base for all of the models."""

    Schema: ClassVar[Type[Schema]] = Schema  # noqa: F811

    class Meta:
        ordered = True


@dataclass
class SequenceModel(BaseModel):
    """Data model that allows construction of a :class:`~bioseqkit.sequence.sequence.BioSequence` object.

    The ``kind`` field is serialized by member name, for example ``"DNA"``.
    """

    identifier: str
    symbols: str
    kind: SequenceKind = SequenceKind.DNA

    def to_sequence(self) -> BioSequence:
        """Construct the sequence variant named by ``kind``. Raises InvalidAlphabetError for invalid symbols."""
        return make_sequence(self.kind, self.identifier, self.symbols)

    @staticmethod
    def from_sequence(sequence: BioSequence) -> "SequenceModel":
        """Convert a BioSequence to a SequenceModel"""
        return SequenceModel.Schema().load(sequence.to_dict())


@dataclass
class PolynomialModel(BaseModel):
    """Data model that allows construction of a :class:`~bioseqkit.polynomial.Polynomial` object."""

    coefficients: List[float]

    def to_polynomial(self) -> Polynomial:
        return Polynomial(self.coefficients)

    @staticmethod
    def from_polynomial(polynomial: Polynomial) -> "PolynomialModel":
        return PolynomialModel.Schema().load(polynomial.to_dict())
