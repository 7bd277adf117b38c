class BioSeqKitException(Exception):
    """
    Base exception class for BioSeqKit.
    """

    pass


class ValidationException(BioSeqKitException):
    """
    Raised when object constructors or mutators are given characters that violate an Alphabet.
    """

    pass


class InvalidAlphabetError(ValidationException):
    """
    Raised when a Sequence is constructed from data containing characters outside of its Alphabet.
    """

    pass


class InvalidCharacterError(ValidationException):
    """
    Raised when a mutation would write a character that is not part of the Sequence Alphabet.
    """

    pass


class InvalidPositionException(BioSeqKitException):
    """
    Raised when a position is outside of a valid range for the operation being performed.
    """

    pass


class PositionOutOfRangeError(InvalidPositionException):
    """
    Raised when a mutation targets a position that is not a valid index into the current symbols.
    """

    pass


class EmptySequenceFastaError(BioSeqKitException):
    """
    Raised when FASTA export is attempted on an empty Sequence object.
    """

    pass


class EmptyPolynomialError(BioSeqKitException):
    """
    Raised when a Polynomial is constructed without any coefficients.
    """

    pass
