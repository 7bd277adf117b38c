"""
I/O exceptions.
"""
from bioseqkit.exc import BioSeqKitException


class BioSeqKitIOException(BioSeqKitException):
    pass


class InvalidInputError(BioSeqKitIOException):
    pass


class DuplicateSequenceException(BioSeqKitIOException):
    pass
