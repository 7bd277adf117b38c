from typing import Iterable

from bioseqkit.exc import InvalidAlphabetError, InvalidCharacterError, PositionOutOfRangeError


class ObjectValidation:
    @staticmethod
    def require_symbols_in_alphabet(data: Iterable[str], alphabet):
        invalid = set(data) - alphabet.symbols
        if invalid:
            raise InvalidAlphabetError(
                "Invalid characters {} for alphabet {}".format(sorted(invalid), alphabet.name)
            )

    @staticmethod
    def require_character_in_alphabet(char: str, alphabet):
        if not alphabet.contains(char):
            raise InvalidCharacterError("Character {!r} is not allowed by alphabet {}".format(char, alphabet.name))

    @staticmethod
    def require_position_in_range(position: int, length: int):
        if not isinstance(position, int) or isinstance(position, bool) or not 0 <= position < length:
            raise PositionOutOfRangeError("Position {} is outside of range [0, {})".format(position, length))
