"""
DNA reverse complement with input validation.
"""

import re

# case preserved: A<->T, G<->C
COMPLEMENT = str.maketrans("ATGCatgc", "TACGtacg")
VALID_PATTERN = re.compile(r"^[ATGCatgc]+$")


class ValidationError(ValueError):
    """Bad sequence input"""


class EmptyInputError(ValidationError):
    def __init__(self):
        super().__init__("Please enter a DNA sequence")


class InvalidCharactersError(ValidationError):
    def __init__(self, invalid_chars):
        self.invalid_chars = invalid_chars
        super().__init__(
            f"Sequence can only contain the letters A, T, G, C. Invalid characters: {', '.join(invalid_chars)}"
        )


def validate_sequence(seq: str) -> str:
    """Strip surrounding whitespace and check bases.

    >>> validate_sequence("  ATcg\\n")
    'ATcg'
    """
    seq = seq.strip()
    if not seq:
        raise EmptyInputError()
    if not VALID_PATTERN.match(seq):
        invalid = sorted(set(seq) - set("ATGCatgc"))
        raise InvalidCharactersError([repr(c) if c.isspace() else c for c in invalid])
    return seq


def complement(seq: str) -> str:
    """Complement of a validated sequence, order kept.

    >>> complement("ATCGATCG")
    'TAGCTAGC'
    """
    return seq.translate(COMPLEMENT)


def reverse_complement(seq: str) -> str:
    """Returns the reverse complement of a DNA sequence.

    >>> reverse_complement("ATCGATCG")
    'CGATCGAT'
    >>> reverse_complement("AtCg")
    'cGaT'
    """
    seq = validate_sequence(seq)
    return complement(seq)[::-1]
