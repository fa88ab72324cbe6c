from ...constants.constants import *


class AlphabetError(ValueError):
    """Raised when a nucleotide sequence holds symbols outside the IUPAC alphabet."""

    def __init__(self, sequence_id: str, invalid_symbols: list[tuple[int, str]]):
        self.sequence_id = sequence_id
        self.invalid_symbols = invalid_symbols
        super().__init__(
            f"Sequence {sequence_id or UNKNOWN_SEQUENCE_ID} contains "
            f"{len(invalid_symbols)} invalid symbol(s): {describe_invalid_symbols(invalid_symbols)}"
        )


def normalize_sequence(sequence: str) -> str:
    return sequence.upper()


def validate(sequence: str) -> bool:
    """Return True if every symbol of ``sequence`` is an IUPAC nucleotide code.

    The check is case-insensitive and never raises; the empty sequence is
    valid.
    """
    return all(base in VALID_NUCLEOTIDES for base in normalize_sequence(sequence))


def find_invalid_symbols(sequence: str) -> list[tuple[int, str]]:
    return [
        (position, base)
        for position, base in enumerate(normalize_sequence(sequence))
        if base not in VALID_NUCLEOTIDES
    ]


def describe_invalid_symbols(invalid_symbols: list[tuple[int, str]]) -> str:
    shown = [
        f"{base!r} at position {position}"
        for position, base in invalid_symbols[:INVALID_SYMBOL_PREVIEW_LIMIT]
    ]
    hidden = len(invalid_symbols) - len(shown)
    if hidden > 0:
        shown.append(f"and {hidden} more")
    return ", ".join(shown)
