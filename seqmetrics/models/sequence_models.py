from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..constants.constants import *
from ..tools.bio.alphabet import (
    AlphabetError,
    find_invalid_symbols,
    normalize_sequence,
    validate,
)


@dataclass(frozen=True)
class NucleotideSequence:
    """A named DNA sequence, uppercased and checked against the IUPAC alphabet."""

    sequence_id: str
    sequence: str

    def __post_init__(self) -> None:
        normalized = normalize_sequence(self.sequence)
        if not validate(normalized):
            raise AlphabetError(self.sequence_id, find_invalid_symbols(normalized))
        object.__setattr__(self, "sequence", normalized)

    def __len__(self) -> int:
        return len(self.sequence)


@dataclass(frozen=True)
class RnaSequence:
    sequence_id: str
    sequence: str

    def __len__(self) -> int:
        return len(self.sequence)


@dataclass(frozen=True)
class ProteinSequence:
    sequence_id: str
    residues: str

    def __len__(self) -> int:
        return len(self.residues)


class DiagnosticType(Enum):
    ALPHABET_ERROR = "alphabet_error"
    EMPTY_BATCH = "empty_batch"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class AnalysisResult:
    sequence_id: str
    dna: str
    rna: str
    protein: str
    molecular_weight: float
    is_palindrome: bool

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class Diagnostic:
    error_type: DiagnosticType
    message: str
    sequence_id: Optional[str] = None
    details: Optional[str] = None

    @property
    def success(self) -> bool:
        return False


AnalysisOutcome = Union[AnalysisResult, Diagnostic]


@dataclass
class BatchSummary:
    analyzed: int = 0
    failed: int = 0
    skipped: int = 0
    palindromes: int = 0
    total_weight: float = EMPTY_WEIGHT

    @property
    def success_rate(self) -> str:
        total = self.analyzed + self.failed + self.skipped
        if total == 0:
            return "0%"
        return f"{(self.analyzed / total * PERCENTAGE_MULTIPLIER):.1f}%"
