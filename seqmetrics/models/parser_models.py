from dataclasses import dataclass, field
from typing import Optional


@dataclass
class SequenceRecord:
    id: str
    description: str
    sequence: str
    length: int


@dataclass
class FastaReadResult:
    success: bool
    path: str
    count: int = 0
    sequences: dict[str, str] = field(default_factory=dict)
    records: list[SequenceRecord] = field(default_factory=list)
    duplicate_ids: list[str] = field(default_factory=list)
    error: Optional[str] = None
