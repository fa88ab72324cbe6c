import logging
from pathlib import Path
from typing import Optional, Union

from Bio import SeqIO

from ...constants.constants import *
from ...models.parser_models import FastaReadResult, SequenceRecord
from ...settings import settings

logger = logging.getLogger(__name__)


def read_fasta_sequences(
    path: Union[str, Path], file_format: Optional[str] = None
) -> FastaReadResult:
    """Read a FASTA file into an ordered mapping of record id to raw sequence.

    Record ids are taken from Biopython (the first word of each header). When
    an id repeats, the first record wins and the duplicate is logged.
    """
    file_format = file_format or settings.fasta_format
    path = Path(path)

    try:
        records = _load_records(path, file_format)
    except (OSError, ValueError) as e:
        error = FASTA_READ_FAILED_TEMPLATE.format(path=path, error=e)
        logger.error(error)
        return FastaReadResult(success=False, path=str(path), error=error)

    sequences: dict[str, str] = {}
    duplicate_ids: list[str] = []
    for record in records:
        if record.id in sequences:
            logger.warning(f"Duplicate record id {record.id!r} in {path}, keeping the first one")
            duplicate_ids.append(record.id)
            continue
        sequences[record.id] = record.sequence

    logger.info(f"Read {len(sequences)} sequence(s) from {path}")
    return FastaReadResult(
        success=True,
        path=str(path),
        count=len(sequences),
        sequences=sequences,
        records=records,
        duplicate_ids=duplicate_ids,
    )


def _load_records(path: Path, file_format: str) -> list[SequenceRecord]:
    with path.open("r") as handle:
        return [
            SequenceRecord(
                id=record.id,
                description=record.description,
                sequence=str(record.seq),
                length=len(record.seq),
            )
            for record in SeqIO.parse(handle, file_format)
        ]
