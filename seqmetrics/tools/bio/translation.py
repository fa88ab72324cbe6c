import logging
from typing import Union

from .genetic_code import lookup
from ...constants.constants import *
from ...models.sequence_models import ProteinSequence, RnaSequence

logger = logging.getLogger(__name__)


def split_codons(rna: str) -> list[str]:
    # Frame 0 only; a trailing partial codon is dropped
    usable_length = len(rna) - len(rna) % CODON_LENGTH
    return [rna[i : i + CODON_LENGTH] for i in range(0, usable_length, CODON_LENGTH)]


def translate(rna: Union[str, RnaSequence], sequence_id: str = "") -> ProteinSequence:
    """Translate an RNA sequence codon by codon into a protein.

    Translation reads the whole sequence: stop codons are recorded as ``*``
    and reading continues past them. Codons missing from the genetic code
    (ambiguity codes, malformed triples) become ``X``.
    """
    if isinstance(rna, RnaSequence):
        sequence_id = sequence_id or rna.sequence_id
        rna = rna.sequence

    residues = []
    for codon in split_codons(rna):
        residue = lookup(codon)
        residues.append(residue if residue is not None else UNKNOWN_RESIDUE)

    protein = "".join(residues)
    dropped = len(rna) % CODON_LENGTH
    if dropped:
        logger.debug(f"Dropped {dropped} trailing base(s) from {sequence_id or UNKNOWN_SEQUENCE_ID}")

    return ProteinSequence(sequence_id=sequence_id, residues=protein)
