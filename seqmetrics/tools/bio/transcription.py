from ...constants.constants import *
from ...models.sequence_models import NucleotideSequence, RnaSequence


def transcribe(dna: str) -> str:
    """Substitute U for every T; all other symbols, ambiguity codes included, pass through."""
    return dna.replace(DNA_THYMINE, RNA_URACIL)


def transcribe_sequence(dna: NucleotideSequence) -> RnaSequence:
    return RnaSequence(sequence_id=dna.sequence_id, sequence=transcribe(dna.sequence))
