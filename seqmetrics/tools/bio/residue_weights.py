from types import MappingProxyType
from typing import Union

from Bio.Data.IUPACData import protein_letters, protein_weights

from ...constants.constants import *
from ...models.sequence_models import ProteinSequence

# Average masses of the 20 standard free amino acids, in daltons
RESIDUE_WEIGHTS = MappingProxyType({residue: protein_weights[residue] for residue in protein_letters})


def residue_weight(residue: str) -> float:
    return RESIDUE_WEIGHTS.get(residue, EMPTY_WEIGHT)


def total_weight(protein: Union[ProteinSequence, str]) -> float:
    """Sum residue weights left to right; stop and unknown markers weigh nothing."""
    residues = protein.residues if isinstance(protein, ProteinSequence) else protein

    weight = EMPTY_WEIGHT
    for residue in residues:
        weight += residue_weight(residue)
    return weight
