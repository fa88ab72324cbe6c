"""Standard genetic code (NCBI translation table 1) over the RNA alphabet.

Only the 64 unambiguous codons are present. Codons containing an IUPAC
ambiguity code are not resolved and look up as ``None``.
"""

from types import MappingProxyType
from typing import Optional

from Bio.Data.CodonTable import standard_rna_table

from ...constants.constants import *

CODON_TABLE = MappingProxyType(
    {
        **standard_rna_table.forward_table,
        **dict.fromkeys(standard_rna_table.stop_codons, STOP_MARKER),
    }
)


def lookup(codon: str) -> Optional[str]:
    return CODON_TABLE.get(codon)
