from Bio.Seq import Seq


def reverse_complement(dna: str) -> str:
    """Return the IUPAC reverse complement of ``dna`` in uppercase."""
    return str(Seq(dna.upper()).reverse_complement())


def is_palindrome(dna: str) -> bool:
    """Whether the whole sequence reads the same as its reverse complement (e.g. GAATTC)."""
    return dna.upper() == reverse_complement(dna)
