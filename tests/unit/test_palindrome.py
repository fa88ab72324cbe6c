import pytest
from Bio.Seq import Seq
from hypothesis import given
from hypothesis import strategies as st

from seqmetrics.tools.bio.palindrome import is_palindrome, reverse_complement

IUPAC_DNA = "ATGCNRYKMSWBDHV"


@pytest.mark.parametrize(
    "dna, expected",
    [("ATG", "CAT"), ("GAATTC", "GAATTC"), ("gaattc", "GAATTC"), ("ARN", "NYT"), ("ATGNRYKMSWBDHV", "BDHVWSKMRYNCAT"), ("BDKM", "KMHV"), ("", "")],
)
def test_reverse_complement(dna, expected):
    assert reverse_complement(dna) == expected


@pytest.mark.parametrize("dna", ["GAATTC", "gaattc", "GGATCC", "AT", "NN", "RY", "SS", ""])
def test_palindromes(dna):
    assert is_palindrome(dna)


@pytest.mark.parametrize("dna", ["ATG", "AAA", "A", "GAATTG", "RR"])
def test_non_palindromes(dna):
    assert not is_palindrome(dna)


@given(st.text(alphabet=IUPAC_DNA))
def test_reverse_complement_matches_biopython(dna):
    assert reverse_complement(dna) == str(Seq(dna).reverse_complement())


@given(st.text(alphabet=IUPAC_DNA + IUPAC_DNA.lower()))
def test_reverse_complement_is_an_involution(dna):
    assert reverse_complement(reverse_complement(dna)) == dna.upper()


@given(st.text(alphabet=IUPAC_DNA))
def test_palindrome_check_agrees_with_reverse_complement(dna):
    assert is_palindrome(dna) == is_palindrome(reverse_complement(dna))
