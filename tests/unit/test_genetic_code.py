import itertools

import pytest
from Bio.Data.CodonTable import standard_rna_table

from seqmetrics.tools.bio.genetic_code import CODON_TABLE, lookup


def test_table_covers_all_unambiguous_codons():
    all_codons = {"".join(c) for c in itertools.product("UCAG", repeat=3)}
    assert set(CODON_TABLE) == all_codons


def test_table_is_the_standard_code_with_stop_markers():
    expected = dict(standard_rna_table.forward_table)
    expected.update(dict.fromkeys(standard_rna_table.stop_codons, "*"))

    assert dict(CODON_TABLE) == expected


@pytest.mark.parametrize("codon", ["UAA", "UAG", "UGA"])
def test_stop_codons(codon):
    assert lookup(codon) == "*"


def test_table_uses_twenty_amino_acids():
    assert len(set(CODON_TABLE.values()) - {"*"}) == 20


def test_table_is_read_only():
    with pytest.raises(TypeError):
        CODON_TABLE["AUG"] = "X"


@pytest.mark.parametrize("codon", ["NNN", "AUN", "RUG", "ATG", "AU", "AUGA", ""])
def test_ambiguous_or_malformed_codons_are_not_found(codon):
    assert lookup(codon) is None


def test_start_codon():
    assert lookup("AUG") == "M"
