import pytest

from seqmetrics.cli import main

FASTA = """>ecori EcoRI recognition site
GAATTC
>start
ATG
"""


@pytest.fixture
def fasta_file(tmp_path):
    path = tmp_path / "sequences.fasta"
    path.write_text(FASTA)
    return path


def test_analyze_file(fasta_file, capsys):
    exit_code = main([str(fasta_file)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert f"Selected file: {fasta_file}" in out
    assert "Analyzing sequences..." in out
    assert "Processing sequence: ecori" in out
    assert "Protein Sequence: EF" in out
    assert "Palindrome detected." in out
    assert "Processing sequence: start" in out
    assert "Molecular Weight: 149.21 Da" in out
    assert "No palindrome detected." in out
    assert "Success rate: 100.0%" in out


def test_invalid_sequence_sets_exit_code(tmp_path, capsys):
    path = tmp_path / "bad.fasta"
    path.write_text(">good\nATG\n>bad\nATGZ\n")

    exit_code = main(["--no-summary", str(path)])

    out = capsys.readouterr().out
    assert exit_code == 1
    assert "Error: Invalid sequence format for sequence: bad" in out
    assert "Protein Sequence: M" in out
    assert "Summary" not in out


def test_missing_file_is_reported(tmp_path, fasta_file, capsys):
    exit_code = main([str(tmp_path / "nope.fasta"), str(fasta_file), "--jobs", "2"])

    out = capsys.readouterr().out
    assert exit_code == 1
    assert "Error: Failed to read FASTA file" in out
    assert "Processing sequence: ecori" in out


def test_empty_file_is_reported(tmp_path, capsys):
    path = tmp_path / "empty.fasta"
    path.write_text("")

    assert main([str(path)]) == 1
    assert "Error: Invalid sequences" in capsys.readouterr().out


@pytest.mark.parametrize("jobs", ["0", "-2", "many"])
def test_jobs_must_be_positive(fasta_file, jobs, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--jobs", jobs, str(fasta_file)])

    assert excinfo.value.code == 2
    assert "--jobs" in capsys.readouterr().err
