"""
Unit tests for the generate_personnummer command.
"""

from idsynth.scripts.generate_personnummer import main
from idsynth.swedish import is_valid_swedish_ssn


class TestValidate:
    """Tests for --validate."""

    def test_valid_number(self, capsys):
        assert main(["--validate", "121212-1212"]) == 0
        assert "121212-1212\tVALID" in capsys.readouterr().out

    def test_invalid_number_reports_reason(self, capsys):
        assert main(["--validate", "121212-1212", "000101-0000"]) == 1
        out = capsys.readouterr().out
        assert "000101-0000\tINVALID (serial)" in out


class TestGenerate:
    """Tests for number generation."""

    def test_valid_numbers(self, capsys):
        assert main(["--count", "3", "--seed", "7"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        for line in lines:
            number, birth_date, gender = line.split("\t")
            assert is_valid_swedish_ssn(number)
            assert gender in ("MALE", "FEMALE")

    def test_invalid_numbers(self, capsys):
        assert main(["--count", "3", "--invalid", "--seed", "7"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        assert not any(is_valid_swedish_ssn(line) for line in lines)

    def test_gender_option(self, capsys):
        assert main(["--count", "5", "--gender", "FEMALE", "--seed", "1"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert all(line.endswith("\tFEMALE") for line in lines)

    def test_count_out_of_range(self, capsys):
        assert main(["--count", "0"]) == 2

    def test_bad_age_range(self, capsys):
        assert main(["--min-age", "50", "--max-age", "10"]) == 2
        assert "ERROR" in capsys.readouterr().out
