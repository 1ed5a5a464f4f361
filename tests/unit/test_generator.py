"""
Unit tests for personnummer generation (test utility).
"""

from datetime import date

import pytest

from personnummer import generate_personnummer, parse


class TestGeneratePersonnummer:
    """Tests for personnummer generation."""

    def test_generate_valid(self):
        """Test that generated personnummer is valid."""
        pnr = parse(generate_personnummer(date(1985, 6, 15)))
        assert pnr.birthday == date(1985, 6, 15)

    def test_generate_correct_gender(self):
        """Test that generated personnummer has correct gender."""
        assert parse(generate_personnummer(date(1995, 1, 1), gender="M")).is_male
        assert parse(generate_personnummer(date(1995, 1, 1), gender="F")).is_female

    def test_generate_coordination_number(self):
        value = generate_personnummer(date(1981, 12, 18), coordination=True)
        assert value[6:8] == "78"
        pnr = parse(value)
        assert pnr.is_coordination_number
        assert pnr.birthday == date(1981, 12, 18)

    def test_generate_birth_number(self):
        assert generate_personnummer(date(1990, 5, 15), gender="F", birth_number=2)[8:11] == "002"
        assert generate_personnummer(date(1990, 5, 15), gender="F", birth_number=999)[8:11] == "998"

    def test_generate_rejects_bad_arguments(self):
        with pytest.raises(ValueError):
            generate_personnummer(date(1990, 5, 15), gender="X")
        with pytest.raises(ValueError):
            generate_personnummer(date(1990, 5, 15), birth_number=1000)
