"""Tests for display name formatting."""

import pytest

from src.scanner import nicify_variable_name


class TestNicifyVariableName:
    """Test cases for nicify_variable_name."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("m_Material", "Material"),
            ("m_sharedMaterial", "Shared Material"),
            ("_target", "Target"),
            ("kMaxCount", "Max Count"),
            ("healthBar", "Health Bar"),
            ("HTMLParser", "HTML Parser"),
            ("texture2D", "Texture 2D"),
            ("data", "Data"),
            ("spawn_point", "Spawn point"),
        ],
    )
    def test_names(self, name, expected):
        """Test prefixes are stripped and words separated."""
        assert nicify_variable_name(name) == expected

    def test_empty_name(self):
        """Test empty input stays empty."""
        assert nicify_variable_name("") == ""

    def test_keeps_lowercase_k_words(self):
        """Test a leading k is only stripped before an uppercase letter."""
        assert nicify_variable_name("keyFrame") == "Key Frame"
