"""
Tests for time-ordered identifiers.
"""
import uuid

from blogmeta.utils.identifiers import is_identifier, new_identifier, uuid7


class TestUuid7:
    """Version 7 UUID generation."""

    def test_version_and_variant(self):
        """Generated UUIDs are RFC 4122 version 7."""
        value = uuid7()
        assert value.version == 7
        assert value.variant == uuid.RFC_4122

    def test_monotonic(self):
        """Identifiers minted in sequence sort in minting order."""
        values = [str(uuid7()) for _ in range(500)]
        assert values == sorted(values)
        assert len(set(values)) == len(values)

    def test_new_identifier_is_canonical(self):
        """new_identifier returns the hyphenated lowercase form."""
        text = new_identifier()
        assert len(text) == 36
        assert text == text.lower()
        assert is_identifier(text)


class TestIsIdentifier:
    """Recognising identifier stems."""

    def test_any_version_accepted(self):
        """Canonical UUIDs of any version are identifiers."""
        assert is_identifier(str(uuid.uuid4()))
        assert is_identifier("0190B6A4-8F2E-7C1A-9D3B-5E6F7A8B9C0D")

    def test_rejects_other_names(self):
        """Ordinary file stems are not identifiers."""
        assert not is_identifier("hello-world")
        assert not is_identifier("hello.generate")
        assert not is_identifier("")
        assert not is_identifier(str(uuid.uuid4()).replace("-", ""))
