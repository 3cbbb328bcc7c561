"""Tests for document and user value types and the clearance rule."""
import dataclasses

import pytest

from docproxy.acls import ClearanceChecker, has_access
from docproxy.models import Document, User


class TestDocument:
    def test_size_is_derived_from_content(self):
        doc = Document("D1", "Title", "héllo", 1)
        assert doc.size_bytes == len("héllo".encode("utf-8"))

    def test_with_content_keeps_other_fields(self):
        doc = Document("D1", "Title", "old", 4)
        new = doc.with_content("brand new text")

        assert new.content == "brand new text"
        assert new.size_bytes == len("brand new text")
        assert (new.id, new.title, new.security_level) == ("D1", "Title", 4)
        assert doc.content == "old"

    def test_is_immutable(self):
        doc = Document("D1", "Title", "x", 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            doc.content = "y"

    def test_negative_security_level_rejected(self):
        with pytest.raises(ValueError):
            Document("D1", "Title", "x", -1)


class TestUser:
    def test_negative_clearance_rejected(self):
        with pytest.raises(ValueError):
            User("bob", -2)

    def test_equality_by_value(self):
        assert User("bob", 1) == User("bob", 1)


class TestClearanceRule:
    @pytest.mark.parametrize(
        "clearance,level,expected",
        [(0, 0, True), (2, 5, False), (5, 5, True), (5, 1, True), (0, 1, False)],
    )
    def test_has_access(self, clearance, level, expected):
        user = User("u", clearance)
        doc = Document("D", "t", "c", level)
        assert has_access(user, doc) is expected
        assert ClearanceChecker().permit(user, doc) is expected
