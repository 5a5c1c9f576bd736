"""Unit tests for data models."""

from drivepath.models import (
    Disambiguated,
    ErrorKind,
    Item,
    MultiplePaths,
    NoMatch,
    ResolutionError,
    SingleId,
    SinglePath,
    TooMany,
)


class TestItemFromDict:
    """Tests for Item.from_dict."""

    def test_parent_list(self):
        """Test a snapshot style item with several parents."""
        item = Item.from_dict(
            {"id": "m", "name": "a.txt", "type": "text", "parents": ["z", "y"]}
        )

        assert item.id == "m"
        assert item.parent_ids == ("z", "y")
        assert item.is_folder is False

    def test_parent_ids_key(self):
        """Test the parent_ids key takes precedence."""
        item = Item.from_dict({"id": 1, "name": "a", "parent_ids": [2], "parents": []})

        assert item.parent_ids == ("2",)

    def test_single_parent_id(self):
        """Test an API entry with a numeric parent_id."""
        item = Item.from_dict(
            {"id": 480424796, "name": "Docs", "type": "folder", "parent_id": 480432024}
        )

        assert item.id == "480424796"
        assert item.parent_ids == ("480432024",)
        assert item.is_folder is True

    def test_root_level_parent_id(self):
        """Test that a null or zero parent_id means no parents."""
        item = Item.from_dict({"id": 1, "name": "a", "parent_id": None})
        assert item.parent_ids == ()
        assert Item.from_dict({"id": 1, "name": "a", "parent_id": 0}).parent_ids == ()
        assert Item.from_dict({"id": 1, "name": "a"}).parent_ids == ()

    def test_missing_type_is_not_a_folder(self):
        """Test that a typeless entry is listed as a file."""
        item = Item.from_dict({"id": "7", "name": "notes"})

        assert item.type == "file"
        assert item.is_folder is False


class TestResults:
    """Tests for the result types."""

    def test_success_values(self):
        """Test to_value of successful results."""
        assert SinglePath("Root > X").to_value() == "Root > X"
        assert MultiplePaths(["a", "b"]).to_value() == ["a", "b"]
        assert SingleId("A").to_value() == "A"
        assert Disambiguated(["Root > A"]).to_value() == ["Root > A"]
        assert SinglePath("x").ok is True

    def test_error_kinds(self):
        """Test the default kind of each error type."""
        assert ResolutionError("bad").kind == ErrorKind.INVALID_ARGUMENT
        assert NoMatch("none").kind == ErrorKind.NOT_FOUND
        assert TooMany("many", count=3, limit=2).kind == ErrorKind.LIMIT_EXCEEDED

    def test_error_value_is_message(self):
        """Test that errors render as their message."""
        error = NoMatch("No file named 'x' found")

        assert error.ok is False
        assert error.to_value() == "No file named 'x' found"
        assert str(error) == "No file named 'x' found"

    def test_to_value_returns_copy(self):
        """Test that callers cannot mutate a result through to_value."""
        result = MultiplePaths(["a"])
        result.to_value().append("b")

        assert result.paths == ["a"]
