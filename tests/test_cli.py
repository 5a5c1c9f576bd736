"""Unit tests for the drivepath CLI commands."""

import json
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
from click.testing import CliRunner

from drivepath.cli import main
from drivepath.exceptions import DriveAPIError


@pytest.fixture
def runner():
    """Provide a Click CLI test runner."""
    return CliRunner()


class TestMainGroup:
    """Tests for the main CLI group."""

    def test_main_help(self, runner):
        """Test main help shows all commands."""
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "--snapshot" in result.output
        assert "path" in result.output
        assert "file-id" in result.output
        assert "folder-id" in result.output

    def test_requires_api_key_without_snapshot(self, runner):
        """Test that API commands need a configured key."""
        with patch("drivepath.cli.config") as mock_config:
            mock_config.is_configured.return_value = False
            result = runner.invoke(main, ["path", "123"])

        assert result.exit_code == 1
        assert "API key not configured" in result.output


class TestPathCommand:
    """Tests for the path command."""

    def test_single_path(self, runner, snapshot_file):
        """Test printing one path."""
        result = runner.invoke(main, ["-s", str(snapshot_file), "path", "s"])

        assert result.exit_code == 0
        assert result.output.strip() == "Root > X > Z"

    def test_multiple_paths(self, runner, snapshot_file):
        """Test printing one line per parent."""
        result = runner.invoke(main, ["-s", str(snapshot_file), "-q", "path", "m"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["Root > X > Z", "Root > Y"]

    def test_delimiter_option(self, runner, snapshot_file):
        """Test the --delimiter option."""
        result = runner.invoke(
            main, ["-s", str(snapshot_file), "path", "s", "--delimiter", "/"]
        )

        assert result.output.strip() == "Root/X/Z"

    def test_max_paths_exceeded(self, runner, snapshot_file):
        """Test that a limit error exits with status 1."""
        result = runner.invoke(
            main, ["-s", str(snapshot_file), "path", "m", "--max-paths", "1"]
        )

        assert result.exit_code == 1
        assert "2 parent folders" in result.output

    def test_json_output(self, runner, snapshot_file):
        """Test JSON output of a multi-parent item."""
        result = runner.invoke(main, ["-s", str(snapshot_file), "--json", "path", "m"])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "ok": True,
            "result": ["Root > X > Z", "Root > Y"],
        }

    def test_json_error(self, runner, snapshot_file):
        """Test JSON output of an error."""
        result = runner.invoke(
            main, ["-s", str(snapshot_file), "--json", "path", "missing"]
        )

        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"] == "not_found"

    @patch("drivepath.cli.DriveClient")
    def test_api_error(self, mock_client_class, runner):
        """Test that API failures are reported."""
        mock_client = Mock()
        mock_client.get_file_entry.side_effect = DriveAPIError("Server exploded")
        mock_client_class.return_value = mock_client

        result = runner.invoke(main, ["--api-key", "k", "path", "42"])

        assert result.exit_code == 1
        assert "Server exploded" in result.output
        mock_client.close.assert_called_once()

    def test_malformed_snapshot(self, runner, tmp_path):
        """Test that a snapshot item without an ID is reported, not raised."""
        path = tmp_path / "snapshot.json"
        path.write_text(json.dumps({"items": [{"name": "x"}]}), encoding="utf-8")

        result = runner.invoke(main, ["-s", str(path), "path", "x"])

        assert result.exit_code == 1
        assert "Invalid snapshot item" in result.output


class TestIdCommands:
    """Tests for the file-id and folder-id commands."""

    def test_file_id_single(self, runner, snapshot_file):
        """Test a unique file name."""
        result = runner.invoke(main, ["-s", str(snapshot_file), "file-id", "top.txt"])

        assert result.exit_code == 0
        assert result.output.strip() == "top"

    def test_file_id_ambiguous(self, runner, snapshot_file):
        """Test two files sharing a name."""
        result = runner.invoke(main, ["-s", str(snapshot_file), "file-id", "Report"])

        assert result.exit_code == 0
        assert "Several files are named 'Report'" in result.output
        assert "Root > X > A" in result.output
        assert "Root > Y > B" in result.output

    def test_file_id_no_match(self, runner, snapshot_file):
        """Test an unknown file name."""
        result = runner.invoke(main, ["-s", str(snapshot_file), "file-id", "ghost"])

        assert result.exit_code == 1
        assert "ghost" in result.output

    def test_file_id_max_files(self, runner, snapshot_file):
        """Test the --max-files option."""
        result = runner.invoke(
            main, ["-s", str(snapshot_file), "file-id", "Report", "-m", "1"]
        )

        assert result.exit_code == 1
        assert "maximum of 1" in result.output

    def test_folder_id(self, runner, snapshot_file):
        """Test a folder lookup in JSON mode."""
        result = runner.invoke(
            main, ["-s", str(snapshot_file), "--json", "folder-id", "Shared"]
        )

        assert result.exit_code == 0
        assert json.loads(result.output)["result"] == [
            "Root > X > sh1",
            "Root > X > Z > sh2",
        ]

    @patch("drivepath.cli.config")
    @patch("drivepath.cli.DriveClient")
    def test_folder_id_over_api(self, mock_client_class, mock_config, runner):
        """Test a folder lookup through the API backend."""
        mock_config.is_configured.return_value = True
        mock_config.root_name = "Root"
        mock_config.max_results = 10
        mock_client = Mock()
        mock_client.get_file_entries.return_value = {
            "data": [{"id": 5, "name": "Docs", "type": "folder"}],
            "current_page": 1,
            "last_page": 1,
        }
        mock_client_class.return_value = mock_client

        result = runner.invoke(main, ["folder-id", "Docs"])

        assert result.exit_code == 0
        assert result.output.strip() == "5"


class TestInitCommand:
    """Tests for the init command."""

    @patch("drivepath.cli.DriveClient")
    @patch("drivepath.cli.config")
    def test_init_with_valid_api_key(self, mock_config, mock_client_class, runner):
        """Test init with a valid API key."""
        mock_client_class.return_value.__enter__.return_value = Mock()
        mock_config.get_config_path.return_value = Path("/mock/config")

        result = runner.invoke(main, ["init"], input="valid_api_key\n")

        assert result.exit_code == 0
        assert "API key is valid" in result.output
        assert "Configuration saved successfully" in result.output
        mock_config.save_api_key.assert_called_once_with("valid_api_key")

    @patch("drivepath.cli.DriveClient")
    @patch("drivepath.cli.config")
    def test_init_with_invalid_api_key_cancel(
        self, mock_config, mock_client_class, runner
    ):
        """Test init with invalid API key and user cancels."""
        client = mock_client_class.return_value.__enter__.return_value
        client.get_file_entries.side_effect = DriveAPIError("Invalid API key")

        result = runner.invoke(main, ["init"], input="bad_key\nn\n")

        assert result.exit_code == 1
        assert "Invalid API key" in result.output
        assert "Configuration cancelled" in result.output
        mock_config.save_api_key.assert_not_called()

    @patch("drivepath.cli.DriveClient")
    @patch("drivepath.cli.config")
    def test_init_with_invalid_api_key_save_anyway(
        self, mock_config, mock_client_class, runner
    ):
        """Test init with invalid API key but user saves anyway."""
        client = mock_client_class.return_value.__enter__.return_value
        client.get_file_entries.side_effect = DriveAPIError("Invalid API key")
        mock_config.get_config_path.return_value = Path("/mock/config")

        result = runner.invoke(main, ["init"], input="bad_key\ny\n")

        assert result.exit_code == 0
        assert "Configuration saved successfully" in result.output
        mock_config.save_api_key.assert_called_once_with("bad_key")
