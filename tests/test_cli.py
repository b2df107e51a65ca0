"""
Tests for the command-line interface.
"""

import json

import pytest
from click.testing import CliRunner

from fitflow.cli import cli

from conftest import START_UNIX


@pytest.fixture
def runner():
    """Click test runner."""
    return CliRunner()


class TestHeaderCommand:
    """Test the header command."""

    def test_prints_header(self, runner, activity_file):
        """Test header fields are listed."""
        result = runner.invoke(cli, ['header', str(activity_file)])

        assert result.exit_code == 0
        assert "header_size: 14" in result.output
        assert "data_type: .FIT" in result.output

    def test_missing_file(self, runner, tmp_path):
        """Test a missing file exits with status 1."""
        result = runner.invoke(cli, ['header', str(tmp_path / 'missing.fit')])

        assert result.exit_code == 1
        assert "does not exist" in result.output


class TestDecodeCommand:
    """Test the decode command."""

    def test_json_output(self, runner, activity_file):
        """Test the full table printed as JSON."""
        result = runner.invoke(cli, ['decode', str(activity_file), '--units', 'raw'])

        assert result.exit_code == 0
        output = json.loads(result.output)
        assert output['session']['sport'] == 2
        assert output['record']['distance'][str(START_UNIX + 4)] == 20.0

    def test_single_message(self, runner, activity_file):
        """Test --message limits the output."""
        result = runner.invoke(cli, ['decode', str(activity_file), '-m', 'record', '-f', 'all'])

        assert result.exit_code == 0
        record = json.loads(result.output)
        assert len(record['heart_rate']) == 5
        assert record['distance'][str(START_UNIX + 4)] == 0.02

    def test_absent_message(self, runner, activity_file):
        """Test asking for a message the file lacks."""
        result = runner.invoke(cli, ['decode', str(activity_file), '-m', 'hrv'])
        assert result.exit_code == 1

    def test_invalid_units(self, runner, activity_file):
        """Test click rejects unknown unit systems."""
        result = runner.invoke(cli, ['decode', str(activity_file), '--units', 'imperial'])
        assert result.exit_code == 2

    def test_corrupt_file(self, runner, tmp_path):
        """Test decode errors exit with status 1."""
        path = tmp_path / 'broken.fit'
        path.write_bytes(b'\x0e\x20' + b'\x00' * 20)

        result = runner.invoke(cli, ['decode', str(path)])
        assert result.exit_code == 1
        assert "❌" in result.output


class TestInfoCommand:
    """Test the info command."""

    def test_summary(self, runner, activity_file):
        """Test the activity summary."""
        result = runner.invoke(cli, ['info', str(activity_file)])

        assert result.exit_code == 0
        assert "manufacturer: Garmin" in result.output
        assert "sport: Cycling" in result.output
        assert "records: 5" in result.output
        assert "record:" in result.output
