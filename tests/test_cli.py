"""Tests for the syxident command line interface."""

from typer.testing import CliRunner

from cli.app import app

from conftest import build_message, build_wavestation_payload

runner = CliRunner()


class TestIdentify:
    """Test cases for the identify command."""

    def test_plain_output(self, syx_file):
        result = runner.invoke(app, ["identify", str(syx_file), "--plain"])

        assert result.exit_code == 0
        assert "Found 3 System Exclusive messages in the same file" in result.output
        assert "Message #1:" in result.output
        assert "000002: Channel no.: 4 [03]" in result.output
        assert "Machine ID no.: K4/K4r" in result.output
        assert "Single Patch Dump: bank 1, patch 5" in result.output
        assert "Checksums match" in result.output
        assert "Can't handle SysEx for Roland yet" in result.output

    def test_bytes_option_truncates_dump(self, tmp_path, k4_message):
        path = tmp_path / "k4.syx"
        path.write_bytes(k4_message)

        result = runner.invoke(app, ["identify", str(path), "--plain", "--bytes", "2"])

        assert result.exit_code == 0
        assert "Data: 8 bytes [00 01...]" in result.output
        assert "Found" not in result.output

    def test_table_output(self, syx_file):
        result = runner.invoke(app, ["identify", str(syx_file)])

        assert result.exit_code == 0
        assert "Offset" in result.output
        assert "Wavestation" in result.output

    def test_checksum_mismatch_reported(self, tmp_path):
        payload = build_wavestation_payload(0x40, [0x01, 0x05], bytes([0x12]), checksum=0x00)
        path = tmp_path / "bad-checksum.syx"
        path.write_bytes(build_message([0x42], payload))

        result = runner.invoke(app, ["identify", str(path), "--plain"])

        assert result.exit_code == 0
        assert "Checksums don't match" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["identify", str(tmp_path / "missing.syx")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_no_complete_messages(self, tmp_path):
        path = tmp_path / "empty.syx"
        path.write_bytes(bytes([0xF0, 0x42, 0x30]))

        result = runner.invoke(app, ["identify", str(path)])

        assert result.exit_code == 0
        assert "No System Exclusive messages found" in result.output


class TestMessages:
    """Test cases for the messages command."""

    def test_lists_messages(self, syx_file):
        result = runner.invoke(app, ["messages", str(syx_file)])

        assert result.exit_code == 0
        assert "Kawai" in result.output
        assert "Korg" in result.output
        assert "Unsupported" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["messages", str(tmp_path / "missing.syx")])
        assert result.exit_code == 1


class TestVersion:
    """Test cases for version output."""

    def test_version_command(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output
