"""Test the ninebit command line interface."""

import io

import pytest
from PIL import Image

from ninebit.cli import main


@pytest.fixture
def red_png(tmp_path):
    path = tmp_path / "red.png"
    Image.new("RGB", (40, 40), (255, 0, 0)).save(path)
    return path


class TestEncodeCommand:
    """Test `ninebit encode`."""

    def test_encode_to_stdout(self, red_png, capsys):
        """Test the table goes to stdout and the stats to stderr."""
        assert main(["encode", str(red_png)]) == 0

        out, err = capsys.readouterr()
        lines = out.strip().split("\n")
        assert len(lines) == 20
        assert lines[0].split() == ["111000000"] * 20
        assert "Rows: 20  Columns: 20  Total codes: 400" in err

    def test_encode_to_file_with_preview(self, red_png, tmp_path, capsys):
        """Test writing the table and a scaled preview image to files."""
        table_path = tmp_path / "table.txt"
        preview_path = tmp_path / "preview.png"

        code = main([
            "encode", str(red_png), "--size", "24", "--fit", "cover",
            "-o", str(table_path), "--preview", str(preview_path), "--preview-scale", "2",
        ])

        assert code == 0
        assert capsys.readouterr().out == ""
        assert len(table_path.read_text().splitlines()) == 24
        with Image.open(preview_path) as preview:
            assert preview.size == (48, 48)
            assert preview.convert("RGB").getpixel((0, 0)) == (255, 0, 0)

    def test_encode_rejects_size_out_of_range(self, red_png, capsys):
        """Test sizes outside the allowed range exit with an error."""
        assert main(["encode", str(red_png), "--size", "5"]) == 1
        assert "target_size out of range" in capsys.readouterr().err

    def test_encode_missing_image(self, tmp_path, capsys):
        """Test a missing source image exits with an error."""
        assert main(["encode", str(tmp_path / "nope.png")]) == 1
        assert "Error: Could not load image" in capsys.readouterr().err


class TestDecodeCommand:
    """Test `ninebit decode`."""

    def test_decode_file(self, tmp_path, capsys):
        """Test rendering a table file with CRLF endings and a bad token."""
        table_path = tmp_path / "table.txt"
        table_path.write_text("111000000 000111000\r\n\r\n000000111 oops\r\n")
        out_path = tmp_path / "art.png"

        assert main(["decode", str(table_path), "-o", str(out_path), "--scale", "4"]) == 0

        with Image.open(out_path) as image:
            assert image.size == (8, 8)
            assert image.getpixel((0, 0)) == (255, 0, 0)
            assert image.getpixel((7, 7)) == (255, 255, 255)
        assert "Rendered 2x2" in capsys.readouterr().err

    def test_decode_stdin(self, tmp_path, monkeypatch, capsys):
        """Test reading the table from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("000000000 111111111\n"))
        out_path = tmp_path / "art.png"

        assert main(["decode", "-o", str(out_path)]) == 0
        with Image.open(out_path) as image:
            assert image.size == (2, 1)

    def test_decode_empty_input(self, tmp_path, monkeypatch, capsys):
        """Test input without codes exits with an error and writes nothing."""
        monkeypatch.setattr("sys.stdin", io.StringIO("\n\n"))

        assert main(["decode", "-o", str(tmp_path / "art.png")]) == 1
        assert "No codes found" in capsys.readouterr().err
        assert not (tmp_path / "art.png").exists()


def test_no_command_prints_help(capsys):
    """Test running without a command prints usage and fails."""
    assert main([]) == 1
    assert "encode" in capsys.readouterr().out
