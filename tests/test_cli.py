import io

import pytest

from lz78_encoding.cli import main
from lz78_encoding.reporter import pack_factors
from lz78_encoding.factor import Factor


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"abababab")
    return path


class TestCli:
    def test_encode_file_to_file(self, source, tmp_path, capsys):
        target = tmp_path / "out.txt"
        assert main([str(source), "-o", str(target)]) == 0
        assert target.read_bytes() == b"a0\nb0\nb1\na3\n"
        err = capsys.readouterr().err
        assert "encode:      8 bytes input" in err
        assert "encode:      4 factors generated" in err

    def test_flush_tail(self, source, tmp_path):
        target = tmp_path / "out.txt"
        assert main([str(source), "-o", str(target), "--flush-tail", "-d", "linear"]) == 0
        assert target.read_bytes() == b"a0\nb0\nb1\na3\nb0\n"

    def test_packed(self, source, tmp_path):
        target = tmp_path / "out.bin"
        assert main([str(source), "-o", str(target), "--format", "packed", "-d", "tree"]) == 0
        expected = pack_factors([Factor(97, 0), Factor(98, 0), Factor(98, 1), Factor(97, 3)])
        assert target.read_bytes() == expected

    def test_stdin_to_stdout(self, monkeypatch, capsysbinary):
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"aaaaaaaa")))
        assert main(["-d", "dense-trie"]) == 0
        captured = capsysbinary.readouterr()
        assert captured.out == b"a0\na1\na2\n"
        assert b"3 factors generated" in captured.err

    def test_timing(self, source, tmp_path, capsys):
        assert main([str(source), "-o", str(tmp_path / "out"), "--timing"]) == 0
        err_lines = capsys.readouterr().err.splitlines()
        assert err_lines[-1].endswith("s")

    def test_missing_input(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.txt")]) == 1
        assert capsys.readouterr().err.startswith("Error:")

    def test_unknown_backend(self, source):
        with pytest.raises(SystemExit) as exc:
            main([str(source), "-d", "hash"])
        assert exc.value.code == 2
