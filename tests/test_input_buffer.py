import io

import pytest

from lz78_encoding.input_buffer import InputBuffer


class TestInputBuffer:
    def test_from_stream_reads_everything(self):
        data = bytes(range(256)) * 200  # several doubling reads
        buffer = InputBuffer.from_stream(io.BytesIO(data))
        assert len(buffer) == len(data)
        assert bytes(buffer) == data

    def test_from_empty_stream(self):
        buffer = InputBuffer.from_stream(io.BytesIO(b""))
        assert len(buffer) == 0
        assert buffer.alphabet_range is None

    def test_from_file(self, tmp_path):
        path = tmp_path / "input.bin"
        path.write_bytes(b"hello\x00world")
        buffer = InputBuffer.from_file(str(path))
        assert bytes(buffer) == b"hello\x00world"

    def test_from_empty_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_bytes(b"")
        assert len(InputBuffer.from_file(str(path))) == 0

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            InputBuffer.from_file(str(tmp_path / "nope"))

    def test_view_is_read_only(self):
        view = InputBuffer(b"abc").view()
        assert view.readonly
        with pytest.raises(TypeError):
            view[0] = 1

    def test_alphabet_range(self):
        assert InputBuffer(b"hello").alphabet_range == (ord("e"), ord("o"))
        assert InputBuffer(b"\x00\xff").alphabet_range == (0, 255)
        assert InputBuffer(b"zzz").alphabet_range == (ord("z"), ord("z"))

    def test_copy_of_mutable_input(self):
        data = bytearray(b"abc")
        buffer = InputBuffer(data)
        data[0] = ord("x")
        assert bytes(buffer) == b"abc"
