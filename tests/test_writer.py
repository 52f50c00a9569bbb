import struct

import pytest

from shader_blob import BlobWriter, BytesSink, CallbackSink, FileSink, build_blob, write_header, write_permutation


def test_layout_is_byte_exact():
    sink = BytesSink()
    assert write_header(sink)
    assert write_permutation(sink, "A=1 B=2", b"\xde\xad")
    assert sink.getvalue() == b"NVSP" + struct.pack("<LL", 7, 2) + b"A=1 B=2" + b"\xde\xad"


def test_no_terminal_entry_written():
    blob = build_blob([({"A": "1"}, b"x")])
    assert blob == b"NVSP" + struct.pack("<LL", 3, 1) + b"A=1x"


def test_writer_canonicalises_constants():
    sink = BytesSink()
    writer = BlobWriter(sink)
    writer.write_header()
    assert writer.add([("B", "1"), ("A", "2")], b"bin")
    assert b"A=2 B=1" in sink.getvalue()
    assert writer.count == 1


def test_all_three_writes_attempted_after_failure():
    calls = []

    def fn(data):
        calls.append(data)
        return len(calls) != 1

    assert not write_permutation(CallbackSink(fn), "K=V", b"payload")
    assert calls == [struct.pack("<LL", 3, 7), b"K=V", b"payload"]


def test_header_failure_reported():
    assert not write_header(CallbackSink(lambda data: False))


def test_write_order_enforced():
    writer = BlobWriter(BytesSink())
    with pytest.raises(RuntimeError):
        writer.write_permutation("A=1", b"x")
    writer.write_header()
    with pytest.raises(RuntimeError):
        writer.write_header()


def test_empty_binary_rejected():
    with pytest.raises(ValueError):
        write_permutation(BytesSink(), "A=1", b"")


def test_file_sink(tmp_path):
    path = tmp_path / "out.bin"
    with open(path, "wb") as f:
        sink = FileSink(f)
        assert write_header(sink)
        assert write_permutation(sink, "", b"abc")
    assert path.read_bytes() == b"NVSP" + struct.pack("<LL", 0, 3) + b"abc"


def test_file_sink_reports_os_error(tmp_path):
    path = tmp_path / "ro.bin"
    path.write_bytes(b"")
    with open(path, "rb") as f:
        assert not FileSink(f).write(b"x")


def test_count_only_includes_successful_writes():
    writer = BlobWriter(CallbackSink(lambda data: data == b"NVSP"))
    assert writer.write_header()
    assert not writer.add({"A": "1"}, b"x")
    assert writer.count == 0
