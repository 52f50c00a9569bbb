import mmap

import pytest

from shader_blob import BlobError, PermutationNotFoundError, ShaderBlobFile, build_blob


@pytest.fixture
def blob_path(tmp_path):
    path = tmp_path / "shaders.bin"
    path.write_bytes(build_blob([({"MSAA": "4"}, b"msaa4"), ([], b"base")]))
    return path


def test_lookup_through_mmap(blob_path):
    with ShaderBlobFile(blob_path) as blob:
        assert blob.get({"MSAA": "4"}) == b"msaa4"
        assert blob.get() == b"base"
        assert blob.get({"MSAA": "8"}) is None
        assert blob.permutations() == ["MSAA=4", "<default>"]
        assert [e.key for e in blob.entries()] == ["MSAA=4", "<default>"]


def test_require_raises_with_diagnostic(blob_path):
    with ShaderBlobFile(blob_path) as blob:
        assert blob.require({"MSAA": "4"}) == b"msaa4"
        with pytest.raises(PermutationNotFoundError) as info:
            blob.require({"MSAA": "8"})
    assert "Required permutation key: \nMSAA=8" in str(info.value)
    assert info.value.result.error is BlobError.PERMUTATION_NOT_FOUND


def test_empty_file(tmp_path):
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    with ShaderBlobFile(path) as blob:
        assert blob.find().error is BlobError.MALFORMED_BLOB
        assert blob.permutations() == []


def test_legacy_file(tmp_path):
    path = tmp_path / "legacy.bin"
    path.write_bytes(b"\x44\x58\x42\x43whole-shader")
    with ShaderBlobFile(path) as blob:
        assert blob.get() == b"DXBCwhole-shader"
        assert blob.find({"A": "1"}).error is BlobError.PERMUTATION_REQUESTED_ON_UNKEYED_BLOB


def test_file_closed_when_mmap_fails(blob_path, monkeypatch):
    opened = []

    def recording_open(*args, **kwargs):
        f = open(*args, **kwargs)
        opened.append(f)
        return f

    def failing_mmap(*args, **kwargs):
        raise OSError("cannot map")

    monkeypatch.setattr("shader_blob.blob_file.open", recording_open, raising=False)
    monkeypatch.setattr(mmap, "mmap", failing_mmap)
    with pytest.raises(OSError):
        ShaderBlobFile(blob_path)
    assert len(opened) == 1 and opened[0].closed
