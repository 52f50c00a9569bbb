import struct

import pytest


def raw_entry(key: bytes, data: bytes) -> bytes:
    return struct.pack("<LL", len(key), len(data)) + key + data


@pytest.fixture
def entry():
    return raw_entry
