import itertools

import pytest

from shader_blob.keys import Constant, as_constants, canonical_key, display_key, sorted_constant_indices


def test_sorted_indices_example():
    assert sorted_constant_indices(["B", "A", "C"]) == [1, 0, 2]


def test_empty_constants_give_empty_key():
    assert canonical_key([]) == ""
    assert canonical_key(None) == ""
    assert display_key("") == "<default>"
    assert display_key("A=1") == "A=1"


def test_duplicate_names_keep_input_order():
    consts = [Constant("B", "1"), Constant("A", "1"), Constant("B", "2")]
    assert canonical_key(consts) == "A=1 B=1 B=2"
    assert canonical_key([consts[2], consts[1], consts[0]]) == "A=1 B=2 B=1"


def test_order_independence():
    consts = [("USE_SHADOWS", "1"), ("QUALITY", "high"), ("A", "0"), ("MSAA", "4")]
    expected = "A=0 MSAA=4 QUALITY=high USE_SHADOWS=1"
    for perm in itertools.permutations(consts):
        assert canonical_key(perm) == expected


def test_mapping_and_pairs_accepted():
    assert canonical_key({"B": "2", "A": "1"}) == "A=1 B=2"
    assert canonical_key([("B", "2"), ("A", "1")]) == "A=1 B=2"
    assert as_constants([("X", "1")]) == [Constant("X", "1")]


def test_sort_is_bytewise_not_case_folded():
    assert canonical_key([("a", "1"), ("B", "1"), ("_", "1")]) == "B=1 _=1 a=1"


def test_different_pairs_give_different_keys():
    assert canonical_key([("A", "1")]) != canonical_key([("A", "2")])
    assert canonical_key([("A", "1")]) != canonical_key([("A", "1"), ("B", "1")])


@pytest.mark.parametrize("bad", ["AB", [("A", "1", "x")], ["A"], [(b"A", b"1")], [("A", 1)], {"A": None}])
def test_rejects_non_pairs(bad):
    with pytest.raises(TypeError):
        canonical_key(bad)
