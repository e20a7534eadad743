import pytest
from levtransducer.distance import distance, distance_function
from levtransducer.errors import UnsupportedAlgorithmError

ALGORITHMS = ["standard", "transposition", "merge_and_split"]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_trivial(algorithm):
    assert distance("", "", algorithm) == 0
    assert distance("abc", "abc", algorithm) == 0
    assert distance("", "abc", algorithm) == 3
    assert distance("abc", "", algorithm) == 3
    assert distance("kitten", "sitting", algorithm) == 3


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_symmetric(algorithm):
    words = ["", "a", "ab", "ba", "abc", "acb", "m", "rn", "cat", "cats", "dog"]
    for v in words:
        for w in words:
            assert distance(v, w, algorithm) == distance(w, v, algorithm)


def test_standard():
    assert distance("ab", "ba") == 2
    assert distance("m", "rn") == 2
    assert distance("cot", "cat") == 1
    assert distance("cot", "cats") == 2
    assert distance("flaw", "lawn") == 2


def test_transposition():
    assert distance("ab", "ba", "transposition") == 1
    assert distance("abc", "acb", "transposition") == 1
    assert distance("abcd", "badc", "transposition") == 2
    # Restricted: a swapped pair isn't edited again
    assert distance("ca", "abc", "transposition") == 3
    assert distance("m", "rn", "transposition") == 2


def test_merge_and_split():
    assert distance("m", "rn", "merge_and_split") == 1
    assert distance("rn", "m", "merge_and_split") == 1
    assert distance("cl", "d", "merge_and_split") == 1
    assert distance("ab", "ba", "merge_and_split") == 2
    assert distance("modern", "rnodern", "merge_and_split") == 1


def test_distance_function():
    f = distance_function("transposition")
    assert f("ab", "ba") == 1
    assert f("ab", "ba") == 1
    assert f("kitten", "sitting") == 3


def test_unsupported():
    with pytest.raises(UnsupportedAlgorithmError):
        distance("a", "b", "damerau")
    with pytest.raises(UnsupportedAlgorithmError):
        distance_function("hamming")
