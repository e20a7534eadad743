from itertools import product

import pytest
from levtransducer.automata.dawg import DictionaryAutomaton
from levtransducer.automata.lev import Algorithm
from levtransducer.distance import distance_function
from levtransducer.errors import (
    ConfigurationError,
    OptionTypeError,
    UnsortedInputError,
    UnsupportedAlgorithmError,
)
from levtransducer.transducer import Match, Transducer

ALGORITHMS = ["standard", "transposition", "merge_and_split"]


def _words(alphabet, maxlen):
    words = []
    for size in range(1, maxlen + 1):
        words.extend("".join(p) for p in product(alphabet, repeat=size))
    return sorted(words)


def _expected(dictionary, term, n, algorithm):
    f = distance_function(algorithm)
    matches = [Match(w, f(term, w)) for w in dictionary]
    return sorted(
        (m for m in matches if m.distance <= n),
        key=lambda m: (m.distance, m.term.lower(), m.term),
    )


def test_example():
    t = Transducer(["cat", "cats", "cot", "dog"])
    assert t.candidates("cot", 1) == [("cot", 0), ("cat", 1)]
    assert t.candidates("cot", 0) == [("cot", 0)]
    assert t.candidates("cot", 2) == [("cot", 0), ("cat", 1), ("cats", 2), ("dog", 2)]
    assert t("cot", 1) == t.candidates("cot", 1)


def test_no_match():
    t = Transducer(["alfa", "bravo"])
    assert t.candidates("zulu", 1) == []
    assert t.candidates("", 2) == []


def test_transposition():
    t = Transducer(["ab"], algorithm="transposition")
    assert t.candidates("ba", 1) == [("ab", 1)]

    t = Transducer(["ab"])
    assert t.candidates("ba", 1) == []
    assert t.candidates("ba", 2) == [("ab", 2)]


def test_merge_and_split():
    t = Transducer(["modern", "rnodern"], algorithm=Algorithm.MERGE_AND_SPLIT)
    assert t.candidates("modern", 1) == [("modern", 0), ("rnodern", 1)]

    t = Transducer(["modern", "rnodern"])
    assert t.candidates("modern", 1) == [("modern", 0)]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_empty_query(algorithm):
    t = Transducer(["a", "bb", "ccc"], algorithm=algorithm)
    assert t.candidates("", 3) == [("a", 1), ("bb", 2), ("ccc", 3)]
    assert t.candidates("", 2) == [("a", 1), ("bb", 2)]
    assert t.candidates("", 0) == []


def test_empty_term_in_dictionary():
    t = Transducer(["", "a"])
    assert t.candidates("b", 1) == [("", 1), ("a", 1)]
    assert t.candidates("", 0) == [("", 0)]
    assert t.candidates("bb", 1) == []


def test_match_fields():
    t = Transducer(["cat", "cot"])
    match = t.candidates("cot", 1)[1]
    assert isinstance(match, Match)
    assert match.term == "cat"
    assert match.distance == 1


def test_without_distance():
    t = Transducer(["cat", "cats", "cot", "dog"], include_distance=False)
    assert t.candidates("cot", 1) == ["cat", "cot"]
    assert t.candidates("cot", 0) == ["cot"]


def test_unsorted_results():
    words = ["cat", "cats", "cot", "dog", "cog", "bat"]
    t = Transducer(words, sort_accepted=False)
    results = t.candidates("cot", 1)
    assert sorted(results) == [("cat", 1), ("cog", 1), ("cot", 0)]

    t = Transducer(words, sort_accepted=False, include_distance=False)
    assert sorted(t.candidates("cot", 1)) == ["cat", "cog", "cot"]


def test_case_insensitive_order():
    words = ["Ba", "ab", "Aa", "bb"]
    t = Transducer(list(words), include_distance=False)
    assert t.candidates("xx", 2) == ["Aa", "ab", "Ba", "bb"]

    t = Transducer(list(words), include_distance=False, case_insensitive=False)
    assert t.candidates("xx", 2) == ["Aa", "Ba", "ab", "bb"]

    t = Transducer(list(words))
    assert t.candidates("xx", 2) == [("Aa", 2), ("ab", 2), ("Ba", 2), ("bb", 2)]


def test_case_sensitive_matching():
    # case_insensitive only affects ordering
    t = Transducer(["Cat"])
    assert t.candidates("cat", 0) == []
    assert t.candidates("cat", 1) == [("Cat", 1)]


def test_order():
    words = _words("abc", 3)
    t = Transducer(words)
    results = t.candidates("abc", 2)
    assert results
    keys = [(m.distance, m.term) for m in results]
    assert keys == sorted(keys)


def test_sorts_list_in_place():
    words = ["dog", "cat", "cot"]
    t = Transducer(words)
    assert words == ["cat", "cot", "dog"]
    assert list(t.dictionary) == ["cat", "cot", "dog"]


def test_presorted():
    words = ["cat", "cot", "dog"]
    t = Transducer(words, sorted=True)
    assert t.candidates("cog", 1) == [("cot", 1), ("dog", 1)]

    with pytest.raises(UnsortedInputError):
        Transducer(["dog", "cat"], sorted=True)


def test_tuple_dictionary():
    words = ("dog", "cat", "cot")
    t = Transducer(words)
    assert words == ("dog", "cat", "cot")
    assert t.candidates("cot", 0) == [("cot", 0)]


def test_prebuilt_automaton():
    dawg = DictionaryAutomaton(["cat", "cats", "cot", "dog"])
    t = Transducer(dawg, algorithm="transposition")
    assert t.dictionary is dawg
    assert t.candidates("act", 1) == [("cat", 1)]
    assert t.candidates("act", 0) == []

    dawg = DictionaryAutomaton()
    dawg.insert("alfa")
    dawg.insert("bravo")
    t = Transducer(dawg)
    assert dawg.finished
    assert t.candidates("alpha", 2) == [("alfa", 2)]


def test_options():
    t = Transducer(["a"], algorithm="merge_and_split", sort_accepted=False)
    assert t.algorithm is Algorithm.MERGE_AND_SPLIT
    assert not t.sort_accepted
    assert t.include_distance
    assert t.case_insensitive

    t = Transducer(["a"], algorithm=None, include_distance=None)
    assert t.algorithm is Algorithm.STANDARD
    assert t.include_distance


def test_bad_dictionary():
    with pytest.raises(ConfigurationError):
        Transducer(None)
    with pytest.raises(OptionTypeError):
        Transducer("cat")
    with pytest.raises(OptionTypeError):
        Transducer({"cat", "dog"})
    with pytest.raises(TypeError):
        Transducer(["cat", 5])


@pytest.mark.parametrize(
    "option", ["sorted", "sort_accepted", "include_distance", "case_insensitive"]
)
def test_bad_option_type(option):
    with pytest.raises(OptionTypeError):
        Transducer(["cat"], **{option: "yes"})
    with pytest.raises(TypeError):
        Transducer(["cat"], **{option: 1})


def test_bad_algorithm():
    with pytest.raises(UnsupportedAlgorithmError):
        Transducer(["cat"], algorithm="damerau")
    with pytest.raises(ConfigurationError):
        Transducer(["cat"], algorithm=2)


def test_bad_query():
    t = Transducer(["cat"])
    with pytest.raises(ValueError):
        t.candidates("cat", -1)
    with pytest.raises(TypeError):
        t.candidates("cat", 1.5)
    with pytest.raises(TypeError):
        t.candidates("cat", True)
    with pytest.raises(TypeError):
        t.candidates(None, 1)


def test_engine_cache():
    t = Transducer(["cat"])
    assert t.engine(2) is t.engine(2)
    assert t.engine(1) is not t.engine(2)
    assert t.engine(1).n == 1


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_against_reference(algorithm):
    dictionary = _words("ab", 4) + ["abc", "bca", "cab", "acb", "ccc"]
    dictionary.sort()
    t = Transducer(list(dictionary), sorted=True, algorithm=algorithm)

    for term in [""] + _words("abc", 3):
        for n in range(3):
            assert t.candidates(term, n) == _expected(dictionary, term, n, algorithm)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_without_distance_agrees(algorithm):
    dictionary = _words("ab", 3) + ["abc", "cab"]
    with_distance = Transducer(list(dictionary), algorithm=algorithm)
    without = Transducer(list(dictionary), algorithm=algorithm, include_distance=False)

    for term in _words("abc", 3):
        for n in range(3):
            expected = sorted(m.term for m in with_distance.candidates(term, n))
            assert sorted(without.candidates(term, n)) == expected


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_monotonic(algorithm):
    words = [
        "alfa",
        "alpha",
        "bravo",
        "brave",
        "charlie",
        "charley",
        "delta",
        "dealt",
        "echo",
        "ecco",
    ]
    t = Transducer(words, algorithm=algorithm, include_distance=False)
    for term in ["alfa", "bravo", "chalie", "detla", "eco", "xyz", ""]:
        previous = set()
        for n in range(5):
            current = set(t.candidates(term, n))
            assert previous <= current
            previous = current


def test_logging():
    from loguru import logger

    messages = []
    handler = logger.add(messages.append, level="DEBUG", format="{message}")
    logger.enable("levtransducer")
    try:
        t = Transducer(["cat", "cot"])
        t.candidates("cot", 1)
    finally:
        logger.disable("levtransducer")
        logger.remove(handler)

    assert any("Built automaton: 2 words" in m for m in messages)
    assert any("Query 'cot' (n=1, standard): 2 matches" in m for m in messages)
