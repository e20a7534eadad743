# Copyright 2007 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.

"""
This module contains the :class:`Transducer`, which finds every dictionary term
within a given edit distance of a query term.

The dictionary is compiled into a :class:`DictionaryAutomaton` once. Each query
walks that automaton depth-first while a :class:`TransitionEngine` tracks, for
the prefix spelled so far, every way the prefix could still line up with the
query within the error budget. A branch whose state runs out of positions is
pruned, so only a small part of the dictionary is ever visited.

The algorithm for imitating Levenshtein automata comes from Schulz and Mihov,
"Fast String Correction with Levenshtein-Automata" (2002). The dictionary
automaton is built as in Daciuk et al., "Incremental Construction of Minimal
Acyclic Finite-State Automata" (2000).
"""

from collections import namedtuple

from loguru import logger

from levtransducer.automata.dawg import DictionaryAutomaton
from levtransducer.automata.lev import (
    Algorithm,
    TransitionEngine,
    characteristic_vector,
)
from levtransducer.errors import ConfigurationError, OptionTypeError
from levtransducer.util import insort_keyed, now

Match = namedtuple("Match", ["term", "distance"])
Match.__doc__ = "A dictionary term and its distance from the query."


def _check_bool(name, value, default):
    if value is None:
        return default
    if not isinstance(value, bool):
        raise OptionTypeError(
            f"expected {name!r} to be of type 'bool', received {type(value).__name__!r}"
        )
    return value


class Transducer:
    """
    Finds the terms of a dictionary within a maximum edit distance of a query.

    >>> t = Transducer(["cat", "cats", "cot", "dog"])
    >>> t.candidates("cot", 1)
    [Match(term='cot', distance=0), Match(term='cat', distance=1)]
    >>> t.candidates("cot", 0)
    [Match(term='cot', distance=0)]

    A transducer holds no per-query state. The dictionary automaton and the
    transition engines are read-only, so one instance can serve queries from
    several threads at once.
    """

    def __init__(
        self,
        dictionary,
        sorted=False,
        algorithm=Algorithm.STANDARD,
        sort_accepted=True,
        include_distance=True,
        case_insensitive=True,
    ):
        """
        Args:
            dictionary (list, tuple or DictionaryAutomaton): The terms to
                search. A list is sorted in place unless ``sorted`` is True; a
                tuple is copied and sorted. A prebuilt automaton is used as
                is, and finished if it is still open.
            sorted (bool): Declares that a list or tuple dictionary is already
                in lexicographic order, so it is not sorted again. Ignored for
                automata.
            algorithm (str or Algorithm): ``"standard"``, ``"transposition"``
                or ``"merge_and_split"``. Defaults to ``"standard"``.
            sort_accepted (bool): Whether :meth:`candidates` returns its
                results ordered by distance, then term. Otherwise they come in
                discovery order. Defaults to True.
            include_distance (bool): Whether results are :class:`Match`
                tuples carrying the distance, or bare terms. Defaults to True.
            case_insensitive (bool): Whether terms are ordered ignoring case
                when ``sort_accepted`` is on. This affects ordering only, never
                matching. Defaults to True.

        Raises:
            ConfigurationError: If the dictionary is missing.
            OptionTypeError: If the dictionary or an option has the wrong type.
            UnsupportedAlgorithmError: If ``algorithm`` is not recognized.
            UnsortedInputError: If ``sorted`` is True but the terms are not.
        """
        if dictionary is None:
            raise ConfigurationError("No dictionary was specified")
        if not isinstance(dictionary, (list, tuple, DictionaryAutomaton)):
            raise OptionTypeError(
                "dictionary must be a list, a tuple or a DictionaryAutomaton, "
                f"received {type(dictionary).__name__!r}"
            )

        presorted = _check_bool("sorted", sorted, False)
        if algorithm is None:
            algorithm = Algorithm.STANDARD
        self._algorithm = Algorithm.coerce(algorithm)
        self._sort_accepted = _check_bool("sort_accepted", sort_accepted, True)
        self._include_distance = _check_bool("include_distance", include_distance, True)
        self._case_insensitive = _check_bool("case_insensitive", case_insensitive, True)

        if isinstance(dictionary, DictionaryAutomaton):
            dictionary.finish()
            dawg = dictionary
        else:
            for term in dictionary:
                if not isinstance(term, str):
                    raise OptionTypeError(
                        f"dictionary terms must be strings, received {term!r}"
                    )
            if isinstance(dictionary, tuple):
                dictionary = list(dictionary)
                if not presorted:
                    dictionary.sort()
            elif not presorted:
                dictionary.sort()
            dawg = DictionaryAutomaton(dictionary)

        self._dawg = dawg
        self._engines = {}

        logger.debug(
            "Created transducer: algorithm={}, sort_accepted={}, "
            "include_distance={}, case_insensitive={}",
            self._algorithm.value,
            self._sort_accepted,
            self._include_distance,
            self._case_insensitive,
        )

    def __repr__(self):
        return (
            f"{type(self).__name__}({self._dawg!r}, "
            f"algorithm={self._algorithm.value!r})"
        )

    def __call__(self, term, n):
        return self.candidates(term, n)

    @property
    def dictionary(self):
        """The :class:`DictionaryAutomaton` searched by this transducer."""
        return self._dawg

    @property
    def algorithm(self):
        return self._algorithm

    @property
    def sort_accepted(self):
        return self._sort_accepted

    @property
    def include_distance(self):
        return self._include_distance

    @property
    def case_insensitive(self):
        return self._case_insensitive

    def engine(self, n):
        """
        Returns the :class:`TransitionEngine` for maximum distance ``n``,
        creating it on first use.
        """
        try:
            return self._engines[n]
        except KeyError:
            return self._engines.setdefault(n, TransitionEngine(self._algorithm, n))

    def candidates(self, term, n):
        """
        Returns every dictionary term within edit distance ``n`` of ``term``.

        Args:
            term (str): The query term.
            n (int): The maximum edit distance, at least 0.

        Returns:
            list: :class:`Match` tuples, or bare terms when the transducer was
            created with ``include_distance=False``. The list is empty when no
            term is close enough. With ``sort_accepted`` on, it is ordered by
            distance and then by term.

        Raises:
            TypeError: If ``term`` is not a string or ``n`` is not an integer.
            ValueError: If ``n`` is negative.
        """
        if not isinstance(term, str):
            raise TypeError(f"term must be a string, received {type(term).__name__!r}")
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(
                f"maximum distance must be an integer, received {type(n).__name__!r}"
            )
        if n < 0:
            raise ValueError(f"maximum distance must be non-negative, received {n}")

        t = now()
        engine = self.engine(n)
        dawg = self._dawg
        include_distance = self._include_distance
        length = len(term)
        window = 2 * n + 1

        accepted = []
        keys = []
        collect = self._collector(accepted, keys)

        initial = engine.initial_state()
        # The empty string is only in the dictionary if the root is final
        if dawg.is_final(dawg.root):
            self._accept(engine, collect, "", initial, length, n)

        stack = [("", dawg.root, initial)]
        while stack:
            prefix, node, state = stack.pop()
            offset = state[0][0]
            k = min(window, length - offset)
            for symbol, child in dawg.arcs(node).items():
                vector = characteristic_vector(symbol, term, k, offset)
                next_state = engine.transition_for_state(state, vector)
                if next_state is None:
                    continue
                next_prefix = prefix + symbol
                stack.append((next_prefix, child, next_state))
                if dawg.is_final(child):
                    self._accept(engine, collect, next_prefix, next_state, length, n)

        logger.debug(
            "Query {!r} (n={}, {}): {} matches in {:.6f}s",
            term,
            n,
            self._algorithm.value,
            len(accepted),
            now() - t,
        )
        if not include_distance:
            return [match.term for match in accepted]
        return accepted

    def _accept(self, engine, collect, word, state, length, n):
        if self._include_distance:
            d = engine.minimum_distance(state, length)
            if d is not None and d <= n:
                collect(Match(word, d))
        elif engine.is_final(state, length):
            collect(Match(word, None))

    def _collector(self, accepted, keys):
        # Returns a function that adds a match to the accepted list
        if not self._sort_accepted:
            return accepted.append

        case_insensitive = self._case_insensitive
        include_distance = self._include_distance

        def insert_match(match):
            word = match.term
            if case_insensitive:
                key = (word.lower(), word)
            else:
                key = (word,)
            if include_distance:
                key = (match.distance,) + key
            insort_keyed(accepted, keys, match, key)

        return insert_match
