"""
Universal Levenshtein automata.

Instead of building one automaton per query term, a single parametric
transition relation simulates the non-deterministic Levenshtein automaton of
*any* term. It only depends on relative offsets, error counts and the maximum
distance ``n``; the query enters through characteristic vectors. See Schulz
and Mihov, "Fast String Correction with Levenshtein-Automata" (2002), and
Mitankin, "Universal Levenshtein Automata: Building and Properties" (2005).

A position ``(i, e)`` says "``i`` characters of the query have been consumed
using ``e`` edits". The transposition and merge/split variants add a third
field, a flag set while a two-character operation is half done. A state is a
sorted tuple of positions, none of which subsumes another.
"""

from bisect import bisect_left
from enum import Enum

from levtransducer.errors import UnsupportedAlgorithmError


class Algorithm(Enum):
    """
    The sets of elementary edit operations a transducer can count.

    * ``STANDARD``: insertion, deletion and substitution.
    * ``TRANSPOSITION``: also swapping two adjacent characters. Useful for
      typing errors.
    * ``MERGE_AND_SPLIT``: also merging two characters into one and splitting
      one character into two. Useful for OCR errors.
    """

    STANDARD = "standard"
    TRANSPOSITION = "transposition"
    MERGE_AND_SPLIT = "merge_and_split"

    @classmethod
    def coerce(cls, value):
        """
        Returns the member for ``value``, which may be a member or its name as
        a string.

        Raises:
            UnsupportedAlgorithmError: If ``value`` names no algorithm.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise UnsupportedAlgorithmError(f"unsupported value of 'algorithm': {value!r}")


def characteristic_vector(symbol, term, k, offset):
    """
    Returns a tuple of ``k`` booleans; element ``j`` is True if ``symbol``
    equals ``term[offset + j]``.
    """
    return tuple(symbol == term[offset + j] for j in range(k))


def index_of(vector, k, h):
    """
    Returns the smallest ``j < k`` such that ``vector[h + j]`` is True, or -1.
    """
    for j in range(k):
        if vector[h + j]:
            return j
    return -1


def _bisect_errors_right(state, e, lo):
    # First index >= lo whose position has more than e errors
    hi = len(state)
    while lo < hi:
        mid = (lo + hi) // 2
        if e < state[mid][1]:
            hi = mid
        else:
            lo = mid + 1
    return lo


def _insertion_key(position):
    # Candidates are kept ordered by errors first so subsumption can bisect
    return (position[1], position[0]) + position[2:]


def _is_pending(position):
    return len(position) == 3 and position[2] == 1


class TransitionEngine:
    """
    Transition function of the universal Levenshtein automaton for one
    algorithm and one maximum distance.

    Engines hold no mutable state, so one instance can serve any number of
    queries, including concurrent ones.

    Args:
        algorithm (Algorithm or str): The edit operations to count.
        n (int): The maximum edit distance.
    """

    def __init__(self, algorithm, n):
        self.algorithm = Algorithm.coerce(algorithm)
        self.n = n
        if self.algorithm is Algorithm.STANDARD:
            self._initial = ((0, 0),)
        else:
            self._initial = ((0, 0, 0),)

    def __repr__(self):
        return f"{type(self).__name__}({self.algorithm.value!r}, {self.n})"

    def initial_state(self):
        """
        Returns the start state: no characters consumed, no edits made.
        """
        return self._initial

    # Position transitions

    def transition_for_position(self, position, vector, offset):
        """
        Returns the positions reachable from ``position`` after reading a
        symbol, or None if the position dies.

        Args:
            position (tuple): The current position.
            vector (tuple): Characteristic vector of the symbol over the query
                window that starts at ``offset``.
            offset (int): Query index of the first vector element; the minimal
                boundary of the state being transitioned.

        Returns:
            tuple or None: The successor positions.
        """
        algorithm = self.algorithm
        if algorithm is Algorithm.STANDARD:
            return self._standard_transition(position, vector, offset)
        elif algorithm is Algorithm.TRANSPOSITION:
            return self._transposition_transition(position, vector, offset)
        else:
            return self._merge_and_split_transition(position, vector, offset)

    def _standard_transition(self, position, vector, offset):
        n = self.n
        i, e = position
        h = i - offset
        w = len(vector)

        if e < n:
            if h <= w - 2:
                k = min(n - e + 1, w - h)
                j = index_of(vector, k, h)
                if j == 0:
                    return ((i + 1, e),)
                elif j > 0:
                    return ((i, e + 1), (i + 1, e + 1), (i + j + 1, e + j))
                else:
                    return ((i, e + 1), (i + 1, e + 1))
            elif h == w - 1:
                if vector[h]:
                    return ((i + 1, e),)
                else:
                    return ((i, e + 1), (i + 1, e + 1))
            else:
                return ((i, e + 1),)

        if e == n and h <= w - 1 and vector[h]:
            return ((i + 1, n),)
        return None

    def _transposition_transition(self, position, vector, offset):
        n = self.n
        i, e, t = position
        h = i - offset
        w = len(vector)

        if e < n:
            if h <= w - 2:
                if t == 1:
                    # Second half of a swap: the skipped character must follow
                    if vector[h]:
                        return ((i + 2, e, 0),)
                    return None

                k = min(n - e + 1, w - h)
                j = index_of(vector, k, h)
                if j == 0:
                    return ((i + 1, e, 0),)
                elif j == 1:
                    return (
                        (i, e + 1, 0),
                        (i, e + 1, 1),
                        (i + 1, e + 1, 0),
                        (i + 2, e + 1, 0),
                    )
                elif j > 1:
                    return ((i, e + 1, 0), (i + 1, e + 1, 0), (i + j + 1, e + j, 0))
                else:
                    return ((i, e + 1, 0), (i + 1, e + 1, 0))
            elif h == w - 1:
                if vector[h]:
                    return ((i + 1, e, 0),)
                else:
                    return ((i, e + 1, 0), (i + 1, e + 1, 0))
            else:
                return ((i, e + 1, 0),)

        if t == 0 and h <= w - 1:
            if vector[h]:
                return ((i + 1, n, 0),)
        elif t == 1 and h <= w - 2:
            if vector[h]:
                return ((i + 2, n, 0),)
        return None

    def _merge_and_split_transition(self, position, vector, offset):
        n = self.n
        i, e, s = position
        h = i - offset
        w = len(vector)

        if e < n:
            if h <= w - 1 and s == 1:
                # Second character of a split, whatever it is
                return ((i + 1, e, 0),)
            if h <= w - 2:
                if vector[h]:
                    return ((i + 1, e, 0),)
                return (
                    (i, e + 1, 0),
                    (i, e + 1, 1),
                    (i + 1, e + 1, 0),
                    (i + 2, e + 1, 0),
                )
            elif h == w - 1:
                if vector[h]:
                    return ((i + 1, e, 0),)
                return ((i, e + 1, 0), (i, e + 1, 1), (i + 1, e + 1, 0))
            else:
                return ((i, e + 1, 0),)

        if h <= w - 1:
            if s == 1:
                return ((i + 1, e, 0),)
            if vector[h]:
                return ((i + 1, n, 0),)
        return None

    # Subsumption

    def subsumes(self, p, q):
        """
        Returns True if position ``p`` subsumes position ``q``, meaning every
        word ``q`` could still accept is accepted by ``p`` at no greater cost,
        so ``q`` can be discarded.
        """
        i, e = p[0], p[1]
        j, f = q[0], q[1]
        algorithm = self.algorithm

        if algorithm is Algorithm.TRANSPOSITION:
            s, t = p[2], q[2]
            if s == 1:
                if t == 1:
                    return i == j
                return f == self.n and i == j
            if t == 1:
                return abs(i - j) + 1 <= f - e
        elif algorithm is Algorithm.MERGE_AND_SPLIT:
            if p[2] == 1 and q[2] == 0:
                return False

        return abs(i - j) <= f - e

    def unsubsume(self, state):
        """
        Removes, in place, every position of ``state`` subsumed by another.

        ``state`` must be ordered by errors first. Each position is only
        compared with positions carrying strictly more errors; positions with
        equal error counts are never comparable once duplicates are gone.
        """
        m = 0
        while m < len(state):
            p = state[m]
            k = _bisect_errors_right(state, p[1], m)
            while k < len(state):
                if self.subsumes(p, state[k]):
                    del state[k]
                else:
                    k += 1
            m += 1

    # State transitions

    def transition_for_state(self, state, vector):
        """
        Returns the state reached from ``state`` after reading a symbol whose
        characteristic vector (starting at the state's minimal boundary) is
        ``vector``, or None if no position survives.

        A None result means no continuation of the current prefix can end
        within the error budget, so the branch can be pruned.
        """
        offset = state[0][0]
        candidates = []
        keys = []
        for position in state:
            successors = self.transition_for_position(position, vector, offset)
            if successors is None:
                continue
            for succ in successors:
                key = _insertion_key(succ)
                lo = bisect_left(keys, key)
                if lo == len(keys) or keys[lo] != key:
                    keys.insert(lo, key)
                    candidates.insert(lo, succ)

        self.unsubsume(candidates)
        if not candidates:
            return None
        candidates.sort()
        return tuple(candidates)

    # Acceptance

    def is_final(self, state, length):
        """
        Returns True if the word read so far is within distance ``n`` of a
        query of ``length`` characters.
        """
        n = self.n
        for position in state:
            if not _is_pending(position) and length - position[0] <= n - position[1]:
                return True
        return False

    def minimum_distance(self, state, length):
        """
        Returns the exact distance between the word read so far and a query of
        ``length`` characters, or None if every position is pending.
        """
        distances = [
            length - position[0] + position[1]
            for position in state
            if not _is_pending(position)
        ]
        return min(distances) if distances else None
