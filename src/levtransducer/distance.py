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
Reference edit distances.

These functions compute the distance that a transducer of the same algorithm
reports, but with a plain dynamic-programming table over the two strings. They
are far slower than the automaton for dictionary search and exist to check
its results.
"""

from levtransducer.automata.lev import Algorithm


def distance(v, w, algorithm=Algorithm.STANDARD):
    """
    Returns the edit distance between ``v`` and ``w``.

    Args:
        v (str): The first string.
        w (str): The second string.
        algorithm (Algorithm or str): Which elementary operations cost one
            edit. ``"standard"`` counts insertions, deletions and
            substitutions; ``"transposition"`` also counts swapping two
            adjacent characters; ``"merge_and_split"`` also counts replacing
            two characters with one and one character with two.

    Returns:
        int: The distance.

    Raises:
        UnsupportedAlgorithmError: If ``algorithm`` is not recognized.

    Example:
        >>> distance("ab", "ba")
        2
        >>> distance("ab", "ba", "transposition")
        1
    """
    algorithm = Algorithm.coerce(algorithm)
    transpose = algorithm is Algorithm.TRANSPOSITION
    merge_split = algorithm is Algorithm.MERGE_AND_SPLIT

    rows = len(v) + 1
    cols = len(w) + 1
    d = [[0] * cols for _ in range(rows)]
    for i in range(rows):
        d[i][0] = i
    for j in range(cols):
        d[0][j] = j

    for i in range(1, rows):
        a = v[i - 1]
        for j in range(1, cols):
            b = w[j - 1]
            best = min(
                d[i - 1][j] + 1,
                d[i][j - 1] + 1,
                d[i - 1][j - 1] + (a != b),
            )
            if transpose and i > 1 and j > 1 and a == w[j - 2] and v[i - 2] == b:
                best = min(best, d[i - 2][j - 2] + 1)
            elif merge_split:
                if j > 1:
                    best = min(best, d[i - 1][j - 2] + 1)
                if i > 1:
                    best = min(best, d[i - 2][j - 1] + 1)
            d[i][j] = best

    return d[-1][-1]


def distance_function(algorithm=Algorithm.STANDARD):
    """
    Returns a two-argument distance function for ``algorithm`` that remembers
    the pairs it has already computed.

    The cache grows without bound, so use one function per batch of checks.

    Raises:
        UnsupportedAlgorithmError: If ``algorithm`` is not recognized.
    """
    algorithm = Algorithm.coerce(algorithm)
    memo = {}

    def memoized_distance(v, w):
        key = (v, w)
        try:
            return memo[key]
        except KeyError:
            result = memo[key] = distance(v, w, algorithm)
            return result

    return memoized_distance
