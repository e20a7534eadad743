"""
Times building a transducer from a word list and querying it.

Usage: python benchmark/dictionary.py [-d WORDS] [-n MAXDIST] [-a ALGORITHM] [-q QUERIES]

The word list defaults to /usr/share/dict/words, one word per line.
"""

import argparse
import random

from levtransducer.transducer import Transducer
from levtransducer.util import now


def read_words(path):
    with open(path, encoding="utf-8", errors="ignore") as f:
        return sorted({line.strip() for line in f if line.strip()})


def mangle(rng, word):
    chars = list(word)
    i = rng.randrange(len(chars))
    chars[i] = rng.choice("abcdefghijklmnopqrstuvwxyz")
    return "".join(chars)


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-d", "--dict", default="/usr/share/dict/words")
    parser.add_argument("-n", "--maxdist", type=int, default=2)
    parser.add_argument(
        "-a",
        "--algorithm",
        default="standard",
        choices=["standard", "transposition", "merge_and_split"],
    )
    parser.add_argument("-q", "--queries", type=int, default=1000)
    options = parser.parse_args()

    words = read_words(options.dict)
    print(f"{len(words)} words")

    t = now()
    transducer = Transducer(words, sorted=True, algorithm=options.algorithm)
    dawg = transducer.dictionary
    print(
        f"Built in {now() - t:.3f}s: {dawg.node_count} nodes, {dawg.edge_count} arcs"
    )

    rng = random.Random(0)
    queries = [mangle(rng, rng.choice(words)) for _ in range(options.queries)]

    t = now()
    total = 0
    for term in queries:
        total += len(transducer.candidates(term, options.maxdist))
    elapsed = now() - t
    print(
        f"{len(queries)} queries at n={options.maxdist} in {elapsed:.3f}s "
        f"({elapsed / len(queries) * 1000:.3f}ms each, {total} matches)"
    )


if __name__ == "__main__":
    main()
