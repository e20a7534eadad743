"""
Directed acyclic word graphs.

A DAWG is the minimal deterministic acyclic automaton accepting exactly a
finite set of words. This module builds one incrementally from words given in
lexicographic order, as described in Daciuk, Watson, Watson and Mihov,
"Incremental Construction of Minimal Acyclic Finite-State Automata" (2000).

Nodes live in an arena (a list indexed by node number) and arcs point at node
numbers, so merging two equivalent nodes just rewrites a number in the
parent's arc table.
"""

from cached_property import cached_property
from loguru import logger

from levtransducer.errors import UnsortedInputError
from levtransducer.util import now, unfinished


class DawgNode:
    """
    A node of a :class:`DictionaryAutomaton`.

    Attributes:
        n (int): The node identifier (its index in the arena).
        arcs (dict): Maps each outgoing symbol to the identifier of the child.
        final (bool): Whether a word ends at this node.
    """

    __slots__ = ("n", "arcs", "final")

    def __init__(self, n: int):
        self.n = n
        self.arcs = {}
        self.final = False

    def __repr__(self) -> str:
        return f"<{self.n}, {self.signature()!r}>"

    def signature(self) -> tuple:
        """
        Returns the canonical signature of this node: the final flag followed
        by the sorted ``(symbol, child)`` pairs.

        Two nodes whose children are already minimized accept the same
        right-language exactly when their signatures are equal.
        """
        return self.final, tuple(sorted(self.arcs.items()))


class DictionaryAutomaton:
    """
    Minimal acyclic word automaton built from words in lexicographic order.

    Words are added with :meth:`insert`; once the last word is in,
    :meth:`finish` minimizes the remaining path and freezes the automaton.
    After that the automaton is never mutated, so it can be shared between
    threads without locking.

    Passing an iterable of words to the constructor inserts them all and
    finishes the automaton::

        >>> dawg = DictionaryAutomaton(["cat", "cats", "dog"])
        >>> dawg.accepts("cats")
        True
        >>> "ca" in dawg
        False

    Attributes:
        root (int): Identifier of the start node.
        finished (bool): Whether :meth:`finish` has been called.
    """

    def __init__(self, words=None):
        """
        Args:
            words (iterable, optional): Words in non-decreasing lexicographic
                order. When given, they are inserted and the automaton is
                finished. When omitted, the automaton stays open for
                :meth:`insert`.

        Raises:
            UnsortedInputError: If ``words`` is out of order.
        """
        self._nodes = [DawgNode(0)]
        self.root = 0
        # Path of the previously inserted word, as (parent, symbol, child)
        self._unchecked = []
        # Canonical signature -> identifier of the registered node
        self._minimized = {}
        self._previous = ""
        self._count = 0
        self.finished = False

        if words is not None:
            t = now()
            for word in words:
                self.insert(word)
            self.finish()
            elapsed = now() - t
            logger.opt(lazy=True).debug(
                "Built automaton: {} words, {} nodes, {} arcs in {:.4f}s",
                lambda: self._count,
                lambda: self.node_count,
                lambda: self.edge_count,
                lambda: elapsed,
            )

    def __len__(self):
        return self._count

    def __contains__(self, word):
        return self.accepts(word)

    def __iter__(self):
        """
        Yields the accepted words in lexicographic order.
        """
        nodes = self._nodes
        stack = [("", self.root)]
        while stack:
            sofar, n = stack.pop()
            node = nodes[n]
            if node.final:
                yield sofar
            # Reversed so the smallest symbol is popped first
            for label in sorted(node.arcs, reverse=True):
                stack.append((sofar + label, node.arcs[label]))

    def __repr__(self):
        return f"{type(self).__name__}(words={self._count}, finished={self.finished})"

    @unfinished
    def insert(self, word):
        """
        Adds a word to the automaton.

        Args:
            word (str): The word to add. It must not sort before the previously
                inserted word. Inserting the same word again has no effect.

        Raises:
            UnsortedInputError: If ``word`` sorts before the previous word.
            AutomatonFinishedError: If the automaton was already finished.
        """
        previous = self._previous
        if word < previous:
            raise UnsortedInputError(
                f"Words must be inserted in order: {word!r} after {previous!r}"
            )
        if self._count and word == previous:
            return

        # Find the common prefix with the previous word
        i = 0
        upper = min(len(word), len(previous))
        while i < upper and word[i] == previous[i]:
            i += 1

        # The previous word's nodes past the prefix can't change any more
        self.minimize(i)

        unchecked = self._unchecked
        nodes = self._nodes
        node = unchecked[-1][2] if unchecked else self.root
        for label in word[i:]:
            child = DawgNode(len(nodes))
            nodes.append(child)
            nodes[node].arcs[label] = child.n
            unchecked.append((node, label, child.n))
            node = child.n
        nodes[node].final = True

        self._previous = word
        self._count += 1
        self._clear_stats()

    def minimize(self, lower_bound):
        """
        Replaces each unchecked node above ``lower_bound`` on the last
        inserted path with an already registered equivalent node, or registers
        it if there is none.

        The path is processed from its deepest node upwards, so every child is
        canonical by the time its parent's signature is computed.

        Args:
            lower_bound (int): Number of path entries (counted from the root)
                to leave unchecked.
        """
        nodes = self._nodes
        unchecked = self._unchecked
        minimized = self._minimized

        while len(unchecked) > lower_bound:
            parent, label, child = unchecked.pop()
            sig = nodes[child].signature()
            try:
                this = minimized[sig]
            except KeyError:
                minimized[sig] = child
            else:
                # Fix the parent's pointer and drop the duplicate from the arena
                nodes[parent].arcs[label] = this
                nodes[child] = None

    def finish(self):
        """
        Minimizes the rest of the last inserted path and freezes the automaton.
        Calling it again does nothing.
        """
        if self.finished:
            return
        self.minimize(0)
        self.finished = True
        self._clear_stats()

    def accepts(self, word):
        """
        Returns True if ``word`` is one of the words in the automaton.

        A missing arc means the word is not accepted; this never raises.
        """
        nodes = self._nodes
        n = self.root
        for label in word:
            n = nodes[n].arcs.get(label)
            if n is None:
                return False
        return nodes[n].final

    def arcs(self, n):
        """
        Returns the ``{symbol: child}`` arc table of node ``n``.

        The dictionary belongs to the automaton and must not be modified.
        """
        return self._nodes[n].arcs

    def is_final(self, n):
        """
        Returns True if a word ends at node ``n``.
        """
        return self._nodes[n].final

    def signature(self, n):
        """
        Returns the canonical signature of node ``n``; see
        :meth:`DawgNode.signature`.
        """
        return self._nodes[n].signature()

    def reachable(self):
        """
        Returns the set of identifiers of the nodes reachable from the root.
        """
        nodes = self._nodes
        seen = {self.root}
        stack = [self.root]
        while stack:
            n = stack.pop()
            for dest in nodes[n].arcs.values():
                if dest not in seen:
                    seen.add(dest)
                    stack.append(dest)
        return seen

    @cached_property
    def node_count(self):
        """
        Number of distinct nodes reachable from the root.
        """
        return len(self.reachable())

    @cached_property
    def edge_count(self):
        """
        Number of arcs between reachable nodes. Shared nodes count their arcs
        once.
        """
        nodes = self._nodes
        return sum(len(nodes[n].arcs) for n in self.reachable())

    def _clear_stats(self):
        self.__dict__.pop("node_count", None)
        self.__dict__.pop("edge_count", None)
