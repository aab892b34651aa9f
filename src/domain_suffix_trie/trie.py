"""Label-level trie for longest domain-suffix matching.

Suffixes are split on "." and walked right to left so that the TLD
comes first: "api.google.com" is stored as com -> google -> api.
Every registered suffix shares the nodes of its parent domains, and
a lookup is a single walk from the root, stopping at the first label
that has no child. There is no backtracking because children are
keyed by exact label, so there is only ever one path to try.

The deepest node reached is the match. Note that this is decided by
which nodes exist, not by which nodes carry a value: inserting only
"api.google.com" creates a value-less "google" node, and a lookup for
"test.google.com" stops there. Use match_registered() if you want the
deepest node that actually holds a value.

This module does no locking. For shared use across threads, wrap it
in SyncDomainSuffixTrie (concurrency/sync_trie.py).

Usage:
    trie = DomainSuffixTrie()
    trie.insert("google.com", "A")
    trie.insert("map.google.com", "B")

    trie.match_value("x.map.google.com")   # "B"
    trie.match_value("x.google.com")       # "A"
    trie.match("x.google.com").path        # "google.com"
"""
from __future__ import annotations

import logging
from typing import Generic, Iterator, TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T")

# Marks a node that never had a value set. None is a legitimate payload.
_MISSING = object()


class DomainSuffixTrieError(Exception):
    """Base class for errors raised by this package."""


class EmptySuffixError(DomainSuffixTrieError, ValueError):
    """Raised when inserting the empty string as a suffix."""

    def __init__(self) -> None:
        super().__init__("Domain suffix must not be empty")


class TrieNode(Generic[T]):
    """One label of a registered suffix.

    label and parent are fixed at creation. children only grows, and
    only through DomainSuffixTrie.insert(). The value slot can be set,
    overwritten or cleared at any time.
    """

    __slots__ = ("_label", "_parent", "_children", "_value")

    def __init__(self, label: str = "", parent: TrieNode[T] | None = None) -> None:
        self._label = label
        self._parent = parent
        self._children: dict[str, TrieNode[T]] = {}
        self._value: object = _MISSING

    def __repr__(self) -> str:
        if self.is_root:
            return "TrieNode(<root>)"
        if self.has_value:
            return f"TrieNode({self.path!r}, value={self._value!r})"
        return f"TrieNode({self.path!r})"

    @property
    def label(self) -> str:
        return self._label

    @property
    def parent(self) -> TrieNode[T] | None:
        return self._parent

    @property
    def is_root(self) -> bool:
        return self._parent is None

    @property
    def depth(self) -> int:
        """Number of labels between the root and this node (root is 0)."""
        depth = 0
        node = self._parent
        while node is not None:
            depth += 1
            node = node._parent
        return depth

    @property
    def path(self) -> str:
        """The full suffix this node stands for, e.g. "api.google.com".

        Built by walking parent-ward and joining labels low to high.
        The root's empty label is never part of the path.
        """
        labels: list[str] = []
        node: TrieNode[T] | None = self
        while node is not None and not node.is_root:
            labels.append(node._label)
            node = node._parent
        return ".".join(labels)

    @property
    def has_value(self) -> bool:
        return self._value is not _MISSING

    def get_label(self) -> str:
        return self._label

    def get_path(self) -> str:
        return self.path

    def get_child(self, label: str) -> TrieNode[T] | None:
        return self._children.get(label)

    def get_children(self) -> dict[str, TrieNode[T]]:
        """Return a copy of the children map. Mutating it does not touch the tree."""
        return dict(self._children)

    def get_value(self, default: T | None = None) -> T | None:
        if self._value is _MISSING:
            return default
        return self._value  # type: ignore[return-value]

    def set_value(self, value: T) -> T | None:
        """Attach value to this node and return the previous one (or None)."""
        previous = self._value
        self._value = value
        return None if previous is _MISSING else previous  # type: ignore[return-value]

    def clear_value(self) -> T | None:
        """Drop the attached value, keeping the node. Returns the previous value."""
        previous = self._value
        self._value = _MISSING
        return None if previous is _MISSING else previous  # type: ignore[return-value]

    def _add_child(self, label: str) -> TrieNode[T]:
        child: TrieNode[T] = TrieNode(label, self)
        self._children[label] = child
        return child

    def _iter_subtree(self) -> Iterator[TrieNode[T]]:
        stack: list[TrieNode[T]] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(node._children.values())


class DomainSuffixTrie(Generic[T]):
    """Longest-suffix lookup over reversed domain labels.

    Not thread-safe. Single-threaded callers can use it directly;
    everything else should go through SyncDomainSuffixTrie.

    The trie-level accessors (get_value, set_value, get_child, ...)
    operate on the root node.
    """

    def __init__(self) -> None:
        self._root: TrieNode[T] = TrieNode()

    def __len__(self) -> int:
        return self.suffix_count

    def __contains__(self, suffix: object) -> bool:
        if not isinstance(suffix, str) or not suffix:
            return False
        node = self._find_exact(suffix)
        return node is not None and node.has_value

    def __iter__(self) -> Iterator[str]:
        for path, _ in self.suffixes():
            yield path

    @property
    def root(self) -> TrieNode[T]:
        return self._root

    @property
    def suffix_count(self) -> int:
        """Number of distinct suffixes holding a value. The root is not counted."""
        return sum(
            1 for node in self._root._iter_subtree()
            if node.has_value and not node.is_root
        )

    def insert(self, suffix: str, value: T) -> None:
        """Register suffix with value, overwriting any earlier value.

        Labels are walked from the last one to the first, creating
        nodes on the way as needed. Raises EmptySuffixError for "",
        before anything is touched. No other validation is done:
        "a..b" or "-.com" are stored as given.
        """
        if suffix == "":
            raise EmptySuffixError()

        labels = suffix.split(".")
        node = self._root
        created = 0
        for label in reversed(labels):
            child = node._children.get(label)
            if child is None:
                child = node._add_child(label)
                created += 1
            node = child

        if node.has_value:
            log.debug("Overwriting value for suffix %r", suffix)
        node.set_value(value)
        log.debug("Inserted suffix %r (%d new node(s))", suffix, created)

    def match(self, domain: str) -> TrieNode[T]:
        """Return the deepest existing node along domain's label path.

        Walks labels right to left and stops at the first label with
        no child. Returns the root when not even the TLD matches. The
        node returned may have no value (see module docstring).

        An empty domain has no labels and always yields the root, even
        when a suffix ending in "." has put a "" label under the root.
        """
        node = self._root
        if not domain:
            return node
        for label in reversed(domain.split(".")):
            child = node._children.get(label)
            if child is None:
                break
            node = child
        return node

    def match_value(self, domain: str, default: T | None = None) -> T | None:
        """Value of the node match() returns, or default if it has none."""
        return self.match(domain).get_value(default)

    def match_registered(self, domain: str) -> TrieNode[T] | None:
        """Return the deepest node on domain's path that holds a value.

        Unlike match(), value-less intermediate nodes are skipped over,
        so this answers "which registered suffix covers this domain".
        Returns None when no suffix covers it.
        """
        node = self._root
        found = node if node.has_value else None
        if not domain:
            return found
        for label in reversed(domain.split(".")):
            child = node._children.get(label)
            if child is None:
                break
            node = child
            if node.has_value:
                found = node
        return found

    def suffixes(self) -> list[tuple[str, T]]:
        """(path, value) for every node holding a value, depth-first."""
        return [
            (node.path, node._value)  # type: ignore[misc]
            for node in self._root._iter_subtree()
            if node.has_value and not node.is_root
        ]

    def node_count(self) -> int:
        """Count total nodes in the trie, root included."""
        return sum(1 for _ in self._root._iter_subtree())

    def get_label(self) -> str:
        return self._root.get_label()

    def get_path(self) -> str:
        return self._root.get_path()

    def get_child(self, label: str) -> TrieNode[T] | None:
        return self._root.get_child(label)

    def get_children(self) -> dict[str, TrieNode[T]]:
        return self._root.get_children()

    def get_value(self, default: T | None = None) -> T | None:
        return self._root.get_value(default)

    def set_value(self, value: T) -> T | None:
        """Set the root's value, i.e. the fallback returned by match_value()."""
        return self._root.set_value(value)

    def _find_exact(self, suffix: str) -> TrieNode[T] | None:
        node = self._root
        for label in reversed(suffix.split(".")):
            child = node._children.get(label)
            if child is None:
                return None
            node = child
        return node
