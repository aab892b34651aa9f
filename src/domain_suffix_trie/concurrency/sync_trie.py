"""Thread-safe DomainSuffixTrie behind one whole-tree read-write lock.

Every call takes the same ReadWriteLock: insert() and set_value() in
write mode, everything else in read mode. Lookups run in parallel with
each other; an insert excludes all of them for one O(depth) walk, so no
reader can ever see a node that is only half linked in.

There are no per-node locks and no atomic payloads. The lock covers the
whole tree and nothing finer.

Nodes handed back by match() and get_child() are the core's own nodes.
Read from them freely, but do not call set_value()/clear_value() on them
directly while other threads are using the wrapper; go through the
wrapper's set_value() (root) or insert() (any suffix) instead.
"""
from __future__ import annotations

from typing import Generic, Iterator, TypeVar

from domain_suffix_trie.concurrency.rwlock import ReadWriteLock
from domain_suffix_trie.trie import DomainSuffixTrie, TrieNode

T = TypeVar("T")


class SyncDomainSuffixTrie(Generic[T]):
    """DomainSuffixTrie wrapped in a single read-write lock.

    Args:
        trie: An existing trie to take ownership of. A fresh one is
            created if omitted. Once wrapped, the caller should stop
            using the trie directly.
    """

    def __init__(self, trie: DomainSuffixTrie[T] | None = None) -> None:
        self._trie: DomainSuffixTrie[T] = trie if trie is not None else DomainSuffixTrie()
        self._lock = ReadWriteLock()

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._trie)

    def __contains__(self, suffix: object) -> bool:
        with self._lock.read():
            return suffix in self._trie

    def __iter__(self) -> Iterator[str]:
        # Snapshot under the lock; the caller iterates without holding it.
        with self._lock.read():
            paths = list(self._trie)
        return iter(paths)

    def insert(self, suffix: str, value: T) -> None:
        with self._lock.write():
            self._trie.insert(suffix, value)

    def match(self, domain: str) -> TrieNode[T]:
        with self._lock.read():
            return self._trie.match(domain)

    def match_value(self, domain: str, default: T | None = None) -> T | None:
        with self._lock.read():
            return self._trie.match_value(domain, default)

    def match_registered(self, domain: str) -> TrieNode[T] | None:
        with self._lock.read():
            return self._trie.match_registered(domain)

    def get_value(self, default: T | None = None) -> T | None:
        with self._lock.read():
            return self._trie.get_value(default)

    def set_value(self, value: T) -> T | None:
        with self._lock.write():
            return self._trie.set_value(value)

    def get_child(self, label: str) -> TrieNode[T] | None:
        with self._lock.read():
            return self._trie.get_child(label)

    def get_children(self) -> dict[str, TrieNode[T]]:
        with self._lock.read():
            return self._trie.get_children()

    def get_label(self) -> str:
        with self._lock.read():
            return self._trie.get_label()

    def get_path(self) -> str:
        with self._lock.read():
            return self._trie.get_path()

    def suffixes(self) -> list[tuple[str, T]]:
        with self._lock.read():
            return self._trie.suffixes()

    @property
    def suffix_count(self) -> int:
        with self._lock.read():
            return self._trie.suffix_count

    def node_count(self) -> int:
        with self._lock.read():
            return self._trie.node_count()
