"""Thread-safe access to the suffix trie.

  - ReadWriteLock: multiple readers OR one writer, writer preference
  - SyncDomainSuffixTrie: DomainSuffixTrie behind one whole-tree ReadWriteLock
"""
from domain_suffix_trie.concurrency.rwlock import ReadWriteLock
from domain_suffix_trie.concurrency.sync_trie import SyncDomainSuffixTrie

__all__ = [
    "ReadWriteLock",
    "SyncDomainSuffixTrie",
]
