"""Longest domain-suffix matching over a reversed-label trie.

  - DomainSuffixTrie: unsynchronized core, single-threaded use
  - SyncDomainSuffixTrie: the same API behind one read-write lock
"""
from domain_suffix_trie.concurrency.sync_trie import SyncDomainSuffixTrie
from domain_suffix_trie.trie import (
    DomainSuffixTrie,
    DomainSuffixTrieError,
    EmptySuffixError,
    TrieNode,
)

__all__ = [
    "DomainSuffixTrie",
    "DomainSuffixTrieError",
    "EmptySuffixError",
    "SyncDomainSuffixTrie",
    "TrieNode",
]
