"""Shared fixtures for trie tests."""

from __future__ import annotations

import pytest

from domain_suffix_trie import DomainSuffixTrie, SyncDomainSuffixTrie

# suffix -> payload
SUFFIXES = {
    "com": "generic",
    "google.com": "google",
    "map.google.com": "google-maps",
    "baidu.com": "baidu",
    "jd.com": "jd",
    "api.openai.com": "openai-api",
    "stripe.com": "stripe",
    "s3.amazonaws.com": "s3",
    "co.uk": "uk-commercial",
    "evilcorp.co.uk": "evilcorp",
    "localhost": "loopback",
}

# query -> expected payload under longest-suffix matching
QUERIES = {
    "google.com": "google",
    "www.google.com": "google",
    "x.map.google.com": "google-maps",
    "map.google.com": "google-maps",
    "test.baidu.com": "baidu",
    "example.com": "generic",
    "chat.openai.com": None,  # stops at the value-less "openai" node
    "v1.api.openai.com": "openai-api",
    "bucket.s3.amazonaws.com": "s3",
    "ec2.amazonaws.com": None,
    "www.evilcorp.co.uk": "evilcorp",
    "bbc.co.uk": "uk-commercial",
    "localhost": "loopback",
    "example.org": None,
    "": None,
}


@pytest.fixture
def populated_trie() -> DomainSuffixTrie[str]:
    trie: DomainSuffixTrie[str] = DomainSuffixTrie()
    for suffix, value in SUFFIXES.items():
        trie.insert(suffix, value)
    return trie


@pytest.fixture
def populated_sync_trie() -> SyncDomainSuffixTrie[str]:
    trie: SyncDomainSuffixTrie[str] = SyncDomainSuffixTrie()
    for suffix, value in SUFFIXES.items():
        trie.insert(suffix, value)
    return trie
