"""The whole-tree lock behind SyncDomainSuffixTrie.

Lookups (match, get_value, get_children, ...) share the lock; insert
and set_value hold it alone. A single Condition guards the reader and
writer bookkeeping. Queued writers go first, so a steady stream of
lookups cannot starve an insert.

Usage:
    lock = ReadWriteLock()

    with lock.read():
        node = trie.match(domain)        # many threads here at once

    with lock.write():
        trie.insert(suffix, value)       # exclusive access
"""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """Shared lock for trie lookups, exclusive lock for trie mutation.

    readers and writer_active report the current state, mostly for
    tests that need to know which mode a wrapper call is holding.

    Not reentrant: a thread holding read() must not call write() (it
    would wait on itself), and nested read() calls can deadlock once
    a writer is queued between them.
    """

    def __init__(self) -> None:
        self._readers: int = 0
        self._writers_waiting: int = 0
        self._writer_active: bool = False
        self._cond = threading.Condition(threading.Lock())

    @property
    def readers(self) -> int:
        """Number of threads currently holding the read lock."""
        with self._cond:
            return self._readers

    @property
    def writer_active(self) -> bool:
        with self._cond:
            return self._writer_active

    @contextmanager
    def read(self) -> Iterator[None]:
        """Acquire read lock. Blocks if a writer is active or waiting."""
        with self._cond:
            while self._writer_active or self._writers_waiting > 0:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        """Acquire write lock. Blocks while readers or another writer are active."""
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer_active or self._readers > 0:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer_active = True
        try:
            yield
        finally:
            with self._cond:
                self._writer_active = False
                self._cond.notify_all()
