"""
vocab/table.py

What this file does:
- Counting table: token -> occurrence count, built one observation at a time.
- Fixed number of buckets, singly linked chains, move-to-front on access.

How it fits:
- The streaming pass calls observe() once per token.
- After the pass, drain() hands every entry to the ranker and empties the table.

Notes:
- The bucket array never grows.
- Chain order changes on lookup (move-to-front); counts never depend on it.
- Enumeration order follows bucket index and chain order. It carries no meaning.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from .state import CountEntry

DEFAULT_BUCKET_COUNT = 1048576
HASH_SEED = 1159241


def bitwise_hash(word: bytes, bucket_count: int = DEFAULT_BUCKET_COUNT, seed: int = HASH_SEED) -> int:
  h = seed
  for b in word:
    c = b - 256 if b > 127 else b  # bytes are read as signed char
    h ^= ((h << 5) + c + (h >> 2)) & 0xFFFFFFFF
  return (h & 0x7FFFFFFF) % bucket_count


class HashRecord:
  __slots__ = ("word", "count", "next")
  def __init__(self, word: bytes) -> None:
    self.word = word
    self.count = 1
    self.next: Optional["HashRecord"] = None


class CountingTable:
  """
  Holds:
  - buckets: list of chain heads (None for an empty bucket)
  - total: number of observations so far
  """

  def __init__(self, bucket_count: int = DEFAULT_BUCKET_COUNT, seed: int = HASH_SEED) -> None:
    if bucket_count <= 0:
      raise ValueError(f"bucket_count must be positive, got {bucket_count}")
    self.bucket_count = bucket_count
    self.seed = seed
    self.buckets: List[Optional[HashRecord]] = [None] * bucket_count
    self.total = 0
    self._size = 0

  def __len__(self) -> int:
    return self._size

  def observe(self, word: bytes) -> None:
    """
    Count one occurrence of `word`.

    A new record goes to the end of its chain. An existing record found past
    the head is unlinked and relinked as the new head.
    """
    hval = bitwise_hash(word, self.bucket_count, self.seed)
    prev = None
    node = self.buckets[hval]
    while node is not None and node.word != word:
      prev = node
      node = node.next

    self.total += 1
    if node is None:
      node = HashRecord(word)
      if prev is None:
        self.buckets[hval] = node
      else:
        prev.next = node
      self._size += 1
      return

    node.count += 1
    if prev is not None:
      prev.next = node.next
      node.next = self.buckets[hval]
      self.buckets[hval] = node

  def count(self, word: bytes) -> int:
    node = self.buckets[bitwise_hash(word, self.bucket_count, self.seed)]
    while node is not None:
      if node.word == word:
        return node.count
      node = node.next
    return 0

  def chain(self, word: bytes) -> List[bytes]:
    """Words in the bucket `word` hashes to, head first."""
    out: List[bytes] = []
    node = self.buckets[bitwise_hash(word, self.bucket_count, self.seed)]
    while node is not None:
      out.append(node.word)
      node = node.next
    return out

  def __iter__(self) -> Iterator[CountEntry]:
    for head in self.buckets:
      node = head
      while node is not None:
        yield CountEntry(node.word, node.count)
        node = node.next

  def drain(self) -> List[CountEntry]:
    """Move every entry out into a list and leave the table empty."""
    entries = list(self)
    self.buckets = [None] * self.bucket_count
    self._size = 0
    self.total = 0
    return entries
