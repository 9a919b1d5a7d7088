"""
vocab/rank.py

What this file does:
- Turns drained CountEntry records into the final vocabulary order.
- Applies the size limit (max_size) and the minimum-count cutoff (min_count).

Order of operations:
  1) if a size limit actually applies, sort ALL entries by count only (ties keep table order)
  2) sort the first M entries by count desc, ties by token bytes asc
  3) stop at the first entry below min_count

Ties at the size boundary are cut in table (hash) order, never alphabetically.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .state import CountEntry


def _by_count(e: CountEntry) -> int:
  return -e.count


def _by_count_then_word(e: CountEntry):
  return (-e.count, e.word)


def effective_size(n: int, max_size: int) -> int:
  if 0 < max_size < n:
    return max_size
  return n


def rank(entries: Sequence[CountEntry], max_size: int = 0, min_count: int = 1) -> List[CountEntry]:
  vocab = list(entries)
  m = effective_size(len(vocab), max_size)
  if m < len(vocab):
    vocab.sort(key=_by_count)
  head = sorted(vocab[:m], key=_by_count_then_word)

  out: List[CountEntry] = []
  for e in head:
    if e.count < min_count:
      break
    out.append(e)
  return out


@dataclass(frozen=True)
class RankReport:
  unique_words: int
  size_limit: int
  vocab_size: int

  @property
  def truncated_at_min_count(self) -> bool:
    return self.vocab_size < self.size_limit

  @property
  def truncated_at_size(self) -> bool:
    return self.vocab_size == self.size_limit and self.size_limit < self.unique_words


def rank_report(unique_words: int, max_size: int, result: Sequence[CountEntry]) -> RankReport:
  return RankReport(
    unique_words=unique_words,
    size_limit=effective_size(unique_words, max_size),
    vocab_size=len(result),
  )
