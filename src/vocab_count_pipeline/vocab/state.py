"""
vocab/state.py

What this file does:
- Defines CountEntry, the (word, count) record shared by the table, the ranker and the emitter.
- Folds a token stream into a counting table, reporting progress as it goes.

How it fits:
- pipeline/vocab_count.py calls count_tokens() with tokens from tokens/source.py.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional

from ..errors import OutOfMemory

if TYPE_CHECKING:
  from .table import CountingTable

logger = logging.getLogger("vocab_count_pipeline")

PROGRESS_EVERY = 100000


@dataclass(frozen=True)
class CountEntry:
  word: bytes
  count: int

  @property
  def log_count(self) -> float:
    return math.log1p(self.count)


def count_tokens(
  tokens: Iterable[bytes],
  table: Optional["CountingTable"] = None,
  verbosity: int = 0,
  progress_every: int = PROGRESS_EVERY,
) -> "CountingTable":
  if table is None:
    from .table import CountingTable
    table = CountingTable()

  n = 0
  t0 = time.time()
  try:
    for tok in tokens:
      table.observe(tok)
      n += 1
      if verbosity > 1 and n % progress_every == 0:
        dt = time.time() - t0
        rate = n / dt if dt > 0 else 0.0
        logger.debug(f"Processed {n} tokens. ({rate:,.0f} tokens/s)")
  except MemoryError as e:
    raise OutOfMemory(f"out of memory after {n} tokens ({len(table)} unique)") from e

  if verbosity > 1:
    logger.debug(f"Processed {n} tokens.")
  return table
