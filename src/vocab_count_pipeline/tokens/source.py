"""
tokens/source.py

What this file does:
- Splits a binary stream into whitespace-delimited byte tokens, lazily.
- Bounds every token to MAX_TOKEN_LENGTH bytes (longer runs are cut, the rest of the run is dropped).

How it fits:
- The counting table consumes these tokens one at a time in a single pass.
- No normalization happens here: a token is exactly the bytes between whitespace.
"""

from __future__ import annotations

import re
from typing import BinaryIO, Iterator

MAX_TOKEN_LENGTH = 1000
DEFAULT_CHUNK_SIZE = 1 << 16

# C-locale isspace(): space, \t, \n, \v, \f, \r
_WS_RE = re.compile(rb"[ \t\n\r\x0b\x0c]+")


def iter_tokens(
  stream: BinaryIO,
  max_length: int = MAX_TOKEN_LENGTH,
  chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Iterator[bytes]:
  """
  Yield tokens from `stream` without reading it whole.

  A token may straddle two chunks; the partial run at the end of a chunk is
  carried over (already capped at max_length) and completed by the next one.
  """
  if max_length <= 0:
    raise ValueError(f"max_length must be positive, got {max_length}")
  if chunk_size <= 0:
    raise ValueError(f"chunk_size must be positive, got {chunk_size}")

  pending = b""
  while True:
    chunk = stream.read(chunk_size)
    if not chunk:
      break

    parts = _WS_RE.split(chunk)
    if len(parts) == 1:
      # no whitespace in this chunk: the pending run just keeps growing
      if len(pending) < max_length:
        pending = (pending + chunk)[:max_length]
      continue

    head = (pending + parts[0])[:max_length]
    if head:
      yield head
    for part in parts[1:-1]:
      if part:
        yield part[:max_length]
    pending = parts[-1][:max_length]

  if pending:
    yield pending
