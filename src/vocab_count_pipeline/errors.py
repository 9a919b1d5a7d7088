"""
errors.py

Fatal conditions raised while building a vocabulary.

Nothing here is retried: a failed run is re-run from scratch.
"""

from __future__ import annotations


class VocabCountError(Exception):
  pass


class ResourceUnavailable(VocabCountError):
  """A corpus, output or diagnostic sink could not be opened."""

  def __init__(self, kind: str, path: str, reason: str) -> None:
    super().__init__(f"Error opening {kind}: {path}: {reason}")
    self.kind = kind
    self.path = path
    self.reason = reason


class OutOfMemory(VocabCountError):
  """Allocation failed while growing the counting table or the drained entries."""
