"""
utils/io.py

What this file does:
- Opens the corpus and output streams (binary; "-" means stdin/stdout).
- Writes a ranked vocabulary as "<token> <count>" lines, and reads such a file back.

How it fits:
- This is the only place where the vocabulary file format matters.
- Open failures become ResourceUnavailable so the run aborts before counting.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator

from ..errors import ResourceUnavailable
from ..vocab.state import CountEntry


@contextmanager
def open_corpus(path: str | Path) -> Iterator[BinaryIO]:
    if str(path) == "-":
        yield sys.stdin.buffer
        return
    try:
        f = Path(path).open("rb")
    except OSError as e:
        raise ResourceUnavailable("corpus file", str(path), e.strerror or str(e)) from e
    with f:
        yield f


@contextmanager
def open_output(path: str | Path) -> Iterator[BinaryIO]:
    if str(path) == "-":
        yield sys.stdout.buffer
        sys.stdout.buffer.flush()
        return
    try:
        f = Path(path).open("wb")
    except OSError as e:
        raise ResourceUnavailable("output file", str(path), e.strerror or str(e)) from e
    with f:
        yield f


def format_entry(entry: CountEntry) -> bytes:
    return entry.word + b" " + str(entry.count).encode("ascii") + b"\n"


def write_vocab(entries: Iterable[CountEntry], sink: BinaryIO) -> int:
    n = 0
    for e in entries:
        sink.write(format_entry(e))
        n += 1
    return n


def read_vocab(path: str | Path) -> list[CountEntry]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Vocabulary file not found: {path}")
    out: list[CountEntry] = []
    with path.open("rb") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.rstrip(b"\r\n")
            if not line:
                continue
            word, sep, count = line.rpartition(b" ")
            if not sep or not word or not count.isdigit():
                raise ValueError(f"{path}:{lineno}: expected '<token> <count>', got {line[:80]!r}")
            out.append(CountEntry(word, int(count)))
    return out
