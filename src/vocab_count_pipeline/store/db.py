"""
store/db.py

What this file does:
- Defines the SQLite schema for a built vocabulary (vocab state DB).
- Provides connect(), init_db() and helpers to save/load a vocabulary run.

How it fits:
- vocab_count(..., db_path=...) writes:
  - vocab_stats (rank, word, count, log_count), replaced on every build
  - runs (one row per build: config hash, corpus, token/word counts)
  - meta (schema version + last build config)
- store/export.py and scripts/ read it back.

Notes:
- word is stored as BLOB: tokens are raw bytes, not necessarily UTF-8.
"""

from __future__ import annotations

import json
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional

from ..vocab.state import CountEntry

SCHEMA_VERSION = 1

DDL = """
PRAGMA journal_mode=WAL;

CREATE TABLE IF NOT EXISTS meta (
  key TEXT PRIMARY KEY,
  value TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS vocab_stats (
  rank INTEGER PRIMARY KEY,
  word BLOB NOT NULL UNIQUE,
  count INTEGER NOT NULL,
  log_count REAL NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_vocab_stats_count ON vocab_stats(count);

CREATE TABLE IF NOT EXISTS runs (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  kind TEXT NOT NULL,
  created_at TEXT NOT NULL,
  config_hash TEXT NOT NULL,
  corpus_path TEXT,
  tokens_processed INTEGER NOT NULL,
  unique_words INTEGER NOT NULL,
  vocab_size INTEGER NOT NULL,
  notes TEXT
);

CREATE INDEX IF NOT EXISTS idx_runs_kind ON runs(kind);
"""

def connect(db_path: str | Path) -> sqlite3.Connection:
  conn = sqlite3.connect(str(db_path))
  conn.row_factory = sqlite3.Row
  return conn

def init_db(conn: sqlite3.Connection) -> None:
  conn.executescript(DDL)
  meta_put(conn, "schema_version", SCHEMA_VERSION)
  conn.commit()

def meta_put(conn: sqlite3.Connection, key: str, value: object) -> None:
  conn.execute("INSERT OR REPLACE INTO meta(key, value) VALUES(?, ?)", (key, str(value)))

def read_meta(conn: sqlite3.Connection) -> dict[str, str]:
  rows = conn.execute("SELECT key, value FROM meta").fetchall()
  return {r["key"]: r["value"] for r in rows}


def save_vocab(
  conn: sqlite3.Connection,
  entries: Iterable[CountEntry],
  config: dict,
  config_hash: str,
  tokens_processed: int,
  unique_words: int,
  corpus_path: Optional[str] = None,
  kind: str = "vocab_count",
) -> int:
  """Replace vocab_stats with `entries` (already in rank order) and log the run."""
  now = datetime.now(timezone.utc).isoformat()

  conn.execute("DELETE FROM vocab_stats")
  n = 0
  for rank, e in enumerate(entries, start=1):
    conn.execute(
      "INSERT INTO vocab_stats(rank, word, count, log_count) VALUES(?,?,?,?)",
      (rank, e.word, e.count, e.log_count),
    )
    n = rank

  conn.execute(
    """
    INSERT INTO runs(kind, created_at, config_hash, corpus_path, tokens_processed, unique_words, vocab_size, notes)
    VALUES(?,?,?,?,?,?,?,?)
    """,
    (kind, now, config_hash, corpus_path, tokens_processed, unique_words, n, None),
  )

  meta_put(conn, "built_at", now)
  meta_put(conn, "config_json", json.dumps(config, sort_keys=True))
  meta_put(conn, "config_hash", config_hash)
  meta_put(conn, "vocab_size", n)
  conn.commit()
  return n


def load_vocab(conn: sqlite3.Connection, limit: int = 0) -> list[CountEntry]:
  sql = "SELECT word, count FROM vocab_stats ORDER BY rank"
  if limit > 0:
    rows = conn.execute(sql + " LIMIT ?", (limit,)).fetchall()
  else:
    rows = conn.execute(sql).fetchall()
  return [CountEntry(bytes(r["word"]), int(r["count"])) for r in rows]
