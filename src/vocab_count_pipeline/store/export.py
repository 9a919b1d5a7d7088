"""
store/export.py

Tabular views of a built vocabulary (pandas).

Used by scripts/dump_vocab.py (CSV export) and scripts/inspect_vocab.py
(frequency distribution report). Tokens are bytes; for display they are
decoded as UTF-8 with backslash escapes for anything that is not.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

import pandas as pd

from ..vocab.state import CountEntry
from .db import connect

COLUMNS = ["rank", "word", "count", "share", "cumulative_share", "log_count"]


def decode_word(word: bytes) -> str:
    return word.decode("utf-8", errors="backslashreplace")


def vocab_frame(entries: Iterable[CountEntry]) -> pd.DataFrame:
    rows = [
        {"rank": i, "word": decode_word(e.word), "count": e.count, "log_count": e.log_count}
        for i, e in enumerate(entries, start=1)
    ]
    if not rows:
        return pd.DataFrame(columns=COLUMNS)

    df = pd.DataFrame(rows)
    total = int(df["count"].sum())
    df["share"] = df["count"] / total
    df["cumulative_share"] = df["share"].cumsum()
    return df[COLUMNS]


def vocab_frame_from_db(db_path: str | Path) -> pd.DataFrame:
    db_path = Path(db_path)
    if not db_path.exists():
        raise FileNotFoundError(f"Vocab DB not found: {db_path}")
    conn = connect(db_path)
    try:
        raw = pd.read_sql_query("SELECT rank, word, count FROM vocab_stats ORDER BY rank", conn)
    finally:
        conn.close()
    entries = [CountEntry(bytes(w), int(c)) for w, c in zip(raw["word"], raw["count"])]
    return vocab_frame(entries)


def coverage_ranks(df: pd.DataFrame, targets: Sequence[float] = (0.5, 0.9, 0.95, 0.99)) -> Dict[float, int]:
    """
    For each target share of all counted occurrences, the smallest number of
    top-ranked words that reaches it.
    """
    out: Dict[float, int] = {}
    if df.empty:
        return {t: 0 for t in targets}
    cum = df["cumulative_share"].to_numpy()
    for t in targets:
        hits = (cum >= t - 1e-12).nonzero()[0]
        out[t] = int(hits[0]) + 1 if len(hits) else len(df)
    return out


def count_buckets(df: pd.DataFrame) -> List[Dict[str, object]]:
    """Words per decade of count: 1-9, 10-99, 100-999, ..."""
    if df.empty:
        return []
    decade = df["count"].map(lambda c: int(math.log10(c)))
    grouped = df.groupby(decade)["count"].agg(["size", "sum"])
    out: List[Dict[str, object]] = []
    for d, row in grouped.iterrows():
        lo = 10 ** int(d)
        out.append({
            "range": f"{lo}-{lo * 10 - 1}",
            "words": int(row["size"]),
            "occurrences": int(row["sum"]),
        })
    return out
