#!/usr/bin/env python3
"""
scripts/inspect_vocab.py

Print a report on a built vocabulary:
- size and total occurrences
- how many top-ranked words cover 50/90/95/99% of occurrences
- words per count decade (1-9, 10-99, ...)
- top words
- last build's meta (DB input only)

Typical usage:
  PYTHONPATH=src python scripts/inspect_vocab.py --db data/vocab.db
  PYTHONPATH=src python scripts/inspect_vocab.py --vocab data/vocab.txt --top 50
"""

from __future__ import annotations

import argparse
from pathlib import Path

from vocab_count_pipeline.store.db import connect, read_meta
from vocab_count_pipeline.store.export import coverage_ranks, count_buckets, vocab_frame, vocab_frame_from_db
from vocab_count_pipeline.utils.io import read_vocab


def hr(ch: str = "=", n: int = 72) -> str:
    return ch * n

def fmt_int(n: int) -> str:
    return f"{n:,}"

def fmt_pct(a: int, b: int) -> str:
    if b <= 0:
        return "0.0%"
    return f"{(100.0 * a / b):.1f}%"


def main() -> None:
    ap = argparse.ArgumentParser()
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--db", help="SQLite DB written by vocab-count --db")
    src.add_argument("--vocab", help="'<token> <count>' vocabulary file")
    ap.add_argument("--top", type=int, default=25)
    args = ap.parse_args()

    if args.db:
        df = vocab_frame_from_db(args.db)
    else:
        df = vocab_frame(read_vocab(args.vocab))

    n_words = len(df)
    total = int(df["count"].sum()) if n_words else 0

    print(hr())
    print(f"Vocabulary: {args.db or args.vocab}")
    print(hr())
    print(f"words:        {fmt_int(n_words)}")
    print(f"occurrences:  {fmt_int(total)}")
    if n_words:
        print(f"min count:    {fmt_int(int(df['count'].min()))}")
        print(f"max count:    {fmt_int(int(df['count'].max()))}")

    print()
    print("Coverage (top-k words reaching share of occurrences)")
    print(hr("-"))
    for target, k in coverage_ranks(df).items():
        print(f"  {target:>5.0%}  k={fmt_int(k):>10}  ({fmt_pct(k, n_words)} of words)")

    print()
    print("Words per count range")
    print(hr("-"))
    for b in count_buckets(df):
        print(f"  {b['range']:>16}  words={fmt_int(b['words']):>10}  occ={fmt_pct(b['occurrences'], total):>6}")

    print()
    print(f"Top {args.top}")
    print(hr("-"))
    for _, row in df.head(args.top).iterrows():
        print(f"  {int(row['rank']):>6}  {row['word']:<30} {fmt_int(int(row['count'])):>12}  cum={row['cumulative_share']:.3f}")

    if args.db:
        conn = connect(Path(args.db))
        try:
            meta = read_meta(conn)
        finally:
            conn.close()
        print()
        print("Meta")
        print(hr("-"))
        for key in sorted(meta):
            print(f"  {key}: {meta[key]}")


if __name__ == "__main__":
    main()
