#!/usr/bin/env python3
"""
scripts/dump_vocab.py

Export a built vocabulary to CSV (rank, word, count, share, cumulative_share, log_count).

Input is either the SQLite DB written by `vocab-count --db` or a plain
"<token> <count>" vocabulary file.

Usage:
  PYTHONPATH=src python scripts/dump_vocab.py --db data/vocab.db --out data/vocab_stats_full.csv
  PYTHONPATH=src python scripts/dump_vocab.py --vocab data/vocab.txt --out data/vocab_stats_full.csv
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from vocab_count_pipeline.store.export import vocab_frame, vocab_frame_from_db
from vocab_count_pipeline.utils.io import read_vocab


def main() -> None:
    ap = argparse.ArgumentParser()
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--db", help="SQLite DB written by vocab-count --db")
    src.add_argument("--vocab", help="'<token> <count>' vocabulary file")
    ap.add_argument("--out", required=True, help="Output CSV path")
    args = ap.parse_args()

    if args.db:
        df = vocab_frame_from_db(args.db)
    else:
        df = vocab_frame(read_vocab(args.vocab))

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out_path, index=False, encoding="utf-8")

    print(f"✅ Wrote {len(df):,} words to {out_path}", file=sys.stderr)


if __name__ == "__main__":
    main()
