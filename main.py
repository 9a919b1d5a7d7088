"""
main.py

What this file does:
- Builds data/vocab.txt from data/corpus.txt and saves it into data/vocab.db.

How to run:
- From project root:
  PYTHONPATH=src python main.py
or, with your own arguments:
  PYTHONPATH=src python -m vocab_count_pipeline.pipeline.vocab_count --corpus data/corpus.txt --out data/vocab.txt
"""

from __future__ import annotations

import sys

from vocab_count_pipeline.pipeline.vocab_count import main

if __name__ == "__main__":
    sys.exit(main([
        "--corpus", "data/corpus.txt",
        "--out", "data/vocab.txt",
        "--db", "data/vocab.db",
        "--min-count", "5",        # <-- change if needed
        "--max-vocab", "0",
        "--verbose", "2",
    ]))
