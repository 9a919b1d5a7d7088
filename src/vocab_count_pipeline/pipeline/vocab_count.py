"""
pipeline/vocab_count.py

Builds a word-frequency vocabulary from a corpus:
  1) Open the diagnostic sink (fatal if it cannot be opened)
  2) Open corpus and output streams
  3) Stream tokens into the counting table (single pass)
  4) Drain the table and rank the entries (size limit, tie-break, min count)
  5) Write "<token> <count>" lines in rank order
  6) Optionally save the vocabulary + run provenance into a SQLite DB

How to run:
  vocab-count --corpus data/corpus.txt --out data/vocab.txt --min-count 5
or
  PYTHONPATH=src python -m vocab_count_pipeline.pipeline.vocab_count < corpus.txt > vocab.txt
"""

from __future__ import annotations

import argparse
import logging
import sqlite3
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, List, Optional

from ..errors import OutOfMemory, ResourceUnavailable, VocabCountError
from ..store.db import connect, init_db, save_vocab
from ..tokens.source import iter_tokens
from ..utils.diagnostics import close_logging, configure_logging
from ..utils.io import open_corpus, open_output, write_vocab
from ..vocab.rank import rank, rank_report
from ..vocab.state import CountEntry, count_tokens
from ..vocab.table import CountingTable
from .config import VocabCountConfig

logger = logging.getLogger("vocab_count_pipeline")


@dataclass
class VocabCountResult:
    tokens_processed: int
    unique_words: int
    vocab_size: int
    truncated_at_min_count: bool = False
    truncated_at_size: bool = False
    entries: List[CountEntry] = field(default_factory=list, repr=False)


def get_counts(corpus: BinaryIO, out: BinaryIO, config: VocabCountConfig) -> VocabCountResult:
    """Count, rank and emit. Streams are opened and closed by the caller."""
    logger.info("BUILDING VOCABULARY")

    table = CountingTable(bucket_count=config.bucket_count)
    count_tokens(
        iter_tokens(corpus, max_length=config.max_token_length),
        table,
        verbosity=config.verbosity,
    )
    tokens_processed = table.total
    unique_words = len(table)
    if config.verbosity > 1:
        logger.debug(f"Counted {unique_words} unique words.")

    try:
        vocab = rank(table.drain(), max_size=config.max_vocab, min_count=config.min_count)
    except MemoryError as e:
        raise OutOfMemory(f"out of memory while ranking {unique_words} words") from e

    report = rank_report(unique_words, config.max_vocab, vocab)
    if report.truncated_at_min_count and config.verbosity > 0:
        logger.info(f"Truncating vocabulary at min count {config.min_count}.")

    write_vocab(vocab, out)

    if report.truncated_at_size and config.verbosity > 0:
        logger.info(f"Truncating vocabulary at size {report.size_limit}.")
    logger.info(f"Using vocabulary of size {len(vocab)}.")

    return VocabCountResult(
        tokens_processed=tokens_processed,
        unique_words=unique_words,
        vocab_size=len(vocab),
        truncated_at_min_count=report.truncated_at_min_count,
        truncated_at_size=report.truncated_at_size,
        entries=vocab,
    )


def vocab_count(
    corpus_path: str | Path,
    output_path: str | Path,
    config: Optional[VocabCountConfig] = None,
    db_path: str | Path | None = None,
) -> VocabCountResult:
    config = config or VocabCountConfig()

    configure_logging(config.verbosity, config.log_file)
    try:
        with open_corpus(corpus_path) as corpus, open_output(output_path) as out:
            result = get_counts(corpus, out, config)

        if db_path is not None:
            try:
                conn = connect(db_path)
                try:
                    init_db(conn)
                    save_vocab(
                        conn,
                        result.entries,
                        config=config.to_dict(),
                        config_hash=config.config_hash(),
                        tokens_processed=result.tokens_processed,
                        unique_words=result.unique_words,
                        corpus_path=str(corpus_path),
                    )
                finally:
                    conn.close()
            except sqlite3.Error as e:
                raise ResourceUnavailable("vocab DB", str(db_path), str(e)) from e
            if config.verbosity > 0:
                logger.info(f"Saved vocabulary to {db_path}")
    except VocabCountError as e:
        logger.error(str(e))
        raise
    finally:
        close_logging()
    return result


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="vocab-count",
        description="Build a frequency-ranked vocabulary ('<token> <count>' lines) from a whitespace-tokenized corpus.",
    )
    ap.add_argument("--corpus", default="-", help="Corpus file, '-' for stdin (default).")
    ap.add_argument("--out", default="-", help="Output vocabulary file, '-' for stdout (default).")
    ap.add_argument("--min-count", type=int, default=1, help="Lower limit on word occurrences; rarer words are dropped.")
    ap.add_argument("--max-vocab", type=int, default=0, help="Upper bound on vocabulary size (0 = no limit).")
    ap.add_argument("--verbose", type=int, default=2, choices=[0, 1, 2], help="Diagnostic verbosity.")
    ap.add_argument("--log-file", default=None, help="Write diagnostics here instead of stderr.")
    ap.add_argument("--db", default=None, help="Also save the vocabulary into this SQLite DB.")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    try:
        config = VocabCountConfig(
            min_count=args.min_count,
            max_vocab=args.max_vocab,
            verbosity=args.verbose,
            log_file=args.log_file,
        )
    except ValueError as e:
        ap.error(str(e))

    try:
        vocab_count(args.corpus, args.out, config, db_path=args.db)
    except VocabCountError as e:
        print(f"vocab-count: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
