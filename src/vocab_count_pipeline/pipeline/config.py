"""
pipeline/config.py

Run configuration for a vocabulary build, passed explicitly to every stage.

The JSON form (sorted keys) is hashed and stored with each run in the state DB,
so two vocabularies can be checked for having been built the same way.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from ..tokens.source import MAX_TOKEN_LENGTH
from ..vocab.table import DEFAULT_BUCKET_COUNT


@dataclass(frozen=True)
class VocabCountConfig:
    min_count: int = 1
    max_vocab: int = 0  # 0 = no limit
    verbosity: int = 2  # 0, 1, or 2
    log_file: Optional[str] = None  # None = stderr
    max_token_length: int = MAX_TOKEN_LENGTH
    bucket_count: int = DEFAULT_BUCKET_COUNT

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.min_count < 1:
            raise ValueError(f"min_count must be >= 1, got {self.min_count}")
        if self.max_vocab < 0:
            raise ValueError(f"max_vocab must be >= 0, got {self.max_vocab}")
        if self.verbosity not in (0, 1, 2):
            raise ValueError(f"verbosity must be 0, 1 or 2, got {self.verbosity}")
        if self.max_token_length <= 0:
            raise ValueError(f"max_token_length must be positive, got {self.max_token_length}")
        if self.bucket_count <= 0:
            raise ValueError(f"bucket_count must be positive, got {self.bucket_count}")

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        if d["log_file"] is not None:
            d["log_file"] = str(Path(d["log_file"]))
        return d

    def config_hash(self) -> str:
        # verbosity and log_file do not change the vocabulary
        d = self.to_dict()
        d.pop("verbosity")
        d.pop("log_file")
        payload = json.dumps(d, sort_keys=True)
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()
