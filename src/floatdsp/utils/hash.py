"""Digests recorded in ``summary.json`` so a run can be matched to its inputs."""

from __future__ import annotations

import hashlib
import json
from functools import partial
from pathlib import Path
from typing import Any

_BLOCK = 1 << 16


def sha256_of_file(path: str | Path) -> str:
    """Hex sha256 of the raw bytes of a series table."""

    digest = hashlib.sha256()
    with Path(path).open("rb") as f:
        for block in iter(partial(f.read, _BLOCK), b""):
            digest.update(block)
    return digest.hexdigest()


def config_sha256(cfg: dict[str, Any]) -> str:
    """Hex sha256 of a resolved config; key order does not change the digest."""

    text = json.dumps(cfg, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
