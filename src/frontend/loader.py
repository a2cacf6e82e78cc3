from __future__ import annotations
import logging
import os
from typing import Iterable, List, TextIO

from fuzzmatch.config import EXCLUDE_DIRS, INCLUDE_EXTS

log = logging.getLogger(__name__)

# Progress logging (set FUZZMATCH_VERBOSE=1 to enable)
VERBOSE = os.environ.get("FUZZMATCH_VERBOSE") == "1"
PROGRESS_EVERY_FILES = 500


def _iter_files(sources: Iterable[str]) -> Iterable[str]:
    """Yield files: plain paths as given, folders walked for INCLUDE_EXTS."""
    exts = tuple(INCLUDE_EXTS)
    for src in sources:
        if os.path.isfile(src):
            yield src
            continue
        for dirpath, dirnames, filenames in os.walk(os.path.abspath(src)):
            dirnames[:] = sorted(d for d in dirnames if d not in EXCLUDE_DIRS)
            for fn in sorted(filenames):
                if fn.lower().endswith(exts):
                    yield os.path.join(dirpath, fn)


def load_lines(stream: TextIO) -> List[str]:
    """Non-empty lines of a text stream, EOL stripped, order kept."""
    return [ln for ln in (raw.rstrip("\r\n") for raw in stream) if ln.strip()]


def load_candidates(sources: Iterable[str]) -> List[str]:
    """
    Read candidate strings (one per line) from files and folders.
    Missing sources raise FileNotFoundError; unreadable files are skipped.
    """
    sources = list(sources)
    for src in sources:
        if not os.path.exists(src):
            raise FileNotFoundError(src)

    candidates: List[str] = []
    file_count = 0
    for path in _iter_files(sources):
        try:
            with open(path, "r", encoding="utf-8", errors="ignore") as f:
                candidates.extend(load_lines(f))
        except OSError as exc:
            log.warning("skipping %s: %s", path, exc)
            continue
        file_count += 1
        if VERBOSE and file_count % PROGRESS_EVERY_FILES == 0:
            log.info("[scanned] files=%d candidates=%d", file_count, len(candidates))

    log.info("Loaded %d candidates from %d files", len(candidates), file_count)
    return candidates
