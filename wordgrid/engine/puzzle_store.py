"""Persistent puzzle document store.

Every saved puzzle is a JSON document under ``local_db/puzzles/``. The
``grid`` and ``words`` fields keep the exact shape the renderer reads; the
store adds ``id``, ``created_at``, ``theme`` and ``coverage`` around them.
"""

from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from ..core.exceptions import WordGridError
from ..core.models import PuzzleResult
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

DEFAULT_STORE_DIR = Path("local_db/puzzles")


def dump_puzzle(result: PuzzleResult, path: Path | str) -> Path:
    """Write the bare ``{grid, words}`` document to ``path``."""

    destination = Path(path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(json.dumps(result.to_jsonable(), indent=2), encoding="utf-8")
    return destination


class PuzzleStore:
    """Save generated puzzles as JSON documents and read them back."""

    def __init__(self, store_dir: Path | str = DEFAULT_STORE_DIR) -> None:
        self.store_dir = Path(store_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------
    def save(self, result: PuzzleResult) -> str:
        """Persist ``result`` and return its document ID."""
        doc_id = self._new_id()
        doc: Dict[str, Any] = {
            "id": doc_id,
            "created_at": datetime.now(timezone.utc).isoformat(),
            "theme": result.theme,
            "coverage": result.coverage,
        }
        doc.update(result.to_jsonable())

        path = self.store_dir / f"{doc_id}.json"
        path.write_text(json.dumps(doc, indent=2), encoding="utf-8")
        LOGGER.info("Puzzle saved: %s", doc_id)
        return doc_id

    def load(self, doc_id: str) -> PuzzleResult:
        path = self.store_dir / f"{doc_id}.json"
        if not path.exists():
            raise WordGridError(f"No stored puzzle with id {doc_id}")
        payload = json.loads(path.read_text(encoding="utf-8"))
        try:
            return PuzzleResult.from_jsonable(payload)
        except KeyError as exc:
            raise WordGridError(f"Stored puzzle {doc_id} is missing field {exc}") from exc

    def list_ids(self) -> List[str]:
        return sorted(path.stem for path in self.store_dir.glob("*.json"))

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _new_id() -> str:
        ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        short_uuid = uuid.uuid4().hex[:8]
        return f"{ts}_{short_uuid}"
