"""
JSON document storage for the product collection.

The whole collection lives in a single JSON file containing an array
of objects.  ``ProductStore.load_all`` reads and parses the entire
document and ``ProductStore.save_all`` overwrites it with the entire
collection; nothing is cached between calls, so the file is the only
source of truth.

There is no locking around a load/modify/save cycle.  Two overlapping
cycles each start from their own copy and the later ``save_all``
overwrites the earlier one's change.

File access runs in a worker thread so that awaiting coroutines do not
block the event loop.
"""

from __future__ import annotations

import asyncio
import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Union

Product = Dict[str, Any]


class StorageError(Exception):
    """The products document could not be read, parsed or written."""


class ProductStore:
    """Read and overwrite the products document at ``path``."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    async def load_all(self) -> List[Product]:
        """Return every product stored in the document.

        Raises ``StorageError`` if the file is missing or unreadable, is
        not valid JSON, or does not hold a JSON array.
        """
        return await asyncio.to_thread(self._read)

    async def save_all(self, products: List[Product]) -> None:
        """Replace the document with ``products``.

        Raises ``StorageError`` on any write failure; the previous
        document is left in place in that case.
        """
        await asyncio.to_thread(self._write, products)

    def _read(self) -> List[Product]:
        try:
            raw = self.path.read_text(encoding="utf-8")
            data = json.loads(raw)
        except (OSError, ValueError) as exc:
            raise StorageError(str(exc)) from exc
        if not isinstance(data, list):
            raise StorageError(f"{self.path} does not contain a JSON array")
        return data

    def _write(self, products: List[Product]) -> None:
        try:
            payload = serialize(products)
        except (TypeError, ValueError) as exc:
            raise StorageError(str(exc)) from exc

        tmp_name = None
        try:
            # Write next to the target so the final replace stays on one
            # filesystem.
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            if self.path.exists():
                shutil.copymode(self.path, tmp_name)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(str(exc)) from exc


def serialize(products: List[Product]) -> str:
    """Render the collection exactly as it is written to disk."""
    return json.dumps(products, indent=2, ensure_ascii=False)
