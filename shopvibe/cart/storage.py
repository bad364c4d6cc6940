"""
Cart persistence adapters.

Each adapter owns one named entry in some durable key-value store and
reads or writes the whole cart state at once.
"""

import os
import logging
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from ..errors import CartPersistenceError
from .models import CartState
from .snapshot import encode, decode

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "cart-storage"


class CartStorage(ABC):
    """Scoped persistence for a single cart"""

    def __init__(self, key: str = DEFAULT_STORAGE_KEY):
        self.key = key

    @abstractmethod
    def load(self) -> Optional[CartState]:
        """
        Read the persisted state.

        Returns:
            The stored state, or None if nothing has been saved yet

        Raises:
            CartPersistenceError: storage unreadable or snapshot invalid
        """

    @abstractmethod
    def save(self, state: CartState) -> None:
        """
        Replace the persisted state.

        Raises:
            CartPersistenceError: storage unavailable
        """


class MemoryCartStorage(CartStorage):
    """
    Stores serialized snapshots in a dict.

    Two adapters sharing the same ``backend`` dict and key see each other's
    writes, which is how a page reload is simulated in-process.
    """

    def __init__(self, key: str = DEFAULT_STORAGE_KEY, backend: Optional[dict[str, str]] = None):
        super().__init__(key)
        self.backend = backend if backend is not None else {}

    def load(self) -> Optional[CartState]:
        text = self.backend.get(self.key)
        if text is None:
            return None
        return decode(text)

    def save(self, state: CartState) -> None:
        self.backend[self.key] = encode(state)


class JsonFileCartStorage(CartStorage):
    """Stores the snapshot as ``<directory>/<key>.json``"""

    def __init__(self, directory: str | os.PathLike, key: str = DEFAULT_STORAGE_KEY):
        super().__init__(key)
        self.directory = Path(directory)
        self.path = self.directory / f"{key}.json"

    def load(self) -> Optional[CartState]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise CartPersistenceError(f"Cannot read {self.path}: {e}") from e
        return decode(text)

    def save(self, state: CartState) -> None:
        text = encode(state)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.directory, prefix=f".{self.key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(text)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise CartPersistenceError(f"Cannot write {self.path}: {e}") from e
        logger.debug(f"Saved cart snapshot to {self.path}")
