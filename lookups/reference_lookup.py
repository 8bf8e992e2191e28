"""
Per-country SWIFT/BIC reference datasets.

Each country has one JSON file, <CC>.json, in the reference data directory:

    {
      "DEUTDEFF500": {"institution": "...", "city": "...", "branch": "..."},
      ...
    }

Keys are full formatted codes (BIC8 or BIC11). A country without a file has
no dataset, which is a normal outcome. A file that exists but cannot be read
or parsed raises ReferenceDataUnavailable.

Parsed datasets are cached per store. The cache only ever grows and is
guarded by a lock, so one store can be shared between threads.
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional

from canonical import BankReference
from config import settings


logger = logging.getLogger(__name__)

_REFERENCE_FIELDS = ("institution", "city", "branch")


class ReferenceDataUnavailable(RuntimeError):
    """Raised when a country's reference dataset exists but cannot be loaded."""

    def __init__(self, country_code: str, path: Path, reason: str) -> None:
        super().__init__(f"Reference data for {country_code} unavailable ({path}): {reason}")
        self.country_code = country_code
        self.path = path
        self.reason = reason


def _parse_dataset(country_code: str, path: Path, raw: Any) -> Mapping[str, BankReference]:
    if not isinstance(raw, dict):
        raise ReferenceDataUnavailable(country_code, path, "top-level value must be an object")

    dataset: dict[str, BankReference] = {}
    for code, entry in raw.items():
        if not isinstance(entry, dict):
            raise ReferenceDataUnavailable(country_code, path, f"entry {code!r} must be an object")
        values = {}
        for field in _REFERENCE_FIELDS:
            value = entry.get(field)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ReferenceDataUnavailable(
                    country_code, path, f"entry {code!r} field {field!r} must be a string"
                )
            values[field] = value
        dataset[str(code)] = BankReference(**values)
    return MappingProxyType(dataset)


class ReferenceDataStore:
    """
    File-backed reference dataset lookup with a per-country cache.

    Instances are callable, so a store can be passed directly wherever a
    reference lookup collaborator is expected.
    """

    def __init__(self, data_dir: Optional[Path] = None) -> None:
        self.data_dir = Path(data_dir) if data_dir is not None else settings.REFERENCE_DATA_DIR
        self._cache: dict[str, Optional[Mapping[str, BankReference]]] = {}
        self._lock = threading.RLock()

    def dataset_path(self, country_code: str) -> Path:
        return self.data_dir / f"{country_code.upper()}.json"

    def lookup_reference_dataset(self, country_code: str) -> Optional[Mapping[str, BankReference]]:
        """
        Get the reference dataset for a country.

        Args:
            country_code: ISO 3166-1 alpha-2 code (uppercased before lookup)

        Returns:
            Read-only mapping of formatted code -> BankReference, or None if
            there is no dataset for the country.

        Raises:
            ReferenceDataUnavailable: the dataset file exists but is unreadable,
                not valid JSON, or not shaped like a reference dataset.
        """
        if not country_code:
            return None
        cc = country_code.strip().upper()

        with self._lock:
            if cc in self._cache:
                return self._cache[cc]

            path = self.dataset_path(cc)
            if not path.exists():
                logger.debug("No reference dataset file for %s at %s", cc, path)
                self._cache[cc] = None
                return None

            try:
                with open(path, "r", encoding="utf-8") as f:
                    raw = json.load(f)
            except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
                logger.warning("Failed to load reference dataset %s: %s", path, e)
                raise ReferenceDataUnavailable(cc, path, str(e)) from e

            try:
                dataset = _parse_dataset(cc, path, raw)
            except ReferenceDataUnavailable as e:
                logger.warning("Malformed reference dataset %s: %s", path, e.reason)
                raise

            logger.debug("Loaded %d reference entries for %s", len(dataset), cc)
            self._cache[cc] = dataset
            return dataset

    __call__ = lookup_reference_dataset

    def available_countries(self) -> list[str]:
        """List country codes that have a dataset file in the data directory."""
        if not self.data_dir.is_dir():
            return []
        return sorted(p.stem for p in self.data_dir.glob("*.json") if len(p.stem) == 2 and p.stem.isupper())

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()


_default_store: Optional[ReferenceDataStore] = None
_default_store_lock = threading.Lock()


def get_default_store() -> ReferenceDataStore:
    """Get the process-wide store rooted at settings.REFERENCE_DATA_DIR."""
    global _default_store
    with _default_store_lock:
        if _default_store is None:
            _default_store = ReferenceDataStore(settings.REFERENCE_DATA_DIR)
        return _default_store


def lookup_reference_dataset(country_code: str) -> Optional[Mapping[str, BankReference]]:
    """Get a country's reference dataset from the default store."""
    return get_default_store().lookup_reference_dataset(country_code)
