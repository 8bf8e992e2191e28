"""
Mock country and reference-data lookups for testing without dataset files.

These mocks keep their data in memory and record every call, allowing tests
to verify which collaborator was consulted and with what argument.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from canonical import BankReference
from lookups.reference_lookup import ReferenceDataUnavailable


class MockCountryLookup:
    """Mock country-name lookup backed by a dict."""

    def __init__(self, names: Optional[dict[str, str]] = None) -> None:
        self._names = dict(names or {})
        self.calls: list[str] = []

    def __call__(self, country_code: str) -> Optional[str]:
        self.calls.append(country_code)
        return self._names.get(country_code)


class MockReferenceLookup:
    """
    Mock reference dataset lookup.

    `datasets` maps country code -> {formatted code: entry}; entries may be
    BankReference objects or plain dicts. Countries listed in `unavailable`
    raise ReferenceDataUnavailable, simulating a corrupt dataset file.
    """

    def __init__(
        self,
        datasets: Optional[dict[str, dict[str, Any]]] = None,
        *,
        unavailable: Optional[set[str]] = None,
    ) -> None:
        self._datasets = dict(datasets or {})
        self._unavailable = set(unavailable or ())
        self.calls: list[str] = []

    def __call__(self, country_code: str) -> Optional[dict[str, Any]]:
        self.calls.append(country_code)
        if country_code in self._unavailable:
            raise ReferenceDataUnavailable(country_code, Path(f"{country_code}.json"), "simulated failure")
        return self._datasets.get(country_code)

    def was_called(self) -> bool:
        return len(self.calls) > 0


def make_reference(institution: str, city: str, branch: str = "") -> BankReference:
    """Helper to create a BankReference."""
    return BankReference(institution=institution, city=city, branch=branch)
