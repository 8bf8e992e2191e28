"""
Enrichment of a validated SWIFT/BIC code with human-readable names.

Both collaborators are injected callables:
- country lookup: ISO country code -> country name, or None
- reference lookup: ISO country code -> {formatted code: BankReference}, or
  None when no dataset exists for that country

Every miss is a normal outcome and leaves the matching names absent. The only
error that escapes is `ReferenceDataUnavailable`, raised by the reference
lookup when a dataset exists but cannot be loaded.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, NamedTuple, Optional, Union

from canonical import BankReference


logger = logging.getLogger(__name__)

CountryLookup = Callable[[str], Optional[str]]
ReferenceLookup = Callable[[str], Optional[Mapping[str, Union[BankReference, Mapping[str, Any]]]]]


class Enrichment(NamedTuple):
    country_name: Optional[str] = None
    bank_name: Optional[str] = None
    location_name: Optional[str] = None
    branch_name: Optional[str] = None


def _as_reference(entry: Union[BankReference, Mapping[str, Any]]) -> BankReference:
    if isinstance(entry, BankReference):
        return entry
    return BankReference(
        institution=str(entry.get("institution") or ""),
        city=str(entry.get("city") or ""),
        branch=str(entry.get("branch") or ""),
    )


def enrich(
    formatted_code: str,
    country_code: str,
    *,
    countries: CountryLookup,
    references: ReferenceLookup,
) -> Enrichment:
    """
    Resolve the country name and the reference-data names for a valid code.

    Args:
        formatted_code: Full formatted code, used as the dataset key
        country_code: Two-letter country segment of the code
        countries: Country-name collaborator
        references: Per-country reference dataset collaborator

    Returns:
        Enrichment with None for every name that could not be resolved.

    Raises:
        ReferenceDataUnavailable: propagated from `references`.
    """
    country_name = countries(country_code) or None

    dataset = references(country_code.upper())
    if dataset is None:
        logger.debug("No reference dataset for country %s", country_code)
        return Enrichment(country_name=country_name)

    entry = dataset.get(formatted_code)
    if entry is None:
        logger.debug("No reference entry for %s", formatted_code)
        return Enrichment(country_name=country_name)

    reference = _as_reference(entry)
    return Enrichment(
        country_name=country_name,
        bank_name=reference.institution,
        location_name=reference.city,
        branch_name=reference.branch,
    )
