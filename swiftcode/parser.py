"""
SWIFT/BIC parsing pipeline.

    raw string -> normalize -> validate -> (valid) decompose -> enrich -> SwiftCodeResult

Structural problems are reported through `SwiftCodeResult.violations`;
parsing never raises for malformed input. Lookup misses leave names empty.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

from canonical import SwiftCodeResult
from lookups.country_lookup import lookup_country_name
from lookups.reference_lookup import get_default_store

from .decomposer import decompose
from .enricher import CountryLookup, ReferenceLookup, enrich
from .normalizer import normalize
from .validator import validate


logger = logging.getLogger(__name__)


def parse_swift_code(
    raw: Optional[str],
    *,
    countries: Optional[CountryLookup] = None,
    references: Optional[ReferenceLookup] = None,
) -> SwiftCodeResult:
    """
    Parse, validate, decompose and enrich a SWIFT/BIC code.

    Args:
        raw: SWIFT/BIC in compact ("DEUTDEFF500") or human-readable
            ("deut de ff-500") form. None is treated as "".
        countries: Country-name collaborator (default: ISO 3166 table)
        references: Reference dataset collaborator (default: the shared
            file-backed store)

    Returns:
        SwiftCodeResult. Check `is_valid` / `violations` before relying on
        the decomposed codes.

    Raises:
        ReferenceDataUnavailable: the country's dataset exists but cannot be
            loaded.
    """
    formatted = normalize(raw)
    violations = validate(formatted)
    if violations:
        logger.debug("Invalid SWIFT code %r: %s", formatted, ", ".join(v.value for v in violations))
        return SwiftCodeResult(formatted_code=formatted, violations=violations)

    parts = decompose(formatted)
    names = enrich(
        formatted,
        parts.country_code,
        countries=countries if countries is not None else lookup_country_name,
        references=references if references is not None else get_default_store(),
    )
    return SwiftCodeResult(
        formatted_code=formatted,
        bank_code=parts.bank_code,
        country_code=parts.country_code,
        location_code=parts.location_code,
        branch_code=parts.branch_code,
        country_name=names.country_name,
        bank_name=names.bank_name,
        location_name=names.location_name,
        branch_name=names.branch_name,
    )


# Constructor-style alias: SwiftCode("DEUTDEFF") -> SwiftCodeResult
SwiftCode = parse_swift_code


def parse_many(
    raws: Iterable[Optional[str]],
    *,
    countries: Optional[CountryLookup] = None,
    references: Optional[ReferenceLookup] = None,
) -> list[SwiftCodeResult]:
    """Parse a batch of codes with the same collaborators, preserving order."""
    return [parse_swift_code(raw, countries=countries, references=references) for raw in raws]
