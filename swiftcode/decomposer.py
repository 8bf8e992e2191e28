from __future__ import annotations

from typing import NamedTuple

from canonical.layout import BANK_CODE_SLICE, BRANCH_CODE_SLICE, COUNTRY_CODE_SLICE, LOCATION_CODE_SLICE


class SwiftCodeParts(NamedTuple):
    bank_code: str
    country_code: str
    location_code: str
    branch_code: str


def decompose(formatted_code: str) -> SwiftCodeParts:
    """
    Slice a validated code into its fixed-width segments.

    Only call this for codes that passed `validate`; slicing is purely
    positional. A BIC8 yields an empty branch code.
    """
    return SwiftCodeParts(
        bank_code=formatted_code[BANK_CODE_SLICE],
        country_code=formatted_code[COUNTRY_CODE_SLICE],
        location_code=formatted_code[LOCATION_CODE_SLICE],
        branch_code=formatted_code[BRANCH_CODE_SLICE],
    )
