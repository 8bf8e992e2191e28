"""
Fixed-width layout of an ISO 9362 SWIFT/BIC code.

    BANK(4) COUNTRY(2) LOCATION(2) [BRANCH(3)]

The validator's structural pattern, the decomposer's slices and the result
model's consistency checks are all derived from the widths below so they
always agree.
"""

from __future__ import annotations

import re

BANK_CODE_LENGTH = 4
COUNTRY_CODE_LENGTH = 2
LOCATION_CODE_LENGTH = 2
BRANCH_CODE_LENGTH = 3

# Length of a BIC8 (no branch) and a BIC11 (with branch)
MIN_LENGTH = BANK_CODE_LENGTH + COUNTRY_CODE_LENGTH + LOCATION_CODE_LENGTH
MAX_LENGTH = MIN_LENGTH + BRANCH_CODE_LENGTH

BANK_CODE_SLICE = slice(0, BANK_CODE_LENGTH)
COUNTRY_CODE_SLICE = slice(BANK_CODE_SLICE.stop, BANK_CODE_SLICE.stop + COUNTRY_CODE_LENGTH)
LOCATION_CODE_SLICE = slice(COUNTRY_CODE_SLICE.stop, COUNTRY_CODE_SLICE.stop + LOCATION_CODE_LENGTH)
BRANCH_CODE_SLICE = slice(LOCATION_CODE_SLICE.stop, LOCATION_CODE_SLICE.stop + BRANCH_CODE_LENGTH)

# Characters allowed anywhere in a formatted code
ALLOWED_CHARS_RE = re.compile(r"^[A-Z0-9]+$")

SWIFT_CODE_RE = re.compile(
    rf"^[A-Z]{{{BANK_CODE_LENGTH}}}"
    rf"[A-Z]{{{COUNTRY_CODE_LENGTH}}}"
    rf"[A-Z0-9]{{{LOCATION_CODE_LENGTH}}}"
    rf"([A-Z0-9]{{{BRANCH_CODE_LENGTH}}})?$"
)
