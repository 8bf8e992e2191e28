"""
Structural validation of formatted SWIFT/BIC codes.

Every rule runs on every input; the result reports all violations in rule
order rather than stopping at the first failure.
"""

from __future__ import annotations

from canonical import SwiftViolation

from canonical.layout import ALLOWED_CHARS_RE, MAX_LENGTH, MIN_LENGTH, SWIFT_CODE_RE


def validate(formatted_code: str) -> tuple[SwiftViolation, ...]:
    """
    Apply the length, character set and format rules.

    Args:
        formatted_code: Output of `normalize` (no noise, uppercase)

    Returns:
        Tuple of violations, empty when the code is structurally valid.
    """
    violations: list[SwiftViolation] = []
    if len(formatted_code) < MIN_LENGTH:
        violations.append(SwiftViolation.TOO_SHORT)
    if len(formatted_code) > MAX_LENGTH:
        violations.append(SwiftViolation.TOO_LONG)
    if not ALLOWED_CHARS_RE.fullmatch(formatted_code):
        violations.append(SwiftViolation.BAD_CHARS)
    if not SWIFT_CODE_RE.fullmatch(formatted_code):
        violations.append(SwiftViolation.BAD_FORMAT)
    return tuple(violations)


def is_valid(formatted_code: str) -> bool:
    """Check whether a formatted code passes every structural rule."""
    return not validate(formatted_code)
