from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .layout import (
    BANK_CODE_LENGTH,
    BRANCH_CODE_LENGTH,
    COUNTRY_CODE_LENGTH,
    LOCATION_CODE_LENGTH,
    SWIFT_CODE_RE,
)


class SwiftViolation(str, Enum):
    """
    Structural reason a candidate SWIFT/BIC code is rejected.

    Violations are collected, never raised: a result lists every rule the
    formatted code breaks, in rule order.
    """

    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    BAD_CHARS = "bad_chars"
    BAD_FORMAT = "bad_format"


@dataclass(frozen=True, slots=True)
class BankReference:
    """
    One entry of a per-country reference dataset, keyed by full formatted code.
    """

    institution: str
    city: str
    branch: str

    def __post_init__(self) -> None:
        for name in ("institution", "city", "branch"):
            if not isinstance(getattr(self, name), str):
                raise TypeError(f"BankReference.{name} must be a string.")


@dataclass(frozen=True, slots=True)
class SwiftCodeResult:
    """
    Outcome of parsing one SWIFT/BIC input string.

    Every code/name attribute is a plain string; a value that could not be
    decomposed or resolved is "" rather than None. Codes and names are only
    populated when `violations` is empty, and a result without violations
    must hold a well-formed code whose segments rebuild it.
    """

    formatted_code: str = ""
    bank_code: str = ""
    country_code: str = ""
    location_code: str = ""
    branch_code: str = ""
    country_name: str = ""
    bank_name: str = ""
    location_name: str = ""
    branch_name: str = ""
    violations: tuple[SwiftViolation, ...] = ()

    def __post_init__(self) -> None:
        for name in (
            "formatted_code",
            "bank_code",
            "country_code",
            "location_code",
            "branch_code",
            "country_name",
            "bank_name",
            "location_name",
            "branch_name",
        ):
            value = getattr(self, name)
            if value is None:
                object.__setattr__(self, name, "")
            elif not isinstance(value, str):
                raise TypeError(f"SwiftCodeResult.{name} must be a string or None.")

        if not isinstance(self.violations, tuple):
            object.__setattr__(self, "violations", tuple(self.violations))
        for violation in self.violations:
            if not isinstance(violation, SwiftViolation):
                raise TypeError("violations must contain only SwiftViolation members.")

        if self.violations:
            if self.bank_code or self.country_code or self.location_code or self.branch_code:
                raise ValueError("An invalid SWIFT code cannot carry decomposed codes.")
            return

        if not SWIFT_CODE_RE.fullmatch(self.formatted_code):
            raise ValueError("A SWIFT code without violations must match the BIC8/BIC11 format.")
        if (
            len(self.bank_code) != BANK_CODE_LENGTH
            or len(self.country_code) != COUNTRY_CODE_LENGTH
            or len(self.location_code) != LOCATION_CODE_LENGTH
            or len(self.branch_code) not in (0, BRANCH_CODE_LENGTH)
        ):
            raise ValueError("Decomposed codes do not match the SWIFT code layout.")
        if self.bank_code + self.country_code + self.location_code + self.branch_code != self.formatted_code:
            raise ValueError("Decomposed codes must rebuild formatted_code.")

    @property
    def formatted_swift(self) -> str:
        return self.formatted_code

    @property
    def errors(self) -> list[SwiftViolation]:
        """Violations as a fresh list."""
        return list(self.violations)

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def bic8(self) -> str:
        """
        Institution-level code (bank + country + location), "" when invalid.

        BIC8 and the matching BIC11 primary office ("XXX" branch) identify the
        same institution.
        """
        if not self.is_valid:
            return ""
        return self.bank_code + self.country_code + self.location_code

    @property
    def is_primary_office(self) -> bool:
        return self.is_valid and self.branch_code in ("", "XXX")
