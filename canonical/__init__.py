from .models import (
    BankReference,
    SwiftCodeResult,
    SwiftViolation,
)

__all__ = [
    "BankReference",
    "SwiftCodeResult",
    "SwiftViolation",
]
