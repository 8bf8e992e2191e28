from .decomposer import SwiftCodeParts, decompose
from .enricher import Enrichment, enrich
from .normalizer import normalize
from .parser import SwiftCode, parse_many, parse_swift_code
from .validator import is_valid, validate

__all__ = [
    "Enrichment",
    "SwiftCode",
    "SwiftCodeParts",
    "decompose",
    "enrich",
    "is_valid",
    "normalize",
    "parse_many",
    "parse_swift_code",
    "validate",
]
