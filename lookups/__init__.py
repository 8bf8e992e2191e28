# Export lookup utilities
from . import (
    country_lookup,
    reference_lookup,
)
from .country_lookup import is_known_country, lookup_country_name
from .reference_lookup import (
    ReferenceDataStore,
    ReferenceDataUnavailable,
    get_default_store,
    lookup_reference_dataset,
)

__all__ = [
    "ReferenceDataStore",
    "ReferenceDataUnavailable",
    "country_lookup",
    "get_default_store",
    "is_known_country",
    "lookup_country_name",
    "lookup_reference_dataset",
    "reference_lookup",
]
