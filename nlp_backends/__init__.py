"""
Analysis backend boundary

Backends are opaque engines exposing blocking (`*_sync`) and non-blocking
(`async`) forms of each operation. This package defines that surface,
the capability table and the caller-owned provider registry.
"""

from .base import (
    BackendFamily,
    Operation,
    BackendCapabilities,
    BackendProvider,
    TaggerBackend,
    ParserBackend,
    SentenceSplitterBackend,
    TaggedSentenceSplitterBackend,
    DictionaryBackend,
    RawMorpheme,
    RawRelationship,
    RawWord,
    RawSentence,
)
from .capabilities import (
    CapabilityValidator,
    check_supported,
    is_supported,
    coerce_family,
    PARSING_FAMILIES,
    SPLITTING_FAMILIES,
    DICTIONARY_EXCLUDED_FAMILIES,
)
from .exceptions import (
    BridgeError,
    CompatibilityError,
    UnsupportedOperationError,
    ValidationError,
    BackendError,
)
from .registry import BackendRegistry

__all__ = [
    # Interfaces
    "BackendFamily",
    "Operation",
    "BackendCapabilities",
    "BackendProvider",
    "TaggerBackend",
    "ParserBackend",
    "SentenceSplitterBackend",
    "TaggedSentenceSplitterBackend",
    "DictionaryBackend",
    # Raw result shapes
    "RawMorpheme",
    "RawRelationship",
    "RawWord",
    "RawSentence",
    # Capability table
    "CapabilityValidator",
    "check_supported",
    "is_supported",
    "coerce_family",
    "PARSING_FAMILIES",
    "SPLITTING_FAMILIES",
    "DICTIONARY_EXCLUDED_FAMILIES",
    # Errors
    "BridgeError",
    "CompatibilityError",
    "UnsupportedOperationError",
    "ValidationError",
    "BackendError",
    # Registry
    "BackendRegistry",
]
