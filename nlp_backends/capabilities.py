"""
Capability table for backend families

Which family may serve which operation is fixed here and checked before a
backend handle is ever created:

    tagging             every registered tagging-capable family
    parsing             KKMA, HANNANUM
    sentence-splitting  TWITTER (heuristic), HANNANUM (rule-based)
    user-dictionary     every family except RHINO
"""
from typing import Any

from nlp_backends.base import BackendFamily, Operation
from nlp_backends.exceptions import CompatibilityError
from logger import get_logger

logger = get_logger(__name__)

PARSING_FAMILIES = frozenset({BackendFamily.KKMA, BackendFamily.HANNANUM})
SPLITTING_FAMILIES = frozenset({BackendFamily.TWITTER, BackendFamily.HANNANUM})
DICTIONARY_EXCLUDED_FAMILIES = frozenset({BackendFamily.RHINO})


def coerce_family(family: Any) -> BackendFamily:
    """Resolve a family given as enum member, value ("kkma") or name ("KKMA")"""
    if isinstance(family, BackendFamily):
        return family
    if isinstance(family, str):
        key = family.strip()
        for member in BackendFamily:
            if key.lower() == member.value or key.upper() == member.name:
                return member
    raise CompatibilityError(f"Unknown backend family: {family!r}", backend_family=family)


def coerce_operation(operation: Any) -> Operation:
    if isinstance(operation, Operation):
        return operation
    try:
        return Operation(operation)
    except ValueError:
        raise CompatibilityError(f"Unknown operation: {operation!r}", operation=operation)


def is_supported(family: Any, operation: Any) -> bool:
    """Check the closed family/operation table"""
    family = coerce_family(family)
    operation = coerce_operation(operation)

    if operation == Operation.PARSING:
        return family in PARSING_FAMILIES
    if operation == Operation.SENTENCE_SPLITTING:
        return family in SPLITTING_FAMILIES
    if operation == Operation.DICTIONARY:
        return family not in DICTIONARY_EXCLUDED_FAMILIES
    # Tagging is limited only by what each registered provider declares
    return True


def check_supported(family: Any, operation: Any) -> BackendFamily:
    """Raise CompatibilityError unless the table allows the combination"""
    family = coerce_family(family)
    operation = coerce_operation(operation)
    if not is_supported(family, operation):
        logger.warning(f"Rejected {operation.value} for backend family {family.value}")
        raise CompatibilityError(
            f"{operation.value} is not supported by backend family '{family.value}'",
            backend_family=family,
            operation=operation
        )
    return family


class CapabilityValidator:
    """Gate every orchestration component passes before touching a backend"""

    def __init__(self, registry):
        self.registry = registry

    def validate(self, family: Any, operation: Any) -> BackendFamily:
        family = check_supported(family, operation)
        operation = coerce_operation(operation)

        provider = self.registry.get_provider(family)
        if provider is None:
            logger.warning(f"No provider registered for backend family {family.value}")
            raise CompatibilityError(
                f"{operation.value} requested but no backend is registered for family '{family.value}'",
                backend_family=family,
                operation=operation
            )

        if not provider.capabilities.supports(operation):
            logger.warning(f"Provider {provider.get_name()} does not declare {operation.value}")
            raise CompatibilityError(
                f"{operation.value} is not provided by the registered '{family.value}' backend",
                backend_family=family,
                operation=operation
            )

        return family
