"""
Backend provider registry

Maps each backend family to the provider that builds its handles. A
registry is owned by the caller and handed to an AnalysisContext; there is
no process-wide instance.
"""
from typing import Any, Dict, List, Optional
from nlp_backends.base import BackendFamily, BackendProvider, Operation
from nlp_backends.capabilities import coerce_family, is_supported
from nlp_backends.exceptions import CompatibilityError
from logger import get_logger

logger = get_logger(__name__)


class BackendRegistry:
    """Registry for backend providers"""

    def __init__(self, providers: Optional[Dict[Any, BackendProvider]] = None):
        self._providers: Dict[BackendFamily, BackendProvider] = {}
        for family, provider in (providers or {}).items():
            self.register(family, provider)

    def register(self, family: Any, provider: BackendProvider):
        """Register a provider for a backend family"""
        family = coerce_family(family)
        if not isinstance(provider, BackendProvider):
            raise ValueError(f"{provider!r} must inherit from BackendProvider")

        for operation in Operation:
            if provider.capabilities.supports(operation) and not is_supported(family, operation):
                raise CompatibilityError(
                    f"Provider {provider.get_name()} declares {operation.value}, "
                    f"which family '{family.value}' cannot offer",
                    backend_family=family,
                    operation=operation
                )

        if family in self._providers:
            logger.info(f"Replacing provider for {family.value}")
        self._providers[family] = provider
        logger.info(f"Registered provider: {provider.get_name()} ({family.value})")

    def unregister(self, family: Any):
        """Unregister a provider"""
        family = coerce_family(family)
        if family in self._providers:
            del self._providers[family]
            logger.info(f"Unregistered provider: {family.value}")

    def get_provider(self, family: Any) -> Optional[BackendProvider]:
        """Get provider by family"""
        return self._providers.get(coerce_family(family))

    def is_registered(self, family: Any) -> bool:
        return coerce_family(family) in self._providers

    def list_families(self) -> List[BackendFamily]:
        """List all registered families"""
        return list(self._providers.keys())

    def families_supporting(self, operation: Operation) -> List[BackendFamily]:
        """Registered families whose provider declares the operation"""
        return [
            family for family, provider in self._providers.items()
            if provider.capabilities.supports(operation)
        ]
