"""
Caller-owned analysis context

Bundles the backend registry, the capability gate and the worker pool
used by callback mode. Every Tagger, Parser, SentenceSplitter and
Dictionary is built against one context.
"""
from typing import Any, Optional, Tuple

from config import settings as default_settings
from nlp_backends.base import BackendFamily, BackendProvider, Operation, TaggedSentenceSplitterBackend
from nlp_backends.capabilities import CapabilityValidator
from nlp_backends.exceptions import CompatibilityError
from nlp_backends.registry import BackendRegistry
from nlp_bridge.invocation import DualModeInvoker
from logger import get_logger

logger = get_logger(__name__)


class AnalysisContext:
    """Explicit configuration handed to every bridge component"""

    def __init__(self, registry: BackendRegistry, settings: Any = None,
                 tagged_splitter: Optional[TaggedSentenceSplitterBackend] = None):
        self.registry = registry
        self.settings = settings or default_settings
        self.tagged_splitter = tagged_splitter
        self.validator = CapabilityValidator(registry)
        self.invoker = DualModeInvoker(max_workers=self.settings.callback_workers)

    def resolve(self, family: Any, operation: Operation) -> Tuple[BackendFamily, BackendProvider]:
        """Validate the family for the operation and return its provider"""
        family = self.validator.validate(family, operation)
        return family, self.registry.get_provider(family)

    def require_tagged_splitter(self) -> TaggedSentenceSplitterBackend:
        """Return the family-independent splitter for tagged text"""
        if self.tagged_splitter is None:
            logger.warning("Tagged sentence splitting requested without a configured splitter")
            raise CompatibilityError(
                "Splitting tagged sentences requires a tagged_splitter on the analysis context",
                operation=Operation.SENTENCE_SPLITTING
            )
        return self.tagged_splitter

    @property
    def closed(self) -> bool:
        return self.invoker.closed

    def close(self):
        if self.invoker.closed:
            return
        self.invoker.shutdown(wait=True)
        logger.info("Analysis context closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
