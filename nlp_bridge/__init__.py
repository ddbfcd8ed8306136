"""
Analysis Bridge

Orchestrates pluggable Korean analysis backends and materializes their
results into the canonical linguistic model.

Quick Start:
    from nlp_backends import BackendRegistry, BackendFamily
    from nlp_bridge import AnalysisContext, Tagger, Parser

    registry = BackendRegistry({BackendFamily.EUNJEON: eunjeon_provider,
                                BackendFamily.KKMA: kkma_provider})
    with AnalysisContext(registry) as context:
        sentences = Tagger(context, "eunjeon").tag("사과를 먹었다.")
        parser = Parser(context, "kkma", tagger_family="eunjeon")
        parser.parse("사과를 먹었다.", callback=print)
"""

from .context import AnalysisContext
from .invocation import CallbackResult, DualModeInvoker
from .materializer import (
    materialize_word,
    materialize_sentence,
    materialize_paragraph,
    materialize_sentence_strings,
    materialize_entries,
)
from .tagger import Tagger
from .parser import Parser
from .splitter import SentenceSplitter
from .dictionary import Dictionary

__version__ = "1.9.0"
__all__ = [
    # Context
    "AnalysisContext",
    # Invocation
    "CallbackResult",
    "DualModeInvoker",
    # Materializer
    "materialize_word",
    "materialize_sentence",
    "materialize_paragraph",
    "materialize_sentence_strings",
    "materialize_entries",
    # Components
    "Tagger",
    "Parser",
    "SentenceSplitter",
    "Dictionary",
]
