"""
Dependency parser wrapper with optional tagging stage

A Parser built with an auxiliary tagger family runs two backend hops for
untagged text: tag, then parse the tagger's raw output. Input that is
already materialized (Sentence objects) skips tagging and hands the
retained backend references straight to the parser. A failing first
stage ends the chain: the parser is never called and the tagging error is
what the caller sees.
"""
from typing import Any, List, Optional, Tuple

from linguistic_model import Sentence
from nlp_backends.base import Operation
from nlp_backends.exceptions import ValidationError
from nlp_bridge.context import AnalysisContext
from nlp_bridge.materializer import materialize_paragraph, materialize_sentence
from logger import get_logger

logger = get_logger(__name__)


def _reference_of(sentence: Sentence) -> Any:
    if sentence.reference is None:
        raise ValidationError("Sentence carries no backend reference and cannot be parsed")
    return sentence.reference


class Parser:
    """Parses text or tagged Sentences into dependency-annotated Sentences"""

    def __init__(self, context: AnalysisContext, parser_family: Any, tagger_family: Optional[Any] = None):
        self.context = context
        self.family, parser_provider = context.resolve(parser_family, Operation.PARSING)

        self.tagger_family = None
        tagger_provider = None
        if tagger_family is not None:
            self.tagger_family, tagger_provider = context.resolve(tagger_family, Operation.TAGGING)

        # Handles are created only once every family passed the gate
        self.tagger = tagger_provider.create_tagger() if tagger_provider else None
        self.parser = parser_provider.create_parser()

    # Input inspection

    def _paragraph_target(self, paragraph: Any) -> Tuple[bool, Any]:
        """Return (needs tagging, parser input) for paragraph-level calls"""
        if isinstance(paragraph, str):
            return self.tagger is not None, paragraph
        if isinstance(paragraph, (list, tuple)):
            if not all(isinstance(s, Sentence) for s in paragraph):
                raise ValidationError("paragraph must be a string or a sequence of Sentences")
            return False, [_reference_of(s) for s in paragraph]
        raise ValidationError(
            f"paragraph must be a string or a sequence of Sentences, got {type(paragraph).__name__}"
        )

    def _sentence_target(self, sentence: Any) -> Tuple[bool, Any]:
        """Return (needs tagging, parser input) for sentence-level calls"""
        if isinstance(sentence, str):
            return self.tagger is not None, sentence
        if isinstance(sentence, Sentence):
            return False, _reference_of(sentence)
        raise ValidationError(f"sentence must be a string or a Sentence, got {type(sentence).__name__}")

    # Stage chaining

    def _run_sync(self, needs_tagging: bool, target: Any, tag_stage) -> Any:
        if needs_tagging:
            logger.debug(f"Tagging stage ({self.tagger_family.value})")
            target = tag_stage(target)
        logger.debug(f"Parsing stage ({self.family.value})")
        return self.parser.parse_sync(target)

    async def _run(self, needs_tagging: bool, target: Any, tag_stage) -> Any:
        if needs_tagging:
            logger.debug(f"Tagging stage ({self.tagger_family.value})")
            target = await tag_stage(target)
        logger.debug(f"Parsing stage ({self.family.value})")
        return await self.parser.parse(target)

    # Paragraph granularity

    def parse(self, paragraph: Any, callback=None):
        """
        Parse a paragraph given as text or as previously tagged Sentences.

        Returns the list of Sentences in blocking mode. With a callback, the
        callback receives CallbackResult(error, result=[Sentence, ...]).
        """
        needs_tagging, target = self._paragraph_target(paragraph)
        return self.context.invoker.call(
            lambda: materialize_paragraph(
                self._run_sync(needs_tagging, target, self.tagger.tag_sync if needs_tagging else None)),
            lambda: self._parse(needs_tagging, target),
            callback
        )

    async def parse_async(self, paragraph: Any) -> List[Sentence]:
        needs_tagging, target = self._paragraph_target(paragraph)
        return await self._parse(needs_tagging, target)

    async def _parse(self, needs_tagging: bool, target: Any) -> List[Sentence]:
        parsed = await self._run(needs_tagging, target, self.tagger.tag if needs_tagging else None)
        return materialize_paragraph(parsed)

    # Sentence granularity

    def parse_sentence(self, sentence: Any, callback=None):
        """
        Parse one sentence given as text or as a tagged Sentence.

        Returns one Sentence in blocking mode; the callback receives it
        wrapped in a one-element list.
        """
        needs_tagging, target = self._sentence_target(sentence)
        return self.context.invoker.call(
            lambda: materialize_sentence(
                self._run_sync(needs_tagging, target, self.tagger.tag_sentence_sync if needs_tagging else None)),
            lambda: self._parse_sentence(needs_tagging, target),
            callback
        )

    async def parse_sentence_async(self, sentence: Any) -> Sentence:
        needs_tagging, target = self._sentence_target(sentence)
        return await self._parse_sentence(needs_tagging, target)

    async def _parse_sentence(self, needs_tagging: bool, target: Any) -> Sentence:
        parsed = await self._run(needs_tagging, target, self.tagger.tag_sentence if needs_tagging else None)
        return materialize_sentence(parsed)

    @property
    def has_tagger(self) -> bool:
        return self.tagger is not None

