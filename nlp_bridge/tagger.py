"""
Morphological tagger wrapper
"""
from typing import Any, List

from linguistic_model import Sentence
from nlp_backends.base import Operation
from nlp_bridge.context import AnalysisContext
from nlp_bridge.invocation import require_text
from nlp_bridge.materializer import materialize_paragraph, materialize_sentence
from logger import get_logger

logger = get_logger(__name__)


class Tagger:
    """Tags paragraphs or single sentences with one backend family"""

    def __init__(self, context: AnalysisContext, family: Any):
        self.context = context
        self.family, provider = context.resolve(family, Operation.TAGGING)
        self.tagger = provider.create_tagger()
        logger.debug(f"Tagger ready ({self.family.value})")

    def tag(self, paragraph: str, callback=None):
        """
        Tag a paragraph.

        Returns the list of Sentences in blocking mode. With a callback, the
        callback receives CallbackResult(error, result=[Sentence, ...]).
        """
        require_text(paragraph, "paragraph")
        return self.context.invoker.call(
            lambda: materialize_paragraph(self.tagger.tag_sync(paragraph)),
            lambda: self._tag(paragraph),
            callback
        )

    def tag_sentence(self, sentence: str, callback=None):
        """
        Tag text as a single sentence.

        Returns one Sentence in blocking mode; the callback receives it
        wrapped in a one-element list.
        """
        require_text(sentence, "sentence")
        return self.context.invoker.call(
            lambda: materialize_sentence(self.tagger.tag_sentence_sync(sentence)),
            lambda: self._tag_sentence(sentence),
            callback
        )

    async def tag_async(self, paragraph: str) -> List[Sentence]:
        require_text(paragraph, "paragraph")
        return await self._tag(paragraph)

    async def tag_sentence_async(self, sentence: str) -> Sentence:
        require_text(sentence, "sentence")
        return await self._tag_sentence(sentence)

    async def _tag(self, paragraph: str) -> List[Sentence]:
        return materialize_paragraph(await self.tagger.tag(paragraph))

    async def _tag_sentence(self, sentence: str) -> Sentence:
        return materialize_sentence(await self.tagger.tag_sentence(sentence))
