"""
Sentence splitter wrapper
"""
from typing import Any, List

from linguistic_model import Sentence
from nlp_backends.base import Operation
from nlp_backends.exceptions import ValidationError
from nlp_bridge.context import AnalysisContext
from nlp_bridge.invocation import require_text
from nlp_bridge.materializer import materialize_paragraph, materialize_sentence_strings


def _tagged_reference(sentence: Any) -> Any:
    if not isinstance(sentence, Sentence):
        raise ValidationError(f"Expected a tagged Sentence, got {type(sentence).__name__}")
    if sentence.reference is None:
        raise ValidationError("Sentence carries no backend reference and cannot be split")
    return sentence.reference


class SentenceSplitter:
    """Splits a paragraph into sentence strings"""

    def __init__(self, context: AnalysisContext, family: Any):
        self.context = context
        self.family, provider = context.resolve(family, Operation.SENTENCE_SPLITTING)
        self.splitter = provider.create_splitter()

    def sentences(self, paragraph: str, callback=None):
        """Return the sentence strings, or deliver them through the callback"""
        require_text(paragraph, "paragraph")
        return self.context.invoker.call(
            lambda: materialize_sentence_strings(self.splitter.sentences_sync(paragraph)),
            lambda: self._sentences(paragraph),
            callback
        )

    async def sentences_async(self, paragraph: str) -> List[str]:
        require_text(paragraph, "paragraph")
        return await self._sentences(paragraph)

    async def _sentences(self, paragraph: str) -> List[str]:
        return materialize_sentence_strings(await self.splitter.sentences(paragraph))

    # Tagged text, independent of the backend family

    @staticmethod
    def sentences_by_koala(context: AnalysisContext, sentence: Sentence, callback=None):
        """
        Regroup a tagged Sentence spanning several sentences.

        Works with any tagger's output. Returns the list of Sentences in
        blocking mode; with a callback, the callback receives
        CallbackResult(error, result=[Sentence, ...]).
        """
        backend = context.require_tagged_splitter()
        reference = _tagged_reference(sentence)

        async def split():
            return materialize_paragraph(await backend.split(reference))

        return context.invoker.call(
            lambda: materialize_paragraph(backend.split_sync(reference)),
            split,
            callback
        )

    @staticmethod
    async def sentences_by_koala_async(context: AnalysisContext, sentence: Sentence) -> List[Sentence]:
        backend = context.require_tagged_splitter()
        reference = _tagged_reference(sentence)
        return materialize_paragraph(await backend.split(reference))
