"""
Result materializer

Drains raw backend results into the canonical linguistic model. Raw
sequences are only read through len() and integer indexing, in order, and
are never kept beyond the reference slot on Word and Sentence.
"""
from enum import Enum
from typing import Any, List, Sequence, Tuple

from linguistic_model import POS, ROOT_INDEX, DictionaryEntry, Morpheme, Relationship, Sentence, Word
from nlp_backends.exceptions import BackendError


def _label(value: Any) -> str:
    if isinstance(value, Enum):
        return value.name
    return str(value)


def _drain(raw_sequence: Any) -> List[Any]:
    if raw_sequence is None:
        return []
    return [raw_sequence[i] for i in range(len(raw_sequence))]


def _materialize_relationships(raw_sequence: Any) -> Tuple[Relationship, ...]:
    return tuple(
        Relationship(
            head=int(rel.head),
            relation=_label(rel.relation),
            raw_relation=_label(rel.raw_relation),
            target=int(rel.target)
        )
        for rel in _drain(raw_sequence)
    )


def materialize_word(raw: Any, index: int) -> Word:
    """Build a Word, its Morphemes and its outgoing Relationships"""
    morphemes = tuple(
        Morpheme(
            surface=m.surface,
            tag=POS.from_backend(_label(m.tag)),
            raw_tag=_label(m.raw_tag),
            index=i
        )
        for i, m in enumerate(_drain(raw.morphemes))
    )
    dependents = _materialize_relationships(getattr(raw, "dependents", None))
    return Word(
        surface=raw.surface,
        morphemes=morphemes,
        index=index,
        dependents=dependents,
        reference=raw
    )


def _check_edges(sentence: Sentence):
    size = len(sentence.words)
    edges = list(sentence.root_dependents)
    for word in sentence.words:
        edges.extend(word.dependents)

    for rel in edges:
        if not 0 <= rel.target < size:
            raise BackendError(
                f"Relationship target {rel.target} outside sentence of {size} words"
            )
        if rel.head != ROOT_INDEX and not 0 <= rel.head < size:
            raise BackendError(
                f"Relationship head {rel.head} outside sentence of {size} words"
            )


def materialize_sentence(raw: Any) -> Sentence:
    """Build a Sentence with its Words in surface order and its root edges"""
    words = tuple(materialize_word(w, i) for i, w in enumerate(_drain(raw.words)))
    root_dependents = _materialize_relationships(getattr(raw, "root_dependents", None))
    sentence = Sentence(words=words, root_dependents=root_dependents, reference=raw)
    _check_edges(sentence)
    return sentence


def materialize_paragraph(raw: Sequence[Any]) -> List[Sentence]:
    """Build one Sentence per raw sentence; no cross-sentence links"""
    return [materialize_sentence(s) for s in _drain(raw)]


def materialize_sentence_strings(raw: Sequence[Any]) -> List[str]:
    """Drain a splitter result into plain strings"""
    return [str(s) for s in _drain(raw)]


def materialize_entries(raw: Sequence[Any]) -> List[DictionaryEntry]:
    """Read backend (surface, tag) pairs as DictionaryEntry tuples"""
    return [DictionaryEntry(str(entry[0]), _label(entry[1])) for entry in _drain(raw)]
