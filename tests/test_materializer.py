"""
Tests for result materialization

Covers the structural properties every materialized result must keep:
dense indices, preserved order, valid relationship targets, and
idempotence over the same raw result.
"""
import pytest

from linguistic_model import POS, ROOT_INDEX, DictionaryEntry
from nlp_backends import BackendError, RawMorpheme, RawRelationship, RawSentence, RawWord
from nlp_bridge import (
    materialize_entries,
    materialize_paragraph,
    materialize_sentence,
    materialize_sentence_strings,
    materialize_word,
)
from stubs import APPLE_SENTENCE, ATE_SENTENCE, PARSED_SENTENCE, TWO_SENTENCE_PARAGRAPH


class IndexedOnly:
    """Sequence that only supports len() and integer indexing"""

    def __init__(self, items):
        self._items = list(items)
        self.reads = 0

    def __len__(self):
        return len(self._items)

    def __getitem__(self, i):
        self.reads += 1
        return self._items[i]


class TestMaterializeWord:
    """Test word-level materialization"""

    def test_morphemes_are_dense_and_ordered(self):
        word = materialize_word(ATE_SENTENCE.words[0], 4)
        assert word.index == 4
        assert word.surface == "먹었다"
        assert [m.index for m in word.morphemes] == [0, 1, 2]
        assert [m.surface for m in word.morphemes] == ["먹", "었", "다"]

    def test_raw_tag_is_preserved(self):
        word = materialize_word(ATE_SENTENCE.words[0], 0)
        assert word.morphemes[1].tag is POS.EP
        assert word.morphemes[1].raw_tag == "EPT"

    def test_unknown_backend_tag(self):
        raw = RawWord("ㅋㅋ", (RawMorpheme("ㅋㅋ", "KE", "KE"),))
        word = materialize_word(raw, 0)
        assert word.morphemes[0].tag is POS.NA
        assert word.morphemes[0].raw_tag == "KE"

    def test_dependents_keep_backend_order(self):
        word = materialize_word(PARSED_SENTENCE.words[2], 2)
        assert [(r.head, r.relation, r.target) for r in word.dependents] == [
            (2, "NP_SBJ", 0),
            (2, "NP_OBJ", 1),
        ]

    def test_word_without_dependents_attribute(self):
        class TaggedOnly:
            surface = "사과"
            morphemes = [RawMorpheme("사과", "NNG", "NNG")]

        word = materialize_word(TaggedOnly(), 0)
        assert word.dependents == ()

    def test_reference_retained(self):
        raw = APPLE_SENTENCE.words[0]
        assert materialize_word(raw, 0).reference is raw

    def test_reads_through_indexing(self):
        morphemes = IndexedOnly([RawMorpheme("사과", "NNG", "NNG"), RawMorpheme("를", "JKO", "JKO")])
        raw = RawWord("사과를", morphemes)
        word = materialize_word(raw, 0)
        assert len(word) == 2
        assert morphemes.reads == 2


class TestMaterializeSentence:
    """Test sentence-level materialization"""

    def test_words_in_surface_order(self):
        sentence = materialize_sentence(PARSED_SENTENCE)
        assert [w.surface for w in sentence.words] == ["나는", "사과를", "먹었다"]
        assert [w.index for w in sentence.words] == [0, 1, 2]

    def test_root_relationships(self):
        sentence = materialize_sentence(PARSED_SENTENCE)
        assert len(sentence.root_dependents) == 1
        root = sentence.root_dependents[0]
        assert root.head == ROOT_INDEX
        assert root.target == 2

    def test_targets_are_valid_indices(self):
        sentence = materialize_sentence(PARSED_SENTENCE)
        edges = list(sentence.root_dependents)
        for word in sentence.words:
            edges.extend(word.dependents)
        assert edges
        assert all(0 <= r.target < len(sentence.words) for r in edges)

    def test_empty_sentence(self):
        sentence = materialize_sentence(RawSentence(words=()))
        assert sentence.words == ()
        assert sentence.root_dependents == ()

    def test_out_of_range_target_is_backend_error(self):
        raw = RawSentence(
            words=(RawWord("사과", (RawMorpheme("사과", "NNG", "NNG"),)),),
            root_dependents=(RawRelationship(ROOT_INDEX, "NP", "NP", 3),)
        )
        with pytest.raises(BackendError):
            materialize_sentence(raw)

    def test_out_of_range_head_is_backend_error(self):
        raw = RawSentence(words=(
            RawWord("사과", (RawMorpheme("사과", "NNG", "NNG"),),
                    dependents=(RawRelationship(5, "NP", "NP", 0),)),
        ))
        with pytest.raises(BackendError):
            materialize_sentence(raw)

    def test_idempotent(self):
        assert materialize_sentence(PARSED_SENTENCE) == materialize_sentence(PARSED_SENTENCE)

    def test_reference_retained(self):
        assert materialize_sentence(PARSED_SENTENCE).reference is PARSED_SENTENCE

    def test_linkage_round_trip(self):
        sentence = materialize_sentence(PARSED_SENTENCE)
        reported = [(r.head, r.target) for w in PARSED_SENTENCE.words for r in w.dependents]
        materialized = [(r.head, r.target) for w in sentence.words for r in w.dependents]
        assert materialized == reported


class TestMaterializeParagraph:
    """Test paragraph-level materialization"""

    def test_sentence_count_and_order(self):
        paragraph = materialize_paragraph([PARSED_SENTENCE, APPLE_SENTENCE, ATE_SENTENCE])
        assert len(paragraph) == 3
        assert [s.reference for s in paragraph] == [PARSED_SENTENCE, APPLE_SENTENCE, ATE_SENTENCE]

    def test_empty_paragraph(self):
        assert materialize_paragraph([]) == []

    def test_two_sentence_scenario(self):
        paragraph = materialize_paragraph(TWO_SENTENCE_PARAGRAPH)
        assert len(paragraph) == 2

        first = paragraph[0]
        assert len(first.words) == 1
        assert len(first.words[0].morphemes) == 1
        assert first.words[0].morphemes[0].tag is POS.NNG
        assert first.words[0].dependents == ()

        second = paragraph[1]
        assert [w.surface for w in second.words] == ["먹었다", "다"]
        assert len(second.root_dependents) == 1
        assert second.root_dependents[0].relation == "VP"
        assert second.root_dependents[0].target == 0


class TestOtherResults:
    """Test splitter and dictionary result shapes"""

    def test_sentence_strings(self):
        assert materialize_sentence_strings(IndexedOnly(["가.", "나."])) == ["가.", "나."]

    def test_entries_use_tag_names(self):
        entries = materialize_entries([("코알라", POS.NNP), ("껍질", "NNG")])
        assert entries == [DictionaryEntry("코알라", "NNP"), DictionaryEntry("껍질", "NNG")]
