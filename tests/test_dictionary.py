"""
Tests for the dictionary adapter
"""
import pytest

from linguistic_model import POS, DictionaryEntry
from nlp_backends import BackendError, BackendFamily, CompatibilityError, ValidationError
from nlp_bridge import Dictionary
from config import Settings
from stubs import StubDictionary


@pytest.fixture
def backend(providers):
    stub = StubDictionary(system_entries=[("사과", POS.NNG), ("서울", POS.NNP)])
    providers[BackendFamily.KOMORAN].dictionary = stub
    return stub


@pytest.fixture
def dictionary(context, backend):
    return Dictionary(context, "komoran")


class TestEntryMarshalling:
    """Test conversion of caller entries into backend-native entries"""

    def test_single_entry(self, dictionary, backend):
        dictionary.add_entries("코알라", "NNP")
        assert backend.recorder.calls == [("add_user_dictionary_sync", [("코알라", POS.NNP)])]

    def test_parallel_sequences_keep_order(self, dictionary, backend):
        dictionary.add_entries(["코알라", "유칼립투스", "먹다"], ["NNP", "nng", POS.VV])
        assert backend.user_entries == [
            ("코알라", POS.NNP),
            ("유칼립투스", POS.NNG),
            ("먹다", POS.VV),
        ]

    def test_pairs(self, dictionary, backend):
        dictionary.add_entries([("코알라", "NNP"), ("나무", "NNG")])
        assert backend.user_entries == [("코알라", POS.NNP), ("나무", POS.NNG)]

    def test_length_mismatch(self, dictionary, backend):
        with pytest.raises(ValidationError):
            dictionary.add_entries(["가", "나", "다"], ["NNG", "NNG"])
        assert backend.recorder.calls == []

    def test_scalar_and_sequence_mixed(self, dictionary, backend):
        with pytest.raises(ValidationError):
            dictionary.add_entries("가", ["NNG"])
        with pytest.raises(ValidationError):
            dictionary.add_entries(["가"], "NNG")
        assert backend.recorder.calls == []

    def test_unknown_tag(self, dictionary, backend):
        with pytest.raises(ValidationError):
            dictionary.add_entries("코알라", "PROPN")
        assert backend.recorder.calls == []

    def test_malformed_pair(self, dictionary):
        with pytest.raises(ValidationError):
            dictionary.add_entries([("코알라", "NNP", "extra")])
        with pytest.raises(ValidationError):
            dictionary.add_entries("코알라")

    def test_empty_surface(self, dictionary):
        with pytest.raises(ValidationError):
            dictionary.add_entries("", "NNG")


class TestQueries:
    """Test contains and get_not_existing"""

    def test_contains_defaults_to_nouns(self, dictionary, backend):
        assert dictionary.contains("서울") is True
        assert backend.recorder.calls[-1] == ("contains_sync", "서울", {POS.NNP, POS.NNG})

    def test_contains_explicit_tags(self, dictionary, backend):
        assert dictionary.contains("사과", ["VV"]) is False
        assert dictionary.contains("사과", "NNG") is True
        assert backend.recorder.calls[0][2] == {POS.VV}

    def test_contains_configured_defaults(self, registry, backend):
        from nlp_bridge import AnalysisContext

        with AnalysisContext(registry, Settings(default_dictionary_tags=["VV"])) as context:
            Dictionary(context, "komoran").contains("사과")
        assert backend.recorder.calls[-1][2] == {POS.VV}

    def test_contains_sees_added_entries(self, dictionary):
        assert not dictionary.contains("코알라")
        dictionary.add_entries("코알라", "NNP")
        assert dictionary.contains("코알라")

    def test_get_not_existing(self, dictionary, backend):
        result = dictionary.get_not_existing(True, [("사과", "NNG"), ("코알라", "NNP"), ("나무", "NNG")])
        assert result == [DictionaryEntry("코알라", "NNP"), DictionaryEntry("나무", "NNG")]
        assert backend.recorder.calls[0][1] is True

    def test_get_not_existing_user_dictionary(self, dictionary, backend):
        dictionary.add_entries("코알라", "NNP")
        entries = [("코알라", "NNP")]
        assert dictionary.get_not_existing(False, entries) == []
        assert dictionary.get_not_existing(True, entries) == [DictionaryEntry("코알라", "NNP")]

    def test_only_system_must_be_bool(self, dictionary, backend):
        with pytest.raises(ValidationError):
            dictionary.get_not_existing("yes", [("사과", "NNG")])
        assert backend.recorder.calls == []

    def test_backend_error_is_raised_unchanged(self, dictionary, backend):
        error = BackendError("dictionary locked")
        backend.error = error
        with pytest.raises(BackendError) as exc_info:
            dictionary.contains("사과")
        assert exc_info.value is error


class TestCallbacks:
    """Test callback delivery for dictionary operations"""

    def test_add_delivers_empty_result(self, dictionary, backend):
        received = []
        dictionary.add_entries("코알라", "NNP", callback=received.append).result(timeout=5)
        assert received[0].error is None
        assert received[0].result == []
        assert backend.recorder.names() == ["add_user_dictionary"]

    def test_contains_delivers_wrapped_bool(self, dictionary):
        received = []
        dictionary.contains("사과", callback=received.append).result(timeout=5)
        assert received[0].result == [True]

    def test_get_not_existing_delivers_entries(self, dictionary):
        received = []
        dictionary.get_not_existing(True, [("코알라", "NNP")], callback=received.append).result(timeout=5)
        assert received[0].result == [DictionaryEntry("코알라", "NNP")]

    def test_error_delivered(self, dictionary, backend):
        error = BackendError("dictionary locked")
        backend.error = error
        received = []
        dictionary.add_entries("코알라", "NNP", callback=received.append).result(timeout=5)
        assert received[0].error is error
        assert received[0].result == []

    @pytest.mark.asyncio
    async def test_awaitable_forms(self, dictionary):
        await dictionary.add_entries_async(["코알라"], ["NNP"])
        assert await dictionary.contains_async("코알라", {"NNP"})
        assert await dictionary.get_not_existing_async(False, [("코알라", "NNP")]) == []


class TestCompatibility:
    """Test the dictionary capability gate"""

    def test_rhino_has_no_dictionary(self, context, providers):
        with pytest.raises(CompatibilityError):
            Dictionary(context, BackendFamily.RHINO)
        assert "dictionary" not in providers[BackendFamily.RHINO].created

    @pytest.mark.parametrize("family", [f for f in BackendFamily if f is not BackendFamily.RHINO])
    def test_other_families(self, context, providers, family):
        Dictionary(context, family)
        assert providers[family].created == ["dictionary"]
