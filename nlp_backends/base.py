"""
Base interfaces for analysis backends

Backends are opaque engines. This module fixes the surface the bridge
consumes from them: the raw result shapes, the blocking/non-blocking
operation pairs per family, and the provider that builds backend handles
for one backend family.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Sequence, Set, Tuple, Union


class BackendFamily(Enum):
    """Closed set of backend families"""
    ARIRANG = "arirang"
    DAON = "daon"
    EUNJEON = "eunjeon"
    HANNANUM = "hannanum"
    KKMA = "kkma"
    KOMORAN = "komoran"
    RHINO = "rhino"
    TWITTER = "twitter"


class Operation(Enum):
    """Operation families offered by the bridge"""
    TAGGING = "tagging"
    PARSING = "parsing"
    SENTENCE_SPLITTING = "sentence-splitting"
    DICTIONARY = "user-dictionary"


@dataclass
class BackendCapabilities:
    """Capabilities declared by a backend provider"""
    tagging: bool = True
    parsing: bool = False
    sentence_splitting: bool = False
    dictionary: bool = True

    def supports(self, operation: Operation) -> bool:
        return {
            Operation.TAGGING: self.tagging,
            Operation.PARSING: self.parsing,
            Operation.SENTENCE_SPLITTING: self.sentence_splitting,
            Operation.DICTIONARY: self.dictionary,
        }[operation]


# Raw result shapes. Backends may return any objects exposing the same
# attributes; sequence fields only need len() and integer indexing.

@dataclass(frozen=True)
class RawMorpheme:
    surface: str
    tag: str
    raw_tag: str


@dataclass(frozen=True)
class RawRelationship:
    head: int
    relation: str
    raw_relation: str
    target: int


@dataclass(frozen=True)
class RawWord:
    surface: str
    morphemes: Sequence[RawMorpheme]
    dependents: Sequence[RawRelationship] = ()


@dataclass(frozen=True)
class RawSentence:
    words: Sequence[RawWord]
    root_dependents: Sequence[RawRelationship] = ()


RawParagraph = Sequence[RawSentence]
ParseTarget = Union[str, RawSentence, Sequence[RawSentence]]
# Backend-native dictionary entry: (surface, normalized tag)
NativeEntry = Tuple[str, Any]


class TaggerBackend(ABC):
    """Morphological tagger handle"""

    @abstractmethod
    def tag_sync(self, paragraph: str) -> RawParagraph:
        pass

    @abstractmethod
    async def tag(self, paragraph: str) -> RawParagraph:
        pass

    @abstractmethod
    def tag_sentence_sync(self, sentence: str) -> RawSentence:
        pass

    @abstractmethod
    async def tag_sentence(self, sentence: str) -> RawSentence:
        pass


class ParserBackend(ABC):
    """
    Dependency parser handle

    Accepts raw text, a tagged RawSentence or a sequence of them; returns a
    RawSentence for sentence input and a paragraph otherwise.
    """

    @abstractmethod
    def parse_sync(self, target: ParseTarget) -> Any:
        pass

    @abstractmethod
    async def parse(self, target: ParseTarget) -> Any:
        pass


class SentenceSplitterBackend(ABC):
    """Sentence boundary detector handle"""

    @abstractmethod
    def sentences_sync(self, paragraph: str) -> Sequence[str]:
        pass

    @abstractmethod
    async def sentences(self, paragraph: str) -> Sequence[str]:
        pass


class TaggedSentenceSplitterBackend(ABC):
    """
    Family-independent splitter for tagged text

    Receives the raw result of tagging a span that holds several sentences
    and returns it regrouped as a paragraph of raw sentences.
    """

    @abstractmethod
    def split_sync(self, sentence: RawSentence) -> RawParagraph:
        pass

    @abstractmethod
    async def split(self, sentence: RawSentence) -> RawParagraph:
        pass


class DictionaryBackend(ABC):
    """System/user dictionary handle"""

    @abstractmethod
    def add_user_dictionary_sync(self, entries: Sequence[NativeEntry]) -> None:
        pass

    @abstractmethod
    async def add_user_dictionary(self, entries: Sequence[NativeEntry]) -> None:
        pass

    @abstractmethod
    def contains_sync(self, surface: str, tags: Set[Any]) -> bool:
        pass

    @abstractmethod
    async def contains(self, surface: str, tags: Set[Any]) -> bool:
        pass

    @abstractmethod
    def get_not_existing_sync(self, only_system_dictionary: bool,
                              entries: Sequence[NativeEntry]) -> Sequence[NativeEntry]:
        pass

    @abstractmethod
    async def get_not_existing(self, only_system_dictionary: bool,
                               entries: Sequence[NativeEntry]) -> Sequence[NativeEntry]:
        pass


class BackendProvider(ABC):
    """Builds backend handles for one backend family"""

    def __init__(self, config: Dict[str, Any] = None):
        self.config = config or {}
        self.capabilities = self.get_capabilities()

    @abstractmethod
    def get_name(self) -> str:
        """Get provider name"""
        pass

    @abstractmethod
    def get_capabilities(self) -> BackendCapabilities:
        """Get provider capabilities"""
        pass

    def create_tagger(self) -> TaggerBackend:
        raise NotImplementedError(f"{self.get_name()} does not provide a tagger")

    def create_parser(self) -> ParserBackend:
        raise NotImplementedError(f"{self.get_name()} does not provide a parser")

    def create_splitter(self) -> SentenceSplitterBackend:
        raise NotImplementedError(f"{self.get_name()} does not provide a sentence splitter")

    def get_dictionary(self) -> DictionaryBackend:
        raise NotImplementedError(f"{self.get_name()} does not provide a dictionary")
