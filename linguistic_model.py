"""
Canonical Linguistic Model - backend-independent analysis results

Every analysis backend reports its results in its own shape. This module
defines the single representation they are materialized into:

    Sentence -> Word -> Morpheme

with dependency Relationships attached to their head Word, or to the
Sentence root when the head is the sentence itself.

All values are immutable once constructed. Words and Sentences keep a
non-owning reference to the backend object they were built from, so
features not exposed here remain reachable; references never take part
in equality.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterator, List, NamedTuple, Tuple

# Head index of a relationship attached to the sentence root
ROOT_INDEX = -1


class POS(Enum):
    """Sejong part-of-speech tagset"""
    # Nouns
    NNG = "NNG"  # common noun
    NNP = "NNP"  # proper noun
    NNB = "NNB"  # bound noun
    NNM = "NNM"  # unit bound noun
    NR = "NR"    # numeral
    NP = "NP"    # pronoun

    # Predicates
    VV = "VV"    # verb
    VA = "VA"    # adjective
    VX = "VX"    # auxiliary predicate
    VCP = "VCP"  # positive copula
    VCN = "VCN"  # negative copula

    # Modifiers and interjection
    MM = "MM"    # determiner
    MAG = "MAG"  # general adverb
    MAJ = "MAJ"  # conjunctive adverb
    IC = "IC"    # interjection

    # Postpositions
    JKS = "JKS"
    JKC = "JKC"
    JKG = "JKG"
    JKO = "JKO"
    JKB = "JKB"
    JKV = "JKV"
    JKQ = "JKQ"
    JC = "JC"
    JX = "JX"

    # Endings
    EP = "EP"
    EF = "EF"
    EC = "EC"
    ETN = "ETN"
    ETM = "ETM"

    # Affixes and roots
    XPN = "XPN"
    XPV = "XPV"
    XSN = "XSN"
    XSV = "XSV"
    XSM = "XSM"
    XSO = "XSO"
    XR = "XR"

    # Symbols and foreign text
    SF = "SF"
    SP = "SP"
    SS = "SS"
    SE = "SE"
    SO = "SO"
    SW = "SW"
    SL = "SL"
    SH = "SH"
    SN = "SN"

    # Unanalyzable
    NF = "NF"    # presumed noun
    NV = "NV"    # presumed predicate
    NA = "NA"    # unanalyzable

    @classmethod
    def with_name(cls, name: str) -> "POS":
        """Resolve a tag name, raising ValueError when it is not a Sejong tag"""
        if isinstance(name, POS):
            return name
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown POS tag: {name!r}")

    @classmethod
    def from_backend(cls, name: Any) -> "POS":
        """Resolve a backend-reported tag; anything unrecognised maps to NA"""
        try:
            return cls.with_name(name)
        except ValueError:
            return cls.NA

    def is_noun(self) -> bool:
        return self.name.startswith("N") and self not in _UNKNOWN_TAGS

    def is_predicate(self) -> bool:
        return self.name.startswith("V")

    def is_modifier(self) -> bool:
        return self.name.startswith("M")

    def is_postposition(self) -> bool:
        return self.name.startswith("J")

    def is_ending(self) -> bool:
        return self.name.startswith("E")

    def is_affix(self) -> bool:
        return self.name.startswith("X")

    def is_symbol(self) -> bool:
        return self.name.startswith("S")

    def is_unknown(self) -> bool:
        return self in _UNKNOWN_TAGS


_UNKNOWN_TAGS = frozenset({POS.NF, POS.NV, POS.NA})


@dataclass(frozen=True)
class Morpheme:
    """Minimal analyzed unit of a Word"""
    surface: str
    tag: POS
    raw_tag: str
    index: int

    def is_noun(self) -> bool:
        return self.tag.is_noun()

    def is_predicate(self) -> bool:
        return self.tag.is_predicate()

    def has_tag(self, prefix: str) -> bool:
        """Check whether the normalized tag starts with the given prefix"""
        return self.tag.name.startswith(prefix.upper())

    def __str__(self):
        return f"{self.surface}/{self.tag.name}"


@dataclass(frozen=True)
class Relationship:
    """
    One dependency edge, directed head -> target.

    `head` is ROOT_INDEX when the edge hangs off the sentence root.
    """
    head: int
    relation: str
    raw_relation: str
    target: int

    @property
    def is_root_attached(self) -> bool:
        return self.head == ROOT_INDEX

    def __str__(self):
        head = "ROOT" if self.is_root_attached else self.head
        return f"{head} -[{self.relation}]-> {self.target}"


@dataclass(frozen=True)
class Word:
    """A token as it appeared in the surface text"""
    surface: str
    morphemes: Tuple[Morpheme, ...]
    index: int
    dependents: Tuple[Relationship, ...] = ()
    reference: Any = field(default=None, compare=False, repr=False)

    def __len__(self):
        return len(self.morphemes)

    def __iter__(self) -> Iterator[Morpheme]:
        return iter(self.morphemes)

    def __getitem__(self, i):
        return self.morphemes[i]

    def exists(self, predicate: Callable[[Morpheme], bool]) -> bool:
        """Check whether any morpheme satisfies the predicate"""
        return any(predicate(m) for m in self.morphemes)

    def single_line_string(self) -> str:
        return "+".join(str(m) for m in self.morphemes)

    def __str__(self):
        return f"{self.surface} = {self.single_line_string()}"


@dataclass(frozen=True)
class Sentence:
    """
    Ordered Words in surface order plus the relationships attached to the
    virtual sentence root.
    """
    words: Tuple[Word, ...]
    root_dependents: Tuple[Relationship, ...] = ()
    reference: Any = field(default=None, compare=False, repr=False)

    def __len__(self):
        return len(self.words)

    def __iter__(self) -> Iterator[Word]:
        return iter(self.words)

    def __getitem__(self, i):
        return self.words[i]

    def surface_string(self, delimiter: str = " ") -> str:
        return delimiter.join(w.surface for w in self.words)

    def nouns(self) -> List[Word]:
        """Words containing at least one noun morpheme"""
        return [w for w in self.words if w.exists(Morpheme.is_noun)]

    def verbs(self) -> List[Word]:
        """Words containing at least one predicate morpheme"""
        return [w for w in self.words if w.exists(Morpheme.is_predicate)]

    def single_line_string(self) -> str:
        return " ".join(w.single_line_string() for w in self.words)

    def __str__(self):
        return self.surface_string()


class DictionaryEntry(NamedTuple):
    """(surface, tag) pair reported by a dictionary query"""
    surface: str
    tag: str
