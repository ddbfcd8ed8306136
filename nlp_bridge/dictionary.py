"""
User/system dictionary adapter

Translates (surface, tag) pairs given by the caller into backend-native
entries whose tag is a POS member, and reads query results back as
DictionaryEntry tuples. Mutations on one Dictionary must be serialized by
the caller; queries may overlap if the backend allows it.
"""
from typing import Any, Iterable, List, Optional, Set, Tuple

from linguistic_model import POS, DictionaryEntry
from nlp_backends.base import Operation
from nlp_backends.exceptions import ValidationError
from nlp_bridge.context import AnalysisContext
from nlp_bridge.materializer import materialize_entries
from logger import get_logger

logger = get_logger(__name__)


def _is_batch(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _to_pos(tag: Any) -> POS:
    try:
        return POS.with_name(tag)
    except ValueError as e:
        raise ValidationError(str(e))


def _native_entry(surface: Any, tag: Any) -> Tuple[str, POS]:
    if not isinstance(surface, str) or not surface:
        raise ValidationError(f"Dictionary surface must be a non-empty string, got {surface!r}")
    return surface, _to_pos(tag)


def _native_pairs(entries: Iterable[Any]) -> List[Tuple[str, POS]]:
    if isinstance(entries, str) or not _is_batch(entries):
        raise ValidationError("entries must be a sequence of (surface, tag) pairs")
    native = []
    for entry in entries:
        if not _is_batch(entry) or len(entry) != 2:
            raise ValidationError(f"Dictionary entry must be a (surface, tag) pair, got {entry!r}")
        native.append(_native_entry(entry[0], entry[1]))
    return native


class Dictionary:
    """Dictionary of one backend family"""

    def __init__(self, context: AnalysisContext, family: Any):
        self.context = context
        self.family, provider = context.resolve(family, Operation.DICTIONARY)
        self.dictionary = provider.get_dictionary()

    # Marshalling

    def native_entries(self, surfaces: Any, tags: Any = None) -> List[Tuple[str, POS]]:
        """
        Build backend-native entries in input order.

        Accepts either one surface and one tag, two equally long sequences
        of surfaces and tags, or (with tags omitted) a sequence of
        (surface, tag) pairs.
        """
        if tags is None:
            return _native_pairs(surfaces)

        if _is_batch(surfaces) != _is_batch(tags):
            raise ValidationError(
                "Surfaces and tags must both be sequences of the same length or both be single values"
            )
        if not _is_batch(surfaces):
            return [_native_entry(surfaces, tags)]
        if len(surfaces) != len(tags):
            raise ValidationError(
                f"Surfaces and tags differ in length ({len(surfaces)} != {len(tags)})"
            )
        return [_native_entry(s, t) for s, t in zip(surfaces, tags)]

    def native_tags(self, tags: Optional[Any] = None) -> Set[POS]:
        if tags is None:
            tags = self.context.settings.default_dictionary_tags
        if not _is_batch(tags) and not isinstance(tags, (set, frozenset)):
            tags = [tags]
        if not tags:
            raise ValidationError("At least one tag is required")
        return {_to_pos(t) for t in tags}

    # Operations

    def add_entries(self, surfaces: Any, tags: Any = None, callback=None):
        """Add entries to the user dictionary as one batch"""
        entries = self.native_entries(surfaces, tags)
        logger.debug(f"Submitting {len(entries)} dictionary entries ({self.family.value})")
        return self.context.invoker.call(
            lambda: self.dictionary.add_user_dictionary_sync(entries),
            lambda: self._add_entries(entries),
            callback
        )

    def contains(self, surface: str, tags: Optional[Any] = None, callback=None):
        """
        Check whether the surface is registered with any of the tags.

        Tags default to the configured dictionary tags (NNP, NNG).
        """
        if not isinstance(surface, str):
            raise ValidationError(f"surface must be a string, got {type(surface).__name__}")
        tag_set = self.native_tags(tags)
        return self.context.invoker.call(
            lambda: bool(self.dictionary.contains_sync(surface, tag_set)),
            lambda: self._contains(surface, tag_set),
            callback
        )

    def get_not_existing(self, only_system_dictionary: bool, entries: Any, callback=None):
        """Return the entries the dictionary does not know, in backend order"""
        if not isinstance(only_system_dictionary, bool):
            raise ValidationError("only_system_dictionary must be a boolean")
        native = _native_pairs(entries)
        return self.context.invoker.call(
            lambda: materialize_entries(self.dictionary.get_not_existing_sync(only_system_dictionary, native)),
            lambda: self._get_not_existing(only_system_dictionary, native),
            callback
        )

    async def add_entries_async(self, surfaces: Any, tags: Any = None) -> None:
        await self._add_entries(self.native_entries(surfaces, tags))

    async def contains_async(self, surface: str, tags: Optional[Any] = None) -> bool:
        if not isinstance(surface, str):
            raise ValidationError(f"surface must be a string, got {type(surface).__name__}")
        return await self._contains(surface, self.native_tags(tags))

    async def get_not_existing_async(self, only_system_dictionary: bool, entries: Any) -> List[DictionaryEntry]:
        if not isinstance(only_system_dictionary, bool):
            raise ValidationError("only_system_dictionary must be a boolean")
        return await self._get_not_existing(only_system_dictionary, _native_pairs(entries))

    async def _add_entries(self, entries: List[Tuple[str, POS]]) -> None:
        await self.dictionary.add_user_dictionary(entries)

    async def _contains(self, surface: str, tag_set: Set[POS]) -> bool:
        return bool(await self.dictionary.contains(surface, tag_set))

    async def _get_not_existing(self, only_system_dictionary: bool,
                                entries: List[Tuple[str, POS]]) -> List[DictionaryEntry]:
        result = await self.dictionary.get_not_existing(only_system_dictionary, entries)
        return materialize_entries(result)
