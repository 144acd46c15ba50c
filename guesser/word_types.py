"""Semantic type tags a 32-byte word can be guessed as."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class WordType(Enum):
    """Closed set of type tags produced by the classifier."""

    SELECTOR = "selector"
    STRING = "string"
    BYTES = "bytes"
    INT = "int"
    UINT = "uint"
    UINT8 = "uint8"
    BYTES1 = "bytes1"
    BOOL = "bool"
    ADDRESS = "address"
    BYTES20 = "bytes20"
    ANY_ZERO = "any_zero"
    MAX_UINT128 = "max_uint128"
    ANY_MAX = "any_max"


@dataclass(frozen=True)
class TypeCandidateSet:
    """Ordered, duplicate-free, non-empty set of type tags for one word.

    The order is precedence: the first tag is the most likely reading, but
    every tag in the set is a valid reading of the word's bits.
    """

    tags: tuple[WordType, ...]

    def __post_init__(self) -> None:
        if not self.tags:
            raise ValueError("TypeCandidateSet needs at least one tag")
        # keep the first occurrence of each tag
        object.__setattr__(self, "tags", tuple(dict.fromkeys(self.tags)))

    @classmethod
    def of(cls, *tags: WordType) -> "TypeCandidateSet":
        return cls(tags)

    @property
    def primary(self) -> WordType:
        return self.tags[0]

    def __iter__(self) -> Iterator[WordType]:
        return iter(self.tags)

    def __len__(self) -> int:
        return len(self.tags)

    def __contains__(self, tag: object) -> bool:
        return tag in self.tags

    def __str__(self) -> str:
        return "|".join(tag.value for tag in self.tags)
