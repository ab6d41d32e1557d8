import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Union

from lexorder.core.digraph import AmbiguousOrder, CyclicGraph, TopologicalOrder
from lexorder.core.errors import MalformedDictionaryError, UnderspecifiedDictionaryError
from lexorder.core.logging import timed
from lexorder.extractor import extract_constraints


def _format_letters(letters: Sequence[str]) -> str:
    return "[" + ", ".join(letters) + "]"


@dataclass(frozen=True)
class Alphabet:
    """Letters of the dictionary's language, in order."""
    letters: List[str] = field(default_factory=list)

    ok = True

    def describe(self) -> str:
        return f"Alphabet: {_format_letters(self.letters)}"

    def unwrap(self) -> List[str]:
        return list(self.letters)


@dataclass(frozen=True)
class UnderspecifiedDictionary:
    """Not enough comparable words to order `contending` relative to each other."""
    contending: List[str] = field(default_factory=list)

    ok = False

    def describe(self) -> str:
        return f"Underspecified dictionary: unknown order of letters {_format_letters(self.contending)}"

    def unwrap(self) -> List[str]:
        raise UnderspecifiedDictionaryError(self.describe(), self.contending)


@dataclass(frozen=True)
class MalformedDictionary:
    """The dictionary contradicts itself.

    `conflicting` holds the letters that could not be placed: those on a cycle
    and every letter that comes after one.
    """
    conflicting: List[str] = field(default_factory=list)

    ok = False

    def describe(self) -> str:
        return f"Malformed dictionary: contradictory order of letters {_format_letters(self.conflicting)}"

    def unwrap(self) -> List[str]:
        raise MalformedDictionaryError(self.describe(), self.conflicting)


AlphabetOutcome = Union[Alphabet, UnderspecifiedDictionary, MalformedDictionary]


@timed
def discover_alphabet(words: Sequence[str]) -> AlphabetOutcome:
    """Infer the alphabet a dictionary is sorted by.

    The dictionary is assumed to be sorted; nothing here checks that. A
    dictionary that cannot be sorted shows up as MalformedDictionary only
    when its constraints form a cycle.
    """
    graph = extract_constraints(words)
    outcome = graph.topological_sort()

    if isinstance(outcome, AmbiguousOrder):
        logging.info(f"Underspecified dictionary, contending letters: {outcome.candidates}",
                     extra={"letters": list(outcome.candidates)})
        return UnderspecifiedDictionary(contending=list(outcome.candidates))
    if isinstance(outcome, CyclicGraph):
        logging.info(f"Malformed dictionary, letters in cycle: {outcome.remaining}",
                     extra={"letters": list(outcome.remaining)})
        return MalformedDictionary(conflicting=list(outcome.remaining))
    if isinstance(outcome, TopologicalOrder):
        logging.info(f"Discovered alphabet of {len(outcome.order)} letters",
                     extra={"word_count": len(words)})
        return Alphabet(letters=list(outcome.order))
    raise TypeError(f"Unexpected sort outcome: {outcome!r}")


def get_alphabet(words: Sequence[str]) -> List[str]:
    """Like discover_alphabet, but raises a DictionaryError instead of returning a failure.

    Raises:
        UnderspecifiedDictionaryError: two or more letters have no known relative order
        MalformedDictionaryError: the implied letter order is circular
    """
    return discover_alphabet(words).unwrap()
