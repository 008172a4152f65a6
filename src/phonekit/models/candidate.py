"""Candidate and match-set containers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from phonekit.models.enums import CandidateSource
from phonekit.models.number import CanonicalNumber


class CandidateSet:
    """Ordered, deduplicated canonical interpretations of one raw input.

    The most direct interpretation comes first, then heuristic ones in the
    order they were derived. Use :class:`CandidateSetBuilder` to create one;
    the set itself is read-only.
    """

    __slots__ = ("_candidates",)

    def __init__(
        self, candidates: dict[str, tuple[CanonicalNumber, CandidateSource]] | None = None
    ) -> None:
        self._candidates = dict(candidates or {})

    def __iter__(self) -> Iterator[CanonicalNumber]:
        return (number for number, _ in self._candidates.values())

    def __len__(self) -> int:
        return len(self._candidates)

    def __bool__(self) -> bool:
        return bool(self._candidates)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, CanonicalNumber):
            return item.e164 in self._candidates
        if isinstance(item, str):
            return item in self._candidates
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateSet):
            return NotImplemented
        return list(self._candidates) == list(other._candidates)

    def __hash__(self) -> int:
        return hash(tuple(self._candidates))

    def __repr__(self) -> str:
        return f"CandidateSet({list(self._candidates)!r})"

    @property
    def first(self) -> CanonicalNumber | None:
        """The best interpretation, or ``None`` when the set is empty."""
        return next(iter(self), None)

    def e164s(self) -> list[str]:
        return list(self._candidates)

    def source_of(self, number: CanonicalNumber | str) -> CandidateSource | None:
        """How *number* entered the set, or ``None`` if it is not a member."""
        key = number.e164 if isinstance(number, CanonicalNumber) else number
        entry = self._candidates.get(key)
        return entry[1] if entry else None


class CandidateSetBuilder:
    """Insert-if-absent accumulator keyed by canonical string."""

    def __init__(self) -> None:
        self._candidates: dict[str, tuple[CanonicalNumber, CandidateSource]] = {}

    def __iter__(self) -> Iterator[CanonicalNumber]:
        return (number for number, _ in list(self._candidates.values()))

    def add(self, number: CanonicalNumber | None, source: CandidateSource) -> bool:
        """Add *number* unless it is ``None`` or already present.

        Returns:
            True if the number was inserted.
        """
        if number is None or number.e164 in self._candidates:
            return False
        self._candidates[number.e164] = (number, source)
        return True

    def build(self) -> CandidateSet:
        return CandidateSet(self._candidates)


class ContactMatchSet:
    """Canonical strings a contact may be registered under.

    Contact discovery intersects these sets exactly, so the set is a superset
    of every plausible registration. Iteration is in sorted order.
    """

    __slots__ = ("_e164s",)

    def __init__(self, e164s: Iterable[str] = ()) -> None:
        self._e164s = frozenset(e164s)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._e164s))

    def __len__(self) -> int:
        return len(self._e164s)

    def __bool__(self) -> bool:
        return bool(self._e164s)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, CanonicalNumber):
            return item.e164 in self._e164s
        if isinstance(item, str):
            return item in self._e164s
        return False

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ContactMatchSet):
            return self._e164s == other._e164s
        if isinstance(other, (set, frozenset)):
            return self._e164s == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._e164s)

    def __repr__(self) -> str:
        return f"ContactMatchSet({sorted(self._e164s)!r})"

    def __or__(self, other: ContactMatchSet | Iterable[str]) -> ContactMatchSet:
        return self.union(other)

    def __and__(self, other: ContactMatchSet | Iterable[str]) -> ContactMatchSet:
        return self.intersection(other)

    def union(self, *others: ContactMatchSet | Iterable[str]) -> ContactMatchSet:
        return ContactMatchSet(self._e164s.union(*(_as_strings(o) for o in others)))

    def intersection(self, *others: ContactMatchSet | Iterable[str]) -> ContactMatchSet:
        return ContactMatchSet(self._e164s.intersection(*(_as_strings(o) for o in others)))

    def as_frozenset(self) -> frozenset[str]:
        return self._e164s


def _as_strings(values: ContactMatchSet | Iterable[str]) -> frozenset[str]:
    if isinstance(values, ContactMatchSet):
        return values.as_frozenset()
    return frozenset(values)
