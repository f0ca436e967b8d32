"""Specification pattern – composable boolean rules over records.

Only conjunction is offered: catalog filters combine with logical AND and
never with OR or negation.
"""

from __future__ import annotations

import abc
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


class BaseSpecification(abc.ABC, Generic[T]):
    """Abstract base for specifications.

    Subclass this and implement ``is_satisfied_by``.  Instances are callable,
    so a specification can stand in wherever a plain record predicate is
    expected.

    Example::

        class HasSwimsuit(BaseSpecification[dict]):
            def is_satisfied_by(self, candidate: dict) -> bool:
                return bool(candidate.get("swimsuits"))

        spec = AllOf([HasSwimsuit(), MinLevel(15)])
    """

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    def __call__(self, candidate: T) -> bool:
        return self.is_satisfied_by(candidate)


class AllOf(BaseSpecification[T]):
    """Conjunction of any number of specifications.

    An empty conjunction is satisfied by every candidate.
    """

    def __init__(self, specs: Iterable[BaseSpecification[T]] = ()) -> None:
        flat: list[BaseSpecification[T]] = []
        for spec in specs:
            if isinstance(spec, AllOf):
                flat.extend(spec.specs)
            else:
                flat.append(spec)
        self.specs: tuple[BaseSpecification[T], ...] = tuple(flat)

    def is_satisfied_by(self, candidate: T) -> bool:
        return all(spec.is_satisfied_by(candidate) for spec in self.specs)

    def __len__(self) -> int:
        return len(self.specs)

    def __repr__(self) -> str:  # pragma: no cover
        return f"AllOf({list(self.specs)!r})"


class LambdaSpecification(BaseSpecification[T]):
    """Wraps a plain callable as a specification.

    Example::

        high_level = LambdaSpecification(lambda r: r.get("level", 0) >= 50, name="high_level")
        assert high_level.is_satisfied_by(record)
    """

    def __init__(
        self,
        predicate: Callable[[T], bool],
        *,
        name: str = "",
    ) -> None:
        self._predicate = predicate
        self.name: str = name or getattr(predicate, "__name__", "<lambda>")

    def is_satisfied_by(self, candidate: T) -> bool:
        return bool(self._predicate(candidate))

    def __repr__(self) -> str:  # pragma: no cover
        return f"LambdaSpecification({self.name!r})"


__all__ = ["AllOf", "BaseSpecification", "LambdaSpecification"]
