"""Service, Command and Query base classes.

Subclasses of ``Service``, ``CommandHandler`` and ``QueryHandler`` are turned
into dataclasses automatically, so the DI container can build them straight
from their annotated collaborators.
"""

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, dataclass_transform

from pydantic import BaseModel


class Command(BaseModel): ...


class Query(BaseModel): ...


C = TypeVar("C", bound=Command)
Q = TypeVar("Q", bound=Query)
R = TypeVar("R")


@dataclass_transform()
class _AutoDataclassMeta(ABCMeta):
    """ABC metaclass that applies @dataclass to every concrete subclass."""

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any]):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            cls = dataclass(cls)
        return cls


class Service(metaclass=_AutoDataclassMeta):
    """Base class for domain services."""


class CommandHandler(Generic[C, R], metaclass=_AutoDataclassMeta):
    """Base class for handlers that change state."""

    @abstractmethod
    async def run(self, cmd: C) -> R: ...


class QueryHandler(Generic[Q, R], metaclass=_AutoDataclassMeta):
    """Base class for read-only handlers."""

    @abstractmethod
    async def run(self, query: Q) -> R: ...
