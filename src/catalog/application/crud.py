"""Reusable CRUD orchestration.

Services hold a CrudOperations instance instead of inheriting from a
base service class. The helper is generic over the entity type and
only needs a repository exposing save / find_by_id / delete_by_id /
find_all.
"""

from __future__ import annotations

from typing import Callable, Generic, Protocol, TypeVar

from loguru import logger

from catalog.domain.exceptions import EntityNotFoundError

T = TypeVar("T")


class CrudRepository(Protocol[T]):

    def save(self, entity: T) -> T: ...

    def find_by_id(self, entity_id: int) -> T | None: ...

    def delete_by_id(self, entity_id: int) -> bool: ...

    def find_all(self) -> list[T]: ...


class CrudOperations(Generic[T]):

    def __init__(self, repo: CrudRepository[T], entity_name: str) -> None:
        self._repo = repo
        self._entity_name = entity_name

    def create(self, entity: T) -> T:
        stored = self._repo.save(entity)
        logger.info("{} #{} created", self._entity_name, getattr(stored, "id", "?"))
        return stored

    def get(self, entity_id: int) -> T | None:
        return self._repo.find_by_id(entity_id)

    def list_all(self) -> list[T]:
        return self._repo.find_all()

    def modify(self, entity_id: int, change: Callable[[T], None]) -> T:
        """Load, apply ``change`` in place, save.

        Unlike ``get``, a missing entity is an error here.
        """
        entity = self._repo.find_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(
                f"{self._entity_name} with ID '{entity_id}' not found"
            )
        change(entity)
        stored = self._repo.save(entity)
        logger.info("{} #{} updated", self._entity_name, entity_id)
        return stored

    def delete(self, entity_id: int) -> bool:
        removed = self._repo.delete_by_id(entity_id)
        if removed:
            logger.info("{} #{} deleted", self._entity_name, entity_id)
        else:
            logger.debug("{} #{} not present, delete is a no-op", self._entity_name, entity_id)
        return removed
