from __future__ import annotations

from typing import Callable, ClassVar, Dict, List, Optional, Type, TypeVar

from webhook_models.core.exceptions import RecordRegistryError
from webhook_models.core.record import Record

R = TypeVar("R", bound=Type[Record])


class RecordRegistry:
    _registry: ClassVar[Dict[str, Type[Record]]] = {}

    @classmethod
    def register(
        cls,
        *,
        name: str,
        record_class: Type[Record],
        overwrite: bool = False,
    ) -> None:
        if not overwrite and name in cls._registry:
            existing = cls._registry[name]
            if existing is record_class:
                return
            raise RecordRegistryError(f"Record type already registered for name={name!r}: {existing}")
        cls._registry[name] = record_class

    @classmethod
    def get(cls, name: str) -> Type[Record]:
        try:
            return cls._registry[name]
        except KeyError as exc:
            raise RecordRegistryError(f"No record type registered for name={name!r}") from exc

    @classmethod
    def try_get(cls, name: str) -> Optional[Type[Record]]:
        return cls._registry.get(name)

    @classmethod
    def names(cls) -> List[str]:
        return sorted(cls._registry)

    @classmethod
    def clear(cls) -> None:
        cls._registry.clear()


def register_record(name: Optional[str] = None, *, overwrite: bool = False) -> Callable[[R], R]:
    """Class decorator registering a record under its API schema name (defaults to the class name)."""

    def decorator(record_class: R) -> R:
        RecordRegistry.register(
            name=name or record_class.__name__,
            record_class=record_class,
            overwrite=overwrite,
        )
        return record_class

    return decorator
