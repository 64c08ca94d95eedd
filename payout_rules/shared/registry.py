"""Generic registry for storing and retrieving components by key."""

from __future__ import annotations
import copy
from typing import Dict, Generic, List, Optional, TypeVar

from payout_rules.shared.errors import RegistryFrozenError

T = TypeVar("T")


class Registry(Generic[T]):
    """
    A generic registry for storing and retrieving components by key.

    Populate it once, then call freeze(): after that the registry is
    read-only and can be shared between threads without locking.
    """

    def __init__(self, name: str = "Registry") -> None:
        self.name = name
        self._registry: Dict[str, T] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise RegistryFrozenError(f"{self.name} is frozen")

    def register(self, name: str, component: T) -> T:
        """
        Register a component under the given key.
        Overwrites existing component if the key already exists.
        """
        self._ensure_mutable()
        self._registry[name] = component
        return component

    def get(self, name: str) -> Optional[T]:
        """
        Get a component by key. Returns None if not found.
        """
        return self._registry.get(name)

    def list(self) -> Dict[str, T]:
        """
        Return a copy of all registered components.
        """
        return copy.deepcopy(self._registry)

    def keys(self) -> List[str]:
        return sorted(self._registry)

    def clear(self) -> None:
        """
        Clear all registered components.
        """
        self._ensure_mutable()
        self._registry.clear()

    def freeze(self) -> None:
        """
        Make the registry read-only. Idempotent.
        """
        self._frozen = True

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __len__(self) -> int:
        return len(self._registry)
