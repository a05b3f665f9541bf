# Standard library imports
from typing import Any, Callable, Dict, Hashable


class BaseContainer:
    """
    Minimal dependency injection container.
    
    Keys are either interface classes (repositories, use cases) or string
    names for infrastructure objects such as collections. Singletons are
    stored instances; factories build a fresh object on every ``get``.
    """
    
    def __init__(self) -> None:
        self._singletons: Dict[Hashable, Any] = {}
        self._factories: Dict[Hashable, Callable[[], Any]] = {}
    
    def register_singleton(self, key: Hashable, instance: Any) -> None:
        self._singletons[key] = instance
    
    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        self._factories[key] = factory
    
    def get(self, key: Hashable) -> Any:
        """
        Resolve a registered dependency
        
        Args:
            key: Interface class or registration name
            
        Returns:
            The singleton instance or a newly built object
            
        Raises:
            ValueError: If nothing is registered under ``key``
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = getattr(key, "__name__", key)
        raise ValueError(f"No dependency registered for {name}")
    
    def is_registered(self, key: Hashable) -> bool:
        return key in self._singletons or key in self._factories
