"""Declaration references for class members.

Python has no reflection handles for properties and methods, so readers
receive these small value objects instead: the class that declares the
member plus the member's name. Both are hashable and compare by value.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class PropertyDeclaration:
    """A property (attribute) declared on a class.

    Attributes:
        declaring_class: Class, or declaration descriptor, that owns the property
        name: Property name
    """

    declaring_class: Any
    name: str

    def __post_init__(self) -> None:
        if not self.name:
            msg = "property name must be non-empty"
            raise ValueError(msg)

    @classmethod
    def of(cls, declaring_class: type, name: str) -> PropertyDeclaration:
        """Reference a property, resolving the class that actually declares it.

        Walks the MRO so that an attribute inherited from a base class is
        keyed under the base class, the same place a reader would find it.

        Args:
            declaring_class: Class the property is looked up on
            name: Property name

        Returns:
            PropertyDeclaration bound to the declaring class
        """
        return cls(_resolve_owner(declaring_class, name), name)

    @classmethod
    def from_property(cls, declaring_class: type, prop: property) -> PropertyDeclaration:
        """Reference a property from the ``property`` object itself.

        Raises:
            ValueError: If prop is not an attribute of declaring_class or its bases
        """
        for candidate in getattr(declaring_class, "__mro__", (declaring_class,)):
            for name, value in vars(candidate).items():
                if value is prop:
                    return cls(candidate, name)

        msg = f"{prop!r} is not defined on {declaring_class!r}"
        raise ValueError(msg)


@dataclass(frozen=True)
class MethodDeclaration:
    """A method declared on a class.

    Attributes:
        declaring_class: Class, or declaration descriptor, that owns the method
        name: Method name
    """

    declaring_class: Any
    name: str

    def __post_init__(self) -> None:
        if not self.name:
            msg = "method name must be non-empty"
            raise ValueError(msg)

    @classmethod
    def of(cls, declaring_class: type, name: str) -> MethodDeclaration:
        """Reference a method, resolving the class that actually declares it."""
        return cls(_resolve_owner(declaring_class, name), name)

    @classmethod
    def from_function(cls, declaring_class: type, func: Callable[..., Any]) -> MethodDeclaration:
        """Reference a method from the function object itself.

        Example:
            >>> MethodDeclaration.from_function(Controller, Controller.hello_action)
            MethodDeclaration(declaring_class=<class '...Controller'>, name='hello_action')
        """
        func = getattr(func, "__func__", func)
        return cls.of(declaring_class, func.__name__)


def _resolve_owner(klass: Any, name: str) -> Any:
    # Descriptors built at registration time carry no MRO
    mro = getattr(klass, "__mro__", None)
    if not mro:
        return klass

    for candidate in mro:
        if name in vars(candidate) or name in _own_annotations(candidate):
            return candidate

    return klass


def _own_annotations(klass: type) -> dict[str, Any]:
    try:
        return inspect.get_annotations(klass)
    except (NameError, TypeError):
        # Unresolvable forward references only affect annotation values
        return dict(vars(klass).get("__annotations__", {}))
