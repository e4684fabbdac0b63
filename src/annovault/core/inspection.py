"""Declaration inspectors.

Inspectors answer the structural questions the cached reader asks when it
checks an entry for staleness: the qualified name that keys the entry, the
source file whose modification time dates it, and the supertype, mixins
and interfaces whose sources it also depends on.

Two implementations are provided:

- ``ReflectionInspector`` introspects live Python classes.
- ``DescriptorInspector`` reads explicit ``DeclarationDescriptor`` records
  built at registration time, for declarations that are not Python classes.
"""

from __future__ import annotations

import abc
import inspect
import logging
import typing
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from annovault.shared.constants import CacheKeyConfig
from annovault.shared.types import Timestamp

logger = logging.getLogger(__name__)

# Roots of every hierarchy; their sources never date a user declaration
_SKIPPED_BASES: frozenset[Any] = frozenset({object, typing.Protocol, typing.Generic, abc.ABC})


def source_mtime(path: Path | str | None) -> Timestamp:
    """Return the integer modification time of a source file.

    Args:
        path: Source file path, or None when the declaration has none

    Returns:
        Unix timestamp in whole seconds, 0 when the file is missing or
        cannot be stat'ed
    """
    if path is None:
        return 0

    try:
        return int(Path(path).stat().st_mtime)
    except OSError:
        logger.debug("Source file not accessible for staleness check: %s", path)
        return 0


class ReflectionInspector:
    """Inspector for Python classes.

    Direct bases are classified the way Python code conventionally composes
    them: ``typing.Protocol`` classes are interfaces, and of the remaining
    bases the rightmost is the supertype while the ones to its left are
    mixins (``class View(LoggingMixin, BaseView)``).

    Example:
        >>> inspector = ReflectionInspector()
        >>> inspector.qualified_name(OrderedDict)
        'collections:OrderedDict'
        >>> inspector.source_file(int) is None
        True
    """

    def qualified_name(self, decl: type) -> str:
        return f"{decl.__module__}{CacheKeyConfig.QUALNAME_SEPARATOR}{decl.__qualname__}"

    def source_file(self, decl: type) -> Path | None:
        try:
            filename = inspect.getsourcefile(decl)
        except (TypeError, OSError):
            # Builtins, C extensions and classes created in __main__ of an
            # interactive session have no source on disk
            return None

        return Path(filename) if filename else None

    def parent(self, decl: type) -> type | None:
        candidates = self._class_bases(decl)
        return candidates[-1] if candidates else None

    def mixins(self, decl: type) -> Sequence[type]:
        return tuple(self._class_bases(decl)[:-1])

    def interfaces(self, decl: type) -> Sequence[type]:
        return tuple(base for base in self._bases(decl) if _is_protocol(base))

    def _class_bases(self, decl: type) -> list[type]:
        return [base for base in self._bases(decl) if not _is_protocol(base)]

    @staticmethod
    def _bases(decl: type) -> list[type]:
        return [base for base in getattr(decl, "__bases__", ()) if base not in _SKIPPED_BASES]


def _is_protocol(klass: type) -> bool:
    return bool(getattr(klass, "_is_protocol", False))


@dataclass(frozen=True)
class DeclarationDescriptor:
    """Explicit structural description of a declaring type.

    Attributes:
        name: Fully-qualified name, namespaces separated by ``.``, ``:``
            or ``\\``
        source_file: File the type is defined in, None if it has none
        parent: Descriptor of the supertype
        mixins: Descriptors of the composed mixins
        interfaces: Descriptors of the implemented interfaces

    Example:
        >>> base = DeclarationDescriptor("app.Base", Path("app/base.py"))
        >>> DeclarationDescriptor("app.Controller", Path("app/controller.py"), parent=base)
    """

    name: str
    source_file: Path | None = None
    parent: DeclarationDescriptor | None = None
    mixins: tuple[DeclarationDescriptor, ...] = ()
    interfaces: tuple[DeclarationDescriptor, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            msg = "descriptor name must be non-empty"
            raise ValueError(msg)

        if self.source_file is not None and not isinstance(self.source_file, Path):
            object.__setattr__(self, "source_file", Path(self.source_file))

        object.__setattr__(self, "mixins", tuple(self.mixins))
        object.__setattr__(self, "interfaces", tuple(self.interfaces))


class DescriptorInspector:
    """Inspector for ``DeclarationDescriptor`` records."""

    def qualified_name(self, decl: DeclarationDescriptor) -> str:
        return decl.name

    def source_file(self, decl: DeclarationDescriptor) -> Path | None:
        return decl.source_file

    def parent(self, decl: DeclarationDescriptor) -> DeclarationDescriptor | None:
        return decl.parent

    def mixins(self, decl: DeclarationDescriptor) -> Sequence[DeclarationDescriptor]:
        return decl.mixins

    def interfaces(self, decl: DeclarationDescriptor) -> Sequence[DeclarationDescriptor]:
        return decl.interfaces
