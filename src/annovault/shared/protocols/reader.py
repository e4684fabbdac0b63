"""Annotation reader protocol.

Both the parsing delegate and the caching decorator expose this interface,
so a cached reader can stand in wherever a plain reader is expected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from annovault.shared.types import AnnotationList

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from annovault.core.declarations import MethodDeclaration, PropertyDeclaration


@runtime_checkable
class AnnotationReaderProtocol(Protocol):
    """Reads the annotations attached to classes, properties and methods."""

    def get_class_annotations(self, cls: Any) -> AnnotationList:
        """Return all annotations of a class, in declaration order."""

    def get_class_annotation(self, cls: Any, kind: Any) -> Any | None:
        """Return the first class annotation of the given kind, or None."""

    def get_property_annotations(self, prop: PropertyDeclaration) -> AnnotationList:
        """Return all annotations of a property, in declaration order."""

    def get_property_annotation(self, prop: PropertyDeclaration, kind: Any) -> Any | None:
        """Return the first property annotation of the given kind, or None."""

    def get_method_annotations(self, method: MethodDeclaration) -> AnnotationList:
        """Return all annotations of a method, in declaration order."""

    def get_method_annotation(self, method: MethodDeclaration, kind: Any) -> Any | None:
        """Return the first method annotation of the given kind, or None."""
