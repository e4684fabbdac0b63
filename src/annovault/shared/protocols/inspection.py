"""Declaration metadata provider protocol.

Staleness checks need four facts about a declaring type: where its source
lives, what it extends, which mixins it composes and which interfaces it
implements. Inspectors supply them without the reader depending on a
particular reflection mechanism.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any, Protocol


class DeclarationInspector(Protocol):
    """Structural facts about a declaring type."""

    def qualified_name(self, decl: Any) -> str:
        """Return the fully-qualified, namespaced name of the type."""

    def source_file(self, decl: Any) -> Path | None:
        """Return the file the type is defined in, None when unresolvable."""

    def parent(self, decl: Any) -> Any | None:
        """Return the direct supertype, None at the root."""

    def mixins(self, decl: Any) -> Sequence[Any]:
        """Return the directly composed mixins."""

    def interfaces(self, decl: Any) -> Sequence[Any]:
        """Return the directly implemented interfaces."""
