"""Annotated sample application shared by the test suite.

The annotations are not attached to the classes; ``RecordingReader`` looks
them up in ``ANNOTATIONS`` and records every call it receives, which lets
tests count how often the cached reader falls through to its delegate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class Route:
    path: str
    kind: str = "route"


@dataclass(frozen=True)
class Template:
    name: str


@dataclass(frozen=True)
class Inject:
    service: str


class Renderable(Protocol):
    def render(self) -> str: ...


class TimestampedMixin:
    created_at: int = 0


class BaseController:
    def dispatch(self) -> None:
        pass


class Controller(TimestampedMixin, BaseController, Renderable):
    title: str = "home"

    def hello_action(self) -> str:
        return "hello"

    def render(self) -> str:
        return self.hello_action()


ANNOTATIONS: dict[Any, list[Any]] = {
    Controller: [Route("/"), Template("index.html")],
    (Controller, "title"): [Inject("translator")],
    (Controller, "hello_action"): [Route("/hello"), Template("hello.html")],
}


class RecordingReader:
    """Delegate reader serving ``ANNOTATIONS`` and recording its calls."""

    def __init__(self, annotations: dict[Any, list[Any]] | None = None) -> None:
        self.annotations = ANNOTATIONS if annotations is None else annotations
        self.calls: list[tuple[Any, ...]] = []

    def get_class_annotations(self, cls: Any) -> list[Any]:
        self.calls.append(("class", cls))
        return list(self.annotations.get(cls, []))

    def get_class_annotation(self, cls: Any, kind: Any) -> Any | None:
        return next((a for a in self.get_class_annotations(cls) if isinstance(a, kind)), None)

    def get_property_annotations(self, prop: Any) -> list[Any]:
        self.calls.append(("property", prop.declaring_class, prop.name))
        return list(self.annotations.get((prop.declaring_class, prop.name), []))

    def get_property_annotation(self, prop: Any, kind: Any) -> Any | None:
        return next((a for a in self.get_property_annotations(prop) if isinstance(a, kind)), None)

    def get_method_annotations(self, method: Any) -> list[Any]:
        self.calls.append(("method", method.declaring_class, method.name))
        return list(self.annotations.get((method.declaring_class, method.name), []))

    def get_method_annotation(self, method: Any, kind: Any) -> Any | None:
        return next((a for a in self.get_method_annotations(method) if isinstance(a, kind)), None)
