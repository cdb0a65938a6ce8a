"""Generate fluent builders for dataclasses.

Decorating a class with :func:`builder` adds a ``builder()`` class method that
returns a ``<Name>Builder`` object. The builder has one setter per field, each
returning the builder so calls can be chained, and a :meth:`Builder.build`
method that creates the instance once every required field has been set.

Fields annotated as optional (``Optional[T]``, ``T | None``) may be left
unset and default to ``None``. A list field declared with
``builder_field(each="item")`` gets a setter that appends one element at a
time.
"""

from __future__ import annotations

import dataclasses
import types
import typing
from dataclasses import dataclass
from typing import Any, Callable

__all__ = [
    "BuilderError",
    "BuilderAttributeError",
    "Builder",
    "builder_field",
    "builder",
]

_METADATA_KEY = "builder"
_SUPPORTED_PROPERTIES = frozenset({"each"})


class BuilderError(Exception):
    """Raised when a builder cannot produce its target object."""


class BuilderAttributeError(BuilderError):
    """Raised when a field's builder options are invalid."""


@dataclass(frozen=True)
class _FieldSpec:
    name: str
    optional: bool
    each: str | None


class Builder:
    """Base class of every generated builder."""

    _target: type = object
    _specs: tuple[_FieldSpec, ...] = ()

    def __init__(self) -> None:
        self._values: dict[str, Any] = self._initial_values()

    @classmethod
    def _initial_values(cls) -> dict[str, Any]:
        return {spec.name: [] if spec.each else None for spec in cls._specs}

    def build(self) -> Any:
        """Create the target object, taking the values out of the builder."""
        missing = [
            spec.name
            for spec in self._specs
            if not spec.optional and self._values[spec.name] is None
        ]
        if missing:
            raise BuilderError(
                f"Could not build {self._target.__name__} struct, "
                "as one or more required fields were left unset"
            )
        values = self._values
        self._values = {name: None for name in values}
        return self._target(**values)

    def __repr__(self) -> str:
        shown = ", ".join(f"{name}={value!r}" for name, value in self._values.items())
        return f"{type(self).__name__}({shown})"


def builder_field(*, each: str | None = None, **kwargs: Any) -> Any:
    """Declare builder options for a dataclass field.

    ``each`` names a setter that appends a single element to a list field.
    Any other keyword is an unsupported property and is rejected.
    """
    if kwargs:
        unknown = ", ".join(sorted(kwargs))
        raise BuilderAttributeError(f"unsupported builder attribute property: {unknown}")
    options: dict[str, Any] = {}
    if each is not None:
        if not isinstance(each, str) or not each.isidentifier():
            raise BuilderAttributeError(f"each must name a valid identifier, got {each!r}")
        options["each"] = each
    return dataclasses.field(metadata={_METADATA_KEY: options})


def _split_top_level(text: str, separator: str) -> list[str]:
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for char in text:
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        if char == separator and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    parts.append("".join(current))
    return parts


def _generic_argument(text: str, names: tuple[str, ...]) -> str | None:
    """Return the single argument of ``Name[arg]`` written literally."""
    for name in names:
        prefix = name + "["
        if text.startswith(prefix) and text.endswith("]"):
            inner = text[len(prefix) : -1]
            if inner and len(_split_top_level(inner, ",")) == 1:
                return inner
    return None


def _is_optional(annotation: Any) -> bool:
    if isinstance(annotation, str):
        text = annotation.replace(" ", "")
        if _generic_argument(text, ("Optional", "typing.Optional")) is not None:
            return True
        parts = _split_top_level(text, "|")
        return len(parts) > 1 and "None" in parts
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        return type(None) in typing.get_args(annotation)
    return False


def _is_list(annotation: Any) -> bool:
    if isinstance(annotation, str):
        text = annotation.replace(" ", "")
        return _generic_argument(text, ("list", "List", "typing.List")) is not None
    return typing.get_origin(annotation) is list and len(typing.get_args(annotation)) == 1


def _field_spec(field: dataclasses.Field) -> _FieldSpec:
    options = dict(field.metadata.get(_METADATA_KEY, {}))
    unknown = set(options) - _SUPPORTED_PROPERTIES
    if unknown:
        raise BuilderAttributeError(
            f"unsupported builder attribute property: {', '.join(sorted(unknown))}"
        )
    each = options.get("each")
    if each is not None and not _is_list(field.type):
        raise BuilderAttributeError(
            "each functions can only be generated for list fields where the "
            "type is written literally as `list[...]`"
        )
    return _FieldSpec(field.name, _is_optional(field.type), each)


def _make_setter(name: str) -> Callable[[Builder, Any], Builder]:
    def setter(self: Builder, value: Any) -> Builder:
        self._values[name] = value
        return self

    setter.__name__ = setter.__qualname__ = name
    setter.__doc__ = f"Set the {name!r} field."
    return setter


def _make_each_setter(method: str, name: str) -> Callable[[Builder, Any], Builder]:
    def append(self: Builder, item: Any) -> Builder:
        if self._values[name] is None:
            self._values[name] = []
        self._values[name].append(item)
        return self

    append.__name__ = append.__qualname__ = method
    append.__doc__ = f"Append one element to the {name!r} field."
    return append


def builder(cls: type) -> type:
    """Class decorator adding a ``builder()`` class method to a dataclass."""
    if not isinstance(cls, type):
        raise TypeError("builder can only be applied to classes")
    if not dataclasses.is_dataclass(cls):
        cls = dataclass(cls)

    specs = tuple(
        _field_spec(field) for field in dataclasses.fields(cls) if field.init
    )

    namespace: dict[str, Any] = {
        "_target": cls,
        "_specs": specs,
        "__module__": cls.__module__,
        "__doc__": f"Builder for {cls.__name__} objects.",
    }
    for spec in specs:
        if spec.each != spec.name:
            namespace[spec.name] = _make_setter(spec.name)
        if spec.each is not None:
            namespace[spec.each] = _make_each_setter(spec.each, spec.name)

    builder_cls = type(f"{cls.__name__}Builder", (Builder,), namespace)
    builder_cls.__qualname__ = f"{cls.__qualname__}Builder"

    def make_builder(target: type) -> Builder:
        return builder_cls()

    make_builder.__doc__ = f"Return an empty {builder_cls.__name__}."
    cls.builder = classmethod(make_builder)
    return cls