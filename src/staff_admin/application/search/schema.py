"""Application search – entity schema declaring attribute types and filter policies."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Iterator, Mapping

from staff_admin.kernel.errors import SchemaError

__all__ = ["AttributeSpec", "AttributeType", "EntitySchema", "FilterPolicy"]

_COMPANION_SUFFIXES = ("_min", "_max", "_from", "_to")


class AttributeType(str, Enum):
    INTEGER = "integer"
    TEXT = "text"
    DECIMAL = "decimal"
    TIMESTAMP = "timestamp"


class FilterPolicy(str, Enum):
    EXACT = "exact"
    PARTIAL_TEXT = "partial-text"
    RANGE_LOWER = "range-lower"
    RANGE_UPPER = "range-upper"
    IGNORED = "ignored"

    @property
    def is_range(self) -> bool:
        return self in (FilterPolicy.RANGE_LOWER, FilterPolicy.RANGE_UPPER)


@dataclasses.dataclass(frozen=True)
class AttributeSpec:
    """One search input of an entity.

    ``target`` names the attribute a companion input filters on, e.g.
    ``salary_min`` targets ``salary``.  Range inputs without an explicit
    target drop a trailing ``_min``/``_max``/``_from``/``_to`` from their name.
    """

    name: str
    type: AttributeType
    policy: FilterPolicy = FilterPolicy.EXACT
    target: str | None = None
    label: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", AttributeType(self.type))
        object.__setattr__(self, "policy", FilterPolicy(self.policy))
        if self.target is None and self.policy.is_range:
            object.__setattr__(self, "target", _strip_companion_suffix(self.name))

    @property
    def column(self) -> str:
        """Attribute the emitted predicate refers to."""
        return self.target or self.name

    @property
    def is_companion(self) -> bool:
        return self.column != self.name

    @property
    def display_label(self) -> str:
        return self.label or self.name.replace("_", " ").title()


def _strip_companion_suffix(name: str) -> str:
    for suffix in _COMPANION_SUFFIXES:
        if name.endswith(suffix) and len(name) > len(suffix):
            return name[: -len(suffix)]
    return name


@dataclasses.dataclass(frozen=True)
class EntitySchema:
    """Ordered, immutable declaration of an entity's searchable attributes.

    Declaration order is the order predicates are emitted in.  Every
    consistency check runs here so that a broken schema fails at startup,
    never while serving a request.
    """

    entity: str
    attributes: tuple[AttributeSpec, ...]
    primary_key: str = "id"
    sortable: tuple[str, ...] = ()
    default_page_size: int = 10
    _index: dict[str, AttributeSpec] = dataclasses.field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", tuple(self.attributes))
        object.__setattr__(self, "sortable", tuple(self.sortable))
        if not self.attributes:
            raise SchemaError(f"Schema '{self.entity}' declares no attributes")

        index: dict[str, AttributeSpec] = {}
        for spec in self.attributes:
            if spec.name in index:
                raise SchemaError(f"Schema '{self.entity}' declares '{spec.name}' twice")
            index[spec.name] = spec

        for spec in self.attributes:
            if not spec.is_companion:
                continue
            target = index.get(spec.column)
            if target is None:
                raise SchemaError(
                    f"'{spec.name}' filters on unknown attribute '{spec.column}'",
                    detail={"entity": self.entity, "attribute": spec.name},
                )
            if target.is_companion:
                raise SchemaError(f"'{spec.name}' targets companion input '{target.name}'")
            if target.type is not spec.type:
                raise SchemaError(
                    f"'{spec.name}' is {spec.type.value} but '{target.name}' is {target.type.value}"
                )

        base = {name for name, spec in index.items() if not spec.is_companion}
        if self.primary_key not in base:
            raise SchemaError(f"Primary key '{self.primary_key}' is not an attribute of '{self.entity}'")
        for name in self.sortable:
            if name not in base:
                raise SchemaError(f"Sortable attribute '{name}' is not an attribute of '{self.entity}'")
        if self.default_page_size < 1:
            raise SchemaError("default_page_size must be >= 1")

        object.__setattr__(self, "_index", index)

    @classmethod
    def from_mapping(
        cls,
        entity: str,
        attributes: Mapping[str, tuple[Any, ...]],
        **kwargs: Any,
    ) -> "EntitySchema":
        """Build from ``{name: (type, policy[, target])}``, preserving mapping order."""
        specs = [AttributeSpec(name, *declaration) for name, declaration in attributes.items()]
        return cls(entity, tuple(specs), **kwargs)

    def __iter__(self) -> Iterator[AttributeSpec]:
        return iter(self.attributes)

    def __len__(self) -> int:
        return len(self.attributes)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def get(self, name: str) -> AttributeSpec | None:
        return self._index.get(name)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.attributes)

    def label_for(self, name: str) -> str:
        spec = self._index.get(name)
        return spec.display_label if spec else name

    def is_sortable(self, name: str) -> bool:
        return name == self.primary_key or name in self.sortable
