"""Application search – QueryFilterBuilder.

Turns raw search-form input into a :class:`QueryDescriptor`:

1. every provided value is validated against its declared type, errors
   accumulate per input name;
2. if anything failed, no predicate is emitted at all (fail-closed) while
   sort and pagination are still resolved;
3. otherwise one predicate per provided input, in schema declaration order.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from staff_admin.application.pagination import PageRequest, Sort, SortDirection
from staff_admin.application.search.query import Operator, Predicate, QueryDescriptor
from staff_admin.application.search.schema import AttributeType, EntitySchema, FilterPolicy
from staff_admin.application.search.validation import validate_input
from staff_admin.kernel.errors import SchemaError, UnsupportedSortError, ValidationError
from staff_admin.observability.logging import get_logger

__all__ = ["BuildResult", "QueryFilterBuilder", "build"]

_logger = get_logger(__name__)

_OPERATORS: dict[FilterPolicy, Operator] = {
    FilterPolicy.EXACT: Operator.EQ,
    FilterPolicy.PARTIAL_TEXT: Operator.ICONTAINS,
    FilterPolicy.RANGE_LOWER: Operator.GTE,
    FilterPolicy.RANGE_UPPER: Operator.LTE,
}

# Inclusive whole-day bounds for date ranges on timestamp attributes.
_DAY_START = "00:00:00"
_DAY_END = "23:59:59"


@dataclass(frozen=True)
class BuildResult:
    """Outcome of one build: validated values, descriptor and field errors."""

    validated_input: Mapping[str, Any]
    descriptor: QueryDescriptor
    errors: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_error(self) -> ValidationError | None:
        """Return the errors as a :class:`ValidationError`, or ``None``."""
        if self.ok:
            return None
        return ValidationError.from_fields(self.errors, "Invalid search input")


class QueryFilterBuilder:
    """Stateless builder bound to one :class:`EntitySchema`.

    Safe to share between threads and tasks.  ``max_page_size`` optionally
    clamps the page size requested by callers.
    """

    def __init__(self, schema: EntitySchema, *, max_page_size: int | None = None) -> None:
        if not isinstance(schema, EntitySchema):
            raise SchemaError(f"Expected an EntitySchema, got {type(schema).__name__}")
        if max_page_size is not None and max_page_size < 1:
            raise SchemaError("max_page_size must be >= 1")
        self._schema = schema
        self._max_page_size = max_page_size

    @property
    def schema(self) -> EntitySchema:
        return self._schema

    @property
    def default_sort(self) -> Sort:
        return Sort(self._schema.primary_key, SortDirection.DESC)

    def build(
        self,
        raw_input: Mapping[str, Any] | None = None,
        *,
        sort: str | Sort | None = None,
        page: int = 1,
        page_size: int | None = None,
    ) -> BuildResult:
        raw_input = raw_input or {}
        unknown = [key for key in raw_input if key not in self._schema]
        if unknown:
            _logger.debug("search.unknown_inputs_ignored", entity=self._schema.entity, inputs=unknown)

        validated, errors = validate_input(self._schema, raw_input)
        predicates: tuple[Predicate, ...] = ()
        if errors:
            _logger.info("search.validation_failed", entity=self._schema.entity, errors=errors)
        else:
            predicates = self._predicates(validated)

        descriptor = QueryDescriptor(
            predicates=predicates,
            sort=self._resolve_sort(sort),
            page=self._resolve_page(page, page_size),
        )
        return BuildResult(
            validated_input=MappingProxyType(validated),
            descriptor=descriptor,
            errors=MappingProxyType(errors),
        )

    def _predicates(self, validated: Mapping[str, Any]) -> tuple[Predicate, ...]:
        predicates: list[Predicate] = []
        for spec in self._schema:
            if spec.name not in validated or spec.policy is FilterPolicy.IGNORED:
                continue
            value = validated[spec.name]
            if spec.type is AttributeType.TIMESTAMP and spec.policy is FilterPolicy.RANGE_LOWER:
                value = f"{value} {_DAY_START}"
            elif spec.type is AttributeType.TIMESTAMP and spec.policy is FilterPolicy.RANGE_UPPER:
                value = f"{value} {_DAY_END}"
            predicates.append(Predicate(spec.column, _OPERATORS[spec.policy], value))
        return tuple(predicates)

    def _resolve_sort(self, sort: str | Sort | None) -> Sort:
        if sort is None or (isinstance(sort, str) and not sort.strip()):
            return self.default_sort
        requested = sort if isinstance(sort, Sort) else Sort.parse(sort)
        try:
            self._check_sortable(requested.field)
        except UnsupportedSortError as exc:
            _logger.debug(
                "search.unsupported_sort",
                entity=self._schema.entity,
                attribute=exc.attribute,
                fallback=self.default_sort.token,
            )
            return self.default_sort
        return requested

    def _check_sortable(self, attribute: str) -> None:
        if not self._schema.is_sortable(attribute):
            raise UnsupportedSortError(attribute, allowed=self._schema.sortable)

    def _resolve_page(self, page: int, page_size: int | None) -> PageRequest:
        size = page_size if page_size is not None else self._schema.default_page_size
        return PageRequest(page=page, size=size).clamped(self._max_page_size)


def build(
    schema: EntitySchema,
    raw_input: Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> BuildResult:
    """One-shot form of :meth:`QueryFilterBuilder.build`."""
    return QueryFilterBuilder(schema).build(raw_input, **kwargs)
