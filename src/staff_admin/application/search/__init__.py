"""Application search – schema-driven query filter engine."""
from staff_admin.application.search.builder import BuildResult, QueryFilterBuilder, build
from staff_admin.application.search.executor import InMemoryQueryExecutor
from staff_admin.application.search.query import Operator, Predicate, QueryDescriptor
from staff_admin.application.search.schema import (
    AttributeSpec,
    AttributeType,
    EntitySchema,
    FilterPolicy,
)

__all__ = [
    "AttributeSpec",
    "AttributeType",
    "BuildResult",
    "EntitySchema",
    "FilterPolicy",
    "InMemoryQueryExecutor",
    "Operator",
    "Predicate",
    "QueryDescriptor",
    "QueryFilterBuilder",
    "build",
]
