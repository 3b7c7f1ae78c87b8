"""
Connection Directive

Schema transformer for Relay-style cursor pagination.

Tag a list field with ``@connection`` and the transformer:

1. Adds ``PageInfo``, ``<Prefix>Edge`` and ``<Prefix>Connection`` types
   (unless the schema already declares them)
2. Changes the field's type to ``<Prefix>Connection!``
3. Adds ``first: Int`` and ``after: ID`` arguments
4. Wraps the field's resolver so a returned list (or partial connection
   mapping) is shaped into ``{edges, pageInfo}``

The prefix defaults to the field's node type name and can be overridden
per field, which keeps relationship-specific edges apart:

    type Person {
        films: [Film!]! @connection(prefix: "PersonFilm")
    }

Usage:
    directive = connection_directive({"Film": {"paginationMode": "simple"}})

    schema = make_executable_schema(
        [directive.type_defs, type_defs],
        query,
    )
    schema = directive.transform(schema)
"""

import logging
from dataclasses import dataclass
from inspect import isawaitable
from typing import Any, Dict, List, Mapping, Optional, Set

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLFieldResolver,
    GraphQLID,
    GraphQLInt,
    GraphQLNonNull,
    GraphQLResolveInfo,
    GraphQLSchema,
    default_field_resolver,
    extend_schema,
    get_directive_values,
    get_named_type,
    is_introspection_type,
    is_object_type,
    parse,
)

from relay_connection.config import get_directive_settings
from relay_connection.graphql.results import PartialConnection, classify_result
from relay_connection.graphql.schema_mapper import SchemaMapper
from relay_connection.schemas.pagination import PaginationConfig, parse_type_options
from relay_connection.services.connection import build_connection

logger = logging.getLogger(__name__)

PAGE_INFO_TYPE = "PageInfo"

PAGE_INFO_FIELDS = {
    "startCursor": "String",
    "endCursor": "String",
    "hasNextPage": "Boolean!",
    "hasPreviousPage": "Boolean!",
}


@dataclass(frozen=True)
class ConnectionFieldBinding:
    """A tagged field, recorded during the scan of one transform call."""

    base_type_name: str
    original_resolver: GraphQLFieldResolver
    prefix: str

    @property
    def edge_type_name(self) -> str:
        return f"{self.prefix}Edge"

    @property
    def connection_type_name(self) -> str:
        return f"{self.prefix}Connection"


def render_type(name: str, fields: Mapping[str, str]) -> str:
    """Render an object type definition as SDL."""
    lines = "\n".join(f"  {field_name}: {type_string}" for field_name, type_string in fields.items())
    return f"type {name} {{\n{lines}\n}}"


class ConnectionDirective:
    """
    Directive definition plus the schema transform that implements it.

    Attributes:
        directive_name: Name used in SDL (``@connection`` by default)
        type_options: Validated per-node-type options
    """

    def __init__(
        self,
        type_options: Optional[Mapping[str, Any]] = None,
        directive_name: Optional[str] = None,
    ):
        self.directive_name = directive_name or get_directive_settings().directive_name
        self.type_options: Dict[str, PaginationConfig] = parse_type_options(type_options)

    @property
    def type_defs(self) -> str:
        """SDL declaring the directive; include it in the schema's type defs."""
        return f"directive @{self.directive_name}(prefix: String) on FIELD_DEFINITION"

    def config_for(self, type_name: str) -> PaginationConfig:
        return self.type_options.get(type_name) or PaginationConfig()

    # -------------------------------------------------------------------------
    # Transform
    # -------------------------------------------------------------------------
    def transform(self, schema: GraphQLSchema) -> GraphQLSchema:
        """
        Return a new schema with every tagged field rewritten.

        The input schema is left untouched. Types the schema already
        declares (``PageInfo``, ``FooEdge``, ``FooConnection``) are never
        redefined or extended.
        """
        existing_types = set(schema.type_map)
        bindings = self.scan(schema)

        type_defs = self.synthesize_types(existing_types, bindings)
        if type_defs:
            logger.debug("Adding connection types:\n%s", "\n".join(type_defs))
            schema = extend_schema(schema, parse("\n\n".join(type_defs)))

        return SchemaMapper(schema, self._field_mapper(schema, bindings)).map_schema()

    def scan(self, schema: GraphQLSchema) -> Dict[str, ConnectionFieldBinding]:
        """Find tagged fields, keyed ``"TypeName.fieldName"``."""
        directive = schema.get_directive(self.directive_name)
        if directive is None:
            logger.warning(
                "Directive @%s is not defined in the schema; include "
                "ConnectionDirective.type_defs in the type definitions",
                self.directive_name,
            )
            return {}

        bindings: Dict[str, ConnectionFieldBinding] = {}
        for type_name, type_ in schema.type_map.items():
            if not is_object_type(type_) or is_introspection_type(type_):
                continue

            for field_name, field in type_.fields.items():
                if field.ast_node is None:
                    continue
                values = get_directive_values(directive, field.ast_node)
                if values is None:
                    continue

                base_type_name = get_named_type(field.type).name
                binding = ConnectionFieldBinding(
                    base_type_name=base_type_name,
                    original_resolver=field.resolve or default_field_resolver,
                    prefix=values.get("prefix") or base_type_name,
                )
                bindings[f"{type_name}.{field_name}"] = binding
                logger.debug(
                    "Field %s.%s paginated as %s",
                    type_name,
                    field_name,
                    binding.connection_type_name,
                )

        return bindings

    def synthesize_types(
        self,
        existing_types: Set[str],
        bindings: Mapping[str, ConnectionFieldBinding],
    ) -> List[str]:
        """SDL for every supporting type the schema is missing."""
        type_defs = []
        known = set(existing_types)

        if PAGE_INFO_TYPE not in known:
            type_defs.append(render_type(PAGE_INFO_TYPE, PAGE_INFO_FIELDS))
            known.add(PAGE_INFO_TYPE)

        for binding in bindings.values():
            config = self.config_for(binding.base_type_name)
            edge_element = binding.base_type_name

            if not config.is_simple:
                edge_element = binding.edge_type_name
                if binding.edge_type_name not in known:
                    fields = {"cursor": "ID!", "node": binding.base_type_name}
                    for name, type_string in config.edge_fields(binding.prefix).items():
                        fields.setdefault(name, type_string)
                    type_defs.append(render_type(binding.edge_type_name, fields))
                    known.add(binding.edge_type_name)

            if binding.connection_type_name not in known:
                fields = {
                    "edges": f"[{edge_element}!]!",
                    "pageInfo": f"{PAGE_INFO_TYPE}!",
                }
                for name, type_string in config.connection_fields(binding.prefix).items():
                    fields.setdefault(name, type_string)
                type_defs.append(render_type(binding.connection_type_name, fields))
                known.add(binding.connection_type_name)

        return type_defs

    # -------------------------------------------------------------------------
    # Rewrite
    # -------------------------------------------------------------------------
    def _field_mapper(
        self,
        schema: GraphQLSchema,
        bindings: Mapping[str, ConnectionFieldBinding],
    ):
        def map_field(type_name: str, field_name: str, field: GraphQLField) -> GraphQLField:
            binding = bindings.get(f"{type_name}.{field_name}")
            if binding is None:
                return field

            return GraphQLField(
                **{
                    **field.to_kwargs(),
                    "type_": GraphQLNonNull(schema.get_type(binding.connection_type_name)),
                    "args": {
                        **field.args,
                        "first": GraphQLArgument(GraphQLInt),
                        "after": GraphQLArgument(GraphQLID),
                    },
                    "resolve": self.connection_resolver(binding),
                }
            )

        return map_field

    def connection_resolver(self, binding: ConnectionFieldBinding) -> GraphQLFieldResolver:
        """
        Wrap a field's original resolver.

        The original resolver receives every argument, including ``first``
        and ``after``. Awaitable results are awaited before shaping, so the
        same wrapper serves sync and async execution.
        """
        config = self.config_for(binding.base_type_name)
        original = binding.original_resolver

        def shape(result: Any, args: Mapping[str, Any]) -> Dict[str, Any]:
            variant = classify_result(result)
            if isinstance(variant, PartialConnection):
                return build_connection(
                    binding.base_type_name,
                    variant.items,
                    args,
                    config,
                    variant.page_info,
                    variant.extra_props,
                    prefix=binding.prefix,
                )
            return build_connection(
                binding.base_type_name,
                variant.items,
                args,
                config,
                prefix=binding.prefix,
            )

        def resolve(root: Any, info: GraphQLResolveInfo, **args: Any) -> Any:
            result = original(root, info, **args)

            if isawaitable(result):
                async def await_result() -> Dict[str, Any]:
                    return shape(await result, args)

                return await_result()

            return shape(result, args)

        return resolve


def connection_directive(
    type_options: Optional[Mapping[str, Any]] = None,
    directive_name: Optional[str] = None,
) -> ConnectionDirective:
    """
    Create the connection directive.

    Args:
        type_options: ``{node type name: options}``, see PaginationConfig
        directive_name: SDL directive name, defaults to the
            ``DIRECTIVE_NAME`` setting (``connection``)

    Returns:
        ConnectionDirective with ``type_defs`` and ``transform``

    Raises:
        pydantic.ValidationError: If ``type_options`` is malformed
    """
    return ConnectionDirective(type_options, directive_name)
