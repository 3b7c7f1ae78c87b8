"""
Schema Mapper

Rebuilds a GraphQLSchema so object-type fields can be replaced without
touching the original schema objects.

graphql-core types are mutable and shared by reference, so rewriting a
field in place would also rewrite the caller's schema. Instead every
object, interface and union type is re-created and all references are
rewired by name to the new objects. Leaf types, input types and
directives carry no references to output types and are reused as-is.
"""

from typing import Callable, Dict, Optional

from graphql import (
    GraphQLField,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLType,
    GraphQLUnionType,
    is_interface_type,
    is_introspection_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
    is_union_type,
)

# (type name, field name, field) -> replacement field
FieldMapper = Callable[[str, str, GraphQLField], GraphQLField]


class SchemaMapper:
    """
    Copy a schema, passing every object-type field through ``map_field``.

    The mapper may return a field whose type references named types of
    the source schema (or specified scalars); references are resolved by
    name against the rebuilt type map.

    Usage:
        new_schema = SchemaMapper(schema, map_field).map_schema()
    """

    def __init__(self, schema: GraphQLSchema, map_field: Optional[FieldMapper] = None):
        self.schema = schema
        self.map_field = map_field
        self.type_map: Dict[str, GraphQLNamedType] = {}

    def map_schema(self) -> GraphQLSchema:
        for name, type_ in self.schema.type_map.items():
            self.type_map[name] = self._copy_named_type(type_)

        kwargs = self.schema.to_kwargs()
        return GraphQLSchema(
            **{
                **kwargs,
                "query": self._get(kwargs["query"]),
                "mutation": self._get(kwargs["mutation"]),
                "subscription": self._get(kwargs["subscription"]),
                "types": list(self.type_map.values()),
                "assume_valid": False,
            }
        )

    def _get(self, type_: Optional[GraphQLNamedType]) -> Optional[GraphQLNamedType]:
        if type_ is None:
            return None
        return self.type_map.get(type_.name, type_)

    def _replace_type(self, type_: GraphQLType) -> GraphQLType:
        if is_list_type(type_):
            return GraphQLList(self._replace_type(type_.of_type))
        if is_non_null_type(type_):
            return GraphQLNonNull(self._replace_type(type_.of_type))
        return self._get(type_)

    def _copy_named_type(self, type_: GraphQLNamedType) -> GraphQLNamedType:
        if is_introspection_type(type_):
            return type_

        if is_object_type(type_):
            return GraphQLObjectType(
                **{
                    **type_.to_kwargs(),
                    "fields": lambda: self._copy_fields(type_, mapped=True),
                    "interfaces": lambda: [self._get(i) for i in type_.interfaces],
                }
            )

        if is_interface_type(type_):
            return GraphQLInterfaceType(
                **{
                    **type_.to_kwargs(),
                    "fields": lambda: self._copy_fields(type_, mapped=False),
                    "interfaces": lambda: [self._get(i) for i in type_.interfaces],
                }
            )

        if is_union_type(type_):
            return GraphQLUnionType(
                **{
                    **type_.to_kwargs(),
                    "types": lambda: [self._get(t) for t in type_.types],
                }
            )

        # scalars, enums and input objects
        return type_

    def _copy_fields(self, type_, mapped: bool) -> Dict[str, GraphQLField]:
        fields = {}
        for field_name, field in type_.fields.items():
            if mapped and self.map_field is not None:
                field = self.map_field(type_.name, field_name, field)
            fields[field_name] = GraphQLField(
                **{**field.to_kwargs(), "type_": self._replace_type(field.type)}
            )
        return fields
