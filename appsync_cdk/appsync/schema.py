"""Typed GraphQL schema for the single-entity API and its CloudFormation declaration."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from aws_cdk import aws_appsync as appsync
from constructs import Construct

from ..utils.errors import DeclarationError, ErrorCode

if TYPE_CHECKING:
    from ..dependency_graph import DeclarationGraph


@dataclass(frozen=True)
class FieldArgument:
    name: str
    type: str


@dataclass(frozen=True)
class FieldDefinition:
    name: str
    type: str
    arguments: tuple[FieldArgument, ...] = ()

    def to_sdl(self) -> str:
        if not self.arguments:
            return f"{self.name}: {self.type}"
        args = ", ".join(f"{arg.name}: {arg.type}" for arg in self.arguments)
        return f"{self.name}({args}): {self.type}"


@dataclass(frozen=True)
class TypeDefinition:
    name: str
    fields: tuple[FieldDefinition, ...]

    def to_sdl(self) -> str:
        body = "\n".join(f"  {f.to_sdl()}" for f in self.fields)
        return f"type {self.name} {{\n{body}\n}}"


@dataclass(frozen=True)
class EntitySchema:
    """The entity type plus the Query and Mutation root types."""

    entity: TypeDefinition
    query: TypeDefinition
    mutation: TypeDefinition

    @property
    def types(self) -> tuple[TypeDefinition, ...]:
        return (self.entity, self.query, self.mutation)

    def has_field(self, type_name: str, field_name: str) -> bool:
        return any(
            t.name == type_name and any(f.name == field_name for f in t.fields)
            for t in self.types
        )

    def field(self, type_name: str, field_name: str) -> FieldDefinition:
        for t in self.types:
            if t.name != type_name:
                continue
            for f in t.fields:
                if f.name == field_name:
                    return f
        raise DeclarationError(
            ErrorCode.UNKNOWN_FIELD,
            f"{type_name}.{field_name} is not defined in the schema",
            {"typeName": type_name, "fieldName": field_name},
        )

    def to_sdl(self) -> str:
        """Render the schema definition language document AppSync receives."""
        blocks = [t.to_sdl() for t in self.types]
        blocks.append(f"schema {{\n  query: {self.query.name}\n  mutation: {self.mutation.name}\n}}")
        return "\n\n".join(blocks) + "\n"


def build_entity_schema(entity_name: str) -> EntitySchema:
    """
    Build the schema for one entity.

    For ``note`` this is::

        type note { noteId: ID!, name: String }
        type Query { getOne(noteId: ID!): note }
        type Mutation { save(name: String!): note, delete(noteId: ID!): note }
    """
    key_field = f"{entity_name}Id"
    key_argument = FieldArgument(key_field, "ID!")

    entity = TypeDefinition(
        entity_name,
        (
            FieldDefinition(key_field, "ID!"),
            FieldDefinition("name", "String"),
        ),
    )
    query = TypeDefinition(
        "Query",
        (FieldDefinition("getOne", entity_name, (key_argument,)),),
    )
    mutation = TypeDefinition(
        "Mutation",
        (
            FieldDefinition("save", entity_name, (FieldArgument("name", "String!"),)),
            FieldDefinition("delete", entity_name, (key_argument,)),
        ),
    )
    return EntitySchema(entity=entity, query=query, mutation=mutation)


def create_schema(
    scope: Construct,
    api: appsync.CfnGraphQLApi,
    schema: EntitySchema,
    graph: "DeclarationGraph",
    api_id: str = "api",
) -> appsync.CfnGraphQLSchema:
    """
    Declare the GraphQL schema on the API.

    The definition is not validated locally; AppSync rejects a malformed
    document when the stack is deployed.
    """
    cfn_schema = appsync.CfnGraphQLSchema(
        scope,
        "api-schema",
        api_id=api.attr_api_id,
        definition=schema.to_sdl(),
    )
    graph.add("api-schema", cfn_schema)
    graph.add_dependency("api-schema", api_id)
    return cfn_schema
