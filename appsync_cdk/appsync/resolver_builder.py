"""
Builder for AppSync VTL resolvers.

Every resolver is declared from a ``ResolverDefinition`` and is wired to the
schema and the data source with explicit provisioning dependencies.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from aws_cdk import aws_appsync as appsync
from constructs import Construct

from ..utils.errors import DeclarationError, ErrorCode
from ..utils.logging import StructuredLogger
from .mapping_templates import RESULT_RESPONSE, TemplateValues, render_mapping_template

if TYPE_CHECKING:
    from ..dependency_graph import DeclarationGraph
    from .schema import EntitySchema

logger = StructuredLogger(__name__)


@dataclass(frozen=True)
class ResolverDefinition:
    """Declarative description of one field-to-operation mapping."""

    construct_id: str
    type_name: str
    field_name: str
    request_template: str
    response_template: str = RESULT_RESPONSE


class ResolverBuilder:
    """
    Builder for unit resolvers backed by one DynamoDB data source.

    Example:
        builder = ResolverBuilder(scope, api, datasource, schema, graph, TemplateValues("noteId"))

        builder.create_vtl_resolver(
            ResolverDefinition(
                construct_id="GetOneQueryResolver",
                type_name="Query",
                field_name="getOne",
                request_template=GET_ITEM_REQUEST,
            )
        )
    """

    def __init__(
        self,
        scope: Construct,
        api: appsync.CfnGraphQLApi,
        datasource: appsync.CfnDataSource,
        schema: "EntitySchema",
        graph: "DeclarationGraph",
        template_values: TemplateValues,
        schema_id: str = "api-schema",
        datasource_id: str = "tableDatasource",
    ):
        """
        Initialize the resolver builder.

        Args:
            scope: CDK construct scope for creating resources
            api: AppSync GraphQL API
            datasource: Data source every resolver reads and writes through
            schema: Schema the resolved fields must exist in
            graph: Declaration graph resolvers are registered in
            template_values: Values substituted into the mapping templates
            schema_id: Declaration id of the schema
            datasource_id: Declaration id of the data source
        """
        self.scope = scope
        self.api = api
        self.datasource = datasource
        self.schema = schema
        self.graph = graph
        self.template_values = template_values
        self.schema_id = schema_id
        self.datasource_id = datasource_id
        self.resolved_fields: set[tuple[str, str]] = set()

    def create_vtl_resolver(self, definition: ResolverDefinition) -> appsync.CfnResolver:
        """
        Create a unit resolver with request/response mapping templates.

        Raises:
            DeclarationError: if the field is already resolved, is missing from
                the schema, or the request template ignores the partition key
        """
        field = (definition.type_name, definition.field_name)
        if field in self.resolved_fields:
            raise DeclarationError(
                ErrorCode.DUPLICATE_RESOLVER,
                f"{definition.type_name}.{definition.field_name} already has a resolver",
                {"typeName": definition.type_name, "fieldName": definition.field_name},
            )
        if not self.schema.has_field(*field):
            raise DeclarationError(
                ErrorCode.UNKNOWN_FIELD,
                f"{definition.type_name}.{definition.field_name} is not defined in the schema",
                {"typeName": definition.type_name, "fieldName": definition.field_name},
            )

        request_template = render_mapping_template(definition.request_template, self.template_values)
        response_template = render_mapping_template(definition.response_template, self.template_values)
        key_field = self.template_values.key_field
        if f'"{key_field}"' not in request_template:
            raise DeclarationError(
                ErrorCode.KEY_MISMATCH,
                f"Request template for {definition.field_name} does not address partition key {key_field}",
                {"fieldName": definition.field_name, "partitionKey": key_field},
            )

        logger.info(
            "Declaring resolver",
            typeName=definition.type_name,
            fieldName=definition.field_name,
            dataSourceName=self.datasource.name,
        )

        resolver = appsync.CfnResolver(
            self.scope,
            definition.construct_id,
            api_id=self.api.attr_api_id,
            type_name=definition.type_name,
            field_name=definition.field_name,
            data_source_name=self.datasource.name,
            request_mapping_template=request_template,
            response_mapping_template=response_template,
        )
        self.resolved_fields.add(field)

        # data_source_name is a plain string, so neither edge is implied
        self.graph.add(definition.construct_id, resolver)
        self.graph.add_dependency(definition.construct_id, self.datasource_id)
        self.graph.add_dependency(definition.construct_id, self.schema_id)
        return resolver

    def create_batch_resolvers(
        self,
        definitions: list[ResolverDefinition],
    ) -> list[appsync.CfnResolver]:
        """Create resolvers for every definition, in order."""
        return [self.create_vtl_resolver(definition) for definition in definitions]
