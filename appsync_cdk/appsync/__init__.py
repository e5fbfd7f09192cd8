"""
AppSync GraphQL API module.

This module orchestrates the creation of the AppSync side of the stack:

- api.py: API and API key creation
- schema.py: typed schema and its declaration
- datasources.py: DynamoDB data source
- resolver_builder.py: resolver declaration and dependency wiring
- resolvers/: resolver definitions by root type
- mapping-templates/: VTL request/response skeletons
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from aws_cdk import aws_appsync as appsync
from constructs import Construct

from .api import create_api_key, create_graphql_api
from .datasources import create_dynamodb_datasource
from .mapping_templates import TemplateValues
from .resolver_builder import ResolverBuilder
from .resolvers import create_resolvers
from .schema import EntitySchema, build_entity_schema, create_schema

if TYPE_CHECKING:
    from aws_cdk import aws_dynamodb as dynamodb
    from aws_cdk import aws_iam as iam

    from ..config import StackConfig
    from ..dependency_graph import DeclarationGraph


@dataclass
class AppSyncResources:
    """Container for all AppSync resources created by setup_appsync."""

    api: appsync.CfnGraphQLApi
    api_key: appsync.CfnApiKey
    schema: EntitySchema
    cfn_schema: appsync.CfnGraphQLSchema
    datasource: appsync.CfnDataSource
    resolvers: dict[str, appsync.CfnResolver]


def setup_appsync(
    scope: Construct,
    config: "StackConfig",
    graph: "DeclarationGraph",
    table: "dynamodb.ITable",
    service_role: "iam.IRole",
) -> AppSyncResources:
    """
    Set up the complete AppSync GraphQL API.

    The table and service role must already be registered in ``graph``.

    Args:
        scope: CDK construct scope
        config: Stack configuration
        graph: Declaration graph shared by the whole stack
        table: Entity table
        service_role: Role AppSync assumes to reach the table

    Returns:
        AppSyncResources containing all created resources
    """
    api = create_graphql_api(scope, config, graph)
    api_key = create_api_key(scope, api, graph)

    schema = build_entity_schema(config.entity_name)
    cfn_schema = create_schema(scope, api, schema, graph)

    datasource = create_dynamodb_datasource(scope, api, config, table, service_role, graph)

    builder = ResolverBuilder(
        scope,
        api,
        datasource,
        schema,
        graph,
        TemplateValues(key_field=config.key_field),
    )
    resolvers = create_resolvers(builder)

    return AppSyncResources(
        api=api,
        api_key=api_key,
        schema=schema,
        cfn_schema=cfn_schema,
        datasource=datasource,
        resolvers=resolvers,
    )


__all__ = ["setup_appsync", "AppSyncResources"]
