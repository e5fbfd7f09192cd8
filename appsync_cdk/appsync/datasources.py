"""AppSync data source creation."""

from typing import TYPE_CHECKING

from aws_cdk import Stack
from aws_cdk import aws_appsync as appsync
from constructs import Construct

from ..utils.logging import StructuredLogger

if TYPE_CHECKING:
    from aws_cdk import aws_dynamodb as dynamodb
    from aws_cdk import aws_iam as iam

    from ..config import StackConfig
    from ..dependency_graph import DeclarationGraph

logger = StructuredLogger(__name__)


def create_dynamodb_datasource(
    scope: Construct,
    api: appsync.CfnGraphQLApi,
    config: "StackConfig",
    table: "dynamodb.ITable",
    service_role: "iam.IRole",
    graph: "DeclarationGraph",
    table_id: str = "cdk-api",
    role_id: str = "ItemsDynamoDBRole",
) -> appsync.CfnDataSource:
    """
    Bind the table to the API under the service role.

    Resolvers reach the table through this data source by its name, so the
    name is the only link between a resolver and the table.

    Args:
        scope: CDK construct scope
        api: The AppSync GraphQL API
        config: Stack configuration (supplies the data source name)
        table: Entity table
        service_role: Role AppSync assumes to call DynamoDB
        graph: Declaration graph the data source is registered in
        table_id: Declaration id of the table
        role_id: Declaration id of the service role

    Returns:
        The DynamoDB data source
    """
    logger.info("Declaring DynamoDB data source", dataSourceName=config.data_source_name)

    datasource = appsync.CfnDataSource(
        scope,
        "tableDatasource",
        api_id=api.attr_api_id,
        name=config.data_source_name,
        type="AMAZON_DYNAMODB",
        dynamo_db_config=appsync.CfnDataSource.DynamoDBConfigProperty(
            table_name=table.table_name,
            aws_region=Stack.of(scope).region,
        ),
        service_role_arn=service_role.role_arn,
    )
    graph.add("tableDatasource", datasource)
    graph.add_dependency("tableDatasource", table_id)
    graph.add_dependency("tableDatasource", role_id)
    return datasource
