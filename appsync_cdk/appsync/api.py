"""AppSync API and API key creation."""

from typing import TYPE_CHECKING

from aws_cdk import CfnOutput
from aws_cdk import aws_appsync as appsync
from constructs import Construct

from ..utils.logging import StructuredLogger

if TYPE_CHECKING:
    from ..config import StackConfig
    from ..dependency_graph import DeclarationGraph

logger = StructuredLogger(__name__)


def create_graphql_api(
    scope: Construct,
    config: "StackConfig",
    graph: "DeclarationGraph",
) -> appsync.CfnGraphQLApi:
    """
    Create the AppSync GraphQL API with API key authorization.

    Args:
        scope: CDK construct scope
        config: Stack configuration
        graph: Declaration graph the API is registered in

    Returns:
        The created GraphQL API
    """
    api_name = config.api_name
    logger.info("Declaring AppSync API", apiName=api_name, authenticationType="API_KEY")

    api = appsync.CfnGraphQLApi(
        scope,
        "api",
        name=api_name,
        authentication_type="API_KEY",
    )
    graph.add("api", api)

    CfnOutput(
        scope,
        "GraphQLApiUrl",
        value=api.attr_graph_ql_url,
        description="AppSync GraphQL endpoint",
    )
    CfnOutput(
        scope,
        "GraphQLApiId",
        value=api.attr_api_id,
        description="AppSync GraphQL API ID",
    )

    return api


def create_api_key(
    scope: Construct,
    api: appsync.CfnGraphQLApi,
    graph: "DeclarationGraph",
) -> appsync.CfnApiKey:
    """
    Issue the API key every request must send in the x-api-key header.

    Expiry is left to the AppSync default.
    """
    api_key = appsync.CfnApiKey(
        scope,
        "api-key",
        api_id=api.attr_api_id,
    )
    graph.add("api-key", api_key)
    graph.add_dependency("api-key", "api")

    CfnOutput(
        scope,
        "GraphQLApiKey",
        value=api_key.attr_api_key,
        description="AppSync API key for the x-api-key header",
    )

    return api_key
