"""Query resolvers for AppSync GraphQL API."""

from aws_cdk import aws_appsync as appsync

from ..mapping_templates import GET_ITEM_REQUEST
from ..resolver_builder import ResolverBuilder, ResolverDefinition

QUERY_RESOLVERS = [
    # getOne: key lookup, null when the item is absent
    ResolverDefinition(
        construct_id="GetOneQueryResolver",
        type_name="Query",
        field_name="getOne",
        request_template=GET_ITEM_REQUEST,
    ),
]


def create_query_resolvers(builder: ResolverBuilder) -> list[appsync.CfnResolver]:
    """Create all AppSync query resolvers."""
    return builder.create_batch_resolvers(QUERY_RESOLVERS)
