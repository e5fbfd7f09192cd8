"""AppSync resolvers module for GraphQL API.

Resolvers are organized into:
- queries: Query resolvers (read operations)
- mutations: Mutation resolvers (write and delete operations)
"""

from aws_cdk import aws_appsync as appsync

from ..resolver_builder import ResolverBuilder
from .mutations import MUTATION_RESOLVERS, create_mutation_resolvers
from .queries import QUERY_RESOLVERS, create_query_resolvers

__all__ = [
    "create_resolvers",
    "create_mutation_resolvers",
    "create_query_resolvers",
    "MUTATION_RESOLVERS",
    "QUERY_RESOLVERS",
]


def create_resolvers(builder: ResolverBuilder) -> dict[str, appsync.CfnResolver]:
    """
    Create all AppSync resolvers for the GraphQL API.

    Returns:
        Resolvers keyed by GraphQL field name
    """
    resolvers = create_query_resolvers(builder) + create_mutation_resolvers(builder)
    return {resolver.field_name: resolver for resolver in resolvers}
