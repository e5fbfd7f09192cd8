"""Mutation resolvers for AppSync GraphQL API."""

from aws_cdk import aws_appsync as appsync

from ..mapping_templates import DELETE_ITEM_REQUEST, PUT_ITEM_REQUEST
from ..resolver_builder import ResolverBuilder, ResolverDefinition

MUTATION_RESOLVERS = [
    # save: unconditional PutItem under a fresh $util.autoId(), never an update
    ResolverDefinition(
        construct_id="SaveMutationResolver",
        type_name="Mutation",
        field_name="save",
        request_template=PUT_ITEM_REQUEST,
    ),
    # delete: returns the removed item, or null if there was none
    ResolverDefinition(
        construct_id="DeleteMutationResolver",
        type_name="Mutation",
        field_name="delete",
        request_template=DELETE_ITEM_REQUEST,
    ),
]


def create_mutation_resolvers(builder: ResolverBuilder) -> list[appsync.CfnResolver]:
    """Create all AppSync mutation resolvers."""
    return builder.create_batch_resolvers(MUTATION_RESOLVERS)
