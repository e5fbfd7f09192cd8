"""
IAM roles for the CDK stack.

Creates:
- AppSync service role for the direct DynamoDB resolvers
"""

from typing import TYPE_CHECKING

from aws_cdk import aws_iam as iam
from constructs import Construct

if TYPE_CHECKING:
    from .dependency_graph import DeclarationGraph

APPSYNC_SERVICE_PRINCIPAL = "appsync.amazonaws.com"
DYNAMODB_MANAGED_POLICY = "AmazonDynamoDBFullAccess"


def create_appsync_service_role(stack: Construct, graph: "DeclarationGraph") -> iam.Role:
    """Create the role AppSync assumes to read and write DynamoDB.

    The role carries the AWS managed full-access policy rather than a grant
    scoped to the entity table.

    Args:
        stack: CDK Construct (usually the Stack instance)
        graph: declaration graph the role is registered in

    Returns:
        The AppSync service role
    """
    appsync_service_role = iam.Role(
        stack,
        "ItemsDynamoDBRole",
        assumed_by=iam.ServicePrincipal(APPSYNC_SERVICE_PRINCIPAL),
    )
    appsync_service_role.add_managed_policy(
        iam.ManagedPolicy.from_aws_managed_policy_name(DYNAMODB_MANAGED_POLICY)
    )
    graph.add("ItemsDynamoDBRole", appsync_service_role)
    return appsync_service_role
