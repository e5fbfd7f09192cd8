from typing import TYPE_CHECKING

from aws_cdk import RemovalPolicy
from aws_cdk import aws_dynamodb as ddb
from constructs import Construct

if TYPE_CHECKING:
    from .config import StackConfig
    from .dependency_graph import DeclarationGraph


def create_entity_table(stack: Construct, config: "StackConfig", graph: "DeclarationGraph") -> ddb.Table:
    """Create the table holding every entity item.

    Args:
        stack: CDK Construct (usually the Stack instance)
        config: stack configuration (entity name and key field)
        graph: declaration graph the table is registered in

    Returns:
        The Table construct
    """
    # Single string partition key, no sort key or indexes. Data is deleted
    # together with the stack.
    table = ddb.Table(
        stack,
        "cdk-api",
        table_name=config.table_name,
        partition_key=ddb.Attribute(name=config.key_field, type=ddb.AttributeType.STRING),
        billing_mode=ddb.BillingMode.PAY_PER_REQUEST,
        removal_policy=RemovalPolicy.DESTROY,
    )
    graph.add("cdk-api", table)
    return table
