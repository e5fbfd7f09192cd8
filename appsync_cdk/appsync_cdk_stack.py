from typing import Optional

from aws_cdk import Stack
from constructs import Construct

from .appsync import setup_appsync
from .config import StackConfig
from .dependency_graph import DeclarationGraph
from .dynamodb_tables import create_entity_table
from .iam_roles import create_appsync_service_role
from .utils.logging import StructuredLogger

logger = StructuredLogger(__name__)


class AppsyncCdkStack(Stack):
    """
    AppSync GraphQL API backed by a DynamoDB table.

    Creates:
    - DynamoDB table keyed by ``<entity>Id``
    - IAM role AppSync assumes to reach DynamoDB
    - AppSync API with API key auth, schema, data source and three resolvers
      (getOne, save, delete)
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        config: Optional[StackConfig] = None,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.config = config or StackConfig()
        self.graph = DeclarationGraph()

        logger.info(
            "Declaring stack",
            stackId=construct_id,
            entityName=self.config.entity_name,
            apiName=self.config.api_name,
        )

        self.table = create_entity_table(self, self.config, self.graph)
        self.service_role = create_appsync_service_role(self, self.graph)
        self.appsync = setup_appsync(self, self.config, self.graph, self.table, self.service_role)

        logger.debug("Provisioning order", order=self.graph.provisioning_order())
