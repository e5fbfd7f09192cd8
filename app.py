#!/usr/bin/env python3
import sys

import aws_cdk as cdk

from appsync_cdk.appsync_cdk_stack import AppsyncCdkStack
from appsync_cdk.config import StackConfig
from appsync_cdk.utils.errors import DeclarationError, handle_error
from appsync_cdk.utils.logging import StructuredLogger

logger = StructuredLogger("app")

app = cdk.App()

# Environment-agnostic: account and region resolve at deploy time
try:
    config = StackConfig.from_app(app)
    AppsyncCdkStack(
        app,
        "AppsyncCdkStack",
        config=config,
        description=f"AppSync GraphQL API for the {config.entity_name} entity",
    )
except DeclarationError as error:
    logger.error("Stack declaration failed", error=handle_error(error))
    sys.exit(1)

app.synth()
