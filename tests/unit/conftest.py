"""
Shared fixtures for the CDK unit tests.

Provides a bare stack, configuration, declaration graph and a minimal
evaluator for the two $util calls the request templates use.
"""

import json
import re
import uuid
from typing import Any, Callable, Dict

import pytest
from aws_cdk import App, Stack

from appsync_cdk.config import StackConfig
from appsync_cdk.dependency_graph import DeclarationGraph

_TO_DYNAMODB_JSON = re.compile(r"\$util\.dynamodb\.toDynamoDBJson\(\$ctx\.args\.(\w+)\)")
_AUTO_ID = "$util.autoId()"


@pytest.fixture
def stack() -> Stack:
    """Create a test stack."""
    app = App()
    return Stack(app, "TestStack")


@pytest.fixture
def config() -> StackConfig:
    """Default configuration: the note entity."""
    return StackConfig()


@pytest.fixture
def graph() -> DeclarationGraph:
    return DeclarationGraph()


@pytest.fixture
def evaluate_request() -> Callable[[str, Dict[str, Any]], Dict[str, Any]]:
    """
    Evaluate a rendered request template against GraphQL arguments.

    Handles string arguments only: $util.dynamodb.toDynamoDBJson(x) becomes
    {"S": x} and every $util.autoId() yields a fresh UUID, as in AppSync.
    """

    def _evaluate(template: str, args: Dict[str, Any]) -> Dict[str, Any]:
        rendered = _TO_DYNAMODB_JSON.sub(lambda m: json.dumps({"S": args[m.group(1)]}), template)
        while _AUTO_ID in rendered:
            rendered = rendered.replace(_AUTO_ID, str(uuid.uuid4()), 1)
        return json.loads(rendered)

    return _evaluate
