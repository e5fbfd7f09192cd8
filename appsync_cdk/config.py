"""Stack configuration shared by every declaration."""

import re
from dataclasses import dataclass
from typing import Any

from .utils.errors import DeclarationError, ErrorCode

GRAPHQL_NAME = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")

# Root operation types already declared by the schema
RESERVED_TYPE_NAMES = frozenset({"Query", "Mutation", "Subscription"})


@dataclass(frozen=True)
class StackConfig:
    """
    Root configuration passed by reference to every declaration constructor.

    With the defaults the stack declares a ``note`` entity exposed through an
    API named ``cdk-api``; the table always takes the entity name.
    """

    entity_name: str = "note"
    api_name: str = "cdk-api"
    data_source_name: str = "ItemsDynamoDataSource"

    def __post_init__(self) -> None:
        name = self.entity_name
        if not GRAPHQL_NAME.match(name) or name.startswith("__") or name in RESERVED_TYPE_NAMES:
            raise DeclarationError(
                ErrorCode.INVALID_ENTITY_NAME,
                f"Entity name {name!r} is not usable as a GraphQL type name",
                {"entityName": name},
            )

    @property
    def key_field(self) -> str:
        """Partition key of the table and identifier field of the entity."""
        return f"{self.entity_name}Id"

    @property
    def table_name(self) -> str:
        return self.entity_name

    @classmethod
    def from_app(cls, app: Any) -> "StackConfig":
        """Build the configuration from CDK context (``-c key=value``)."""
        node = app.node
        overrides: dict[str, Any] = {}
        for key in ("entity_name", "api_name", "data_source_name"):
            value = node.try_get_context(key)
            if value:
                overrides[key] = str(value)
        return cls(**overrides)
