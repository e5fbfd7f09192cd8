"""Tests for DeclarationGraph."""

from unittest.mock import MagicMock

import pytest
from aws_cdk import CfnResource, assertions

from appsync_cdk.dependency_graph import DeclarationGraph
from appsync_cdk.utils.errors import DeclarationError, ErrorCode


def _graph_with(*ids):
    graph = DeclarationGraph()
    for declaration_id in ids:
        graph.add(declaration_id, MagicMock(name=declaration_id))
    return graph


class TestAdd:
    """Tests for registering declarations."""

    def test_add_returns_construct(self, graph):
        construct = MagicMock()

        assert graph.add("api", construct) is construct
        assert "api" in graph
        assert graph.get("api") is construct
        assert len(graph) == 1

    def test_duplicate_id_rejected(self, graph):
        graph.add("api", MagicMock())

        with pytest.raises(DeclarationError) as exc_info:
            graph.add("api", MagicMock())

        assert exc_info.value.error_code == ErrorCode.DUPLICATE_DECLARATION

    def test_get_unknown_rejected(self, graph):
        with pytest.raises(DeclarationError) as exc_info:
            graph.get("missing")

        assert exc_info.value.error_code == ErrorCode.UNKNOWN_DECLARATION


class TestAddDependency:
    """Tests for edge insertion."""

    def test_records_edge(self):
        graph = _graph_with("api", "api-key")

        graph.add_dependency("api-key", "api")

        assert graph.dependencies_of("api-key") == ("api",)
        assert graph.dependencies_of("api") == ()

    def test_applies_edge_to_construct_tree(self):
        graph = _graph_with("api", "api-key")

        graph.add_dependency("api-key", "api")

        graph.get("api-key").node.add_dependency.assert_called_once_with(graph.get("api"))

    def test_repeated_edge_applied_once(self):
        graph = _graph_with("api", "api-key")

        graph.add_dependency("api-key", "api")
        graph.add_dependency("api-key", "api")

        assert graph.dependencies_of("api-key") == ("api",)
        graph.get("api-key").node.add_dependency.assert_called_once()

    def test_unknown_dependent_rejected(self):
        graph = _graph_with("api")

        with pytest.raises(DeclarationError) as exc_info:
            graph.add_dependency("resolver", "api")

        assert exc_info.value.error_code == ErrorCode.UNKNOWN_DECLARATION

    def test_unknown_dependency_rejected(self):
        graph = _graph_with("resolver")

        with pytest.raises(DeclarationError) as exc_info:
            graph.add_dependency("resolver", "api-schema")

        assert exc_info.value.details == {"declarationId": "api-schema"}

    def test_self_dependency_is_cycle(self):
        graph = _graph_with("api")

        with pytest.raises(DeclarationError) as exc_info:
            graph.add_dependency("api", "api")

        assert exc_info.value.error_code == ErrorCode.DEPENDENCY_CYCLE

    def test_transitive_cycle_rejected(self):
        graph = _graph_with("a", "b", "c")
        graph.add_dependency("b", "a")
        graph.add_dependency("c", "b")

        with pytest.raises(DeclarationError) as exc_info:
            graph.add_dependency("a", "c")

        assert exc_info.value.error_code == ErrorCode.DEPENDENCY_CYCLE
        assert graph.dependencies_of("a") == ()

    def test_cfn_resources_get_depends_on(self, stack, graph):
        first = CfnResource(stack, "First", type="Custom::First")
        second = CfnResource(stack, "Second", type="Custom::Second")
        graph.add("First", first)
        graph.add("Second", second)

        graph.add_dependency("Second", "First")

        template = assertions.Template.from_stack(stack)
        resources = template.find_resources("Custom::Second")
        (resource,) = resources.values()
        assert resource["DependsOn"] == list(template.find_resources("Custom::First").keys())


class TestProvisioningOrder:
    """Tests for provisioning_order."""

    def test_independent_declarations_keep_registration_order(self):
        graph = _graph_with("cdk-api", "ItemsDynamoDBRole", "api")

        assert graph.provisioning_order() == ["cdk-api", "ItemsDynamoDBRole", "api"]

    def test_dependencies_come_first(self):
        graph = _graph_with("resolver", "api-schema", "tableDatasource", "api")
        graph.add_dependency("resolver", "tableDatasource")
        graph.add_dependency("resolver", "api-schema")
        graph.add_dependency("api-schema", "api")
        graph.add_dependency("tableDatasource", "api")

        order = graph.provisioning_order()

        assert order[0] == "api"
        assert order[-1] == "resolver"
        assert order.index("api-schema") < order.index("resolver")
        assert order.index("tableDatasource") < order.index("resolver")

    def test_empty_graph(self, graph):
        assert graph.provisioning_order() == []
