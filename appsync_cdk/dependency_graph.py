"""
Explicit dependency graph of stack declarations.

CloudFormation infers ordering from Ref/GetAtt, but AppSync resolvers name
their data source by plain string and never reference the schema, so those
edges have to be declared by hand. Every edge added here is recorded in the
graph and applied to the constructs so the template carries a ``DependsOn``.
"""

from typing import Any, Iterator

from aws_cdk import CfnResource

from .utils.errors import DeclarationError, ErrorCode


class DeclarationGraph:
    """
    Directed acyclic graph keyed by declaration (construct) id.

    Example:
        graph = DeclarationGraph()
        graph.add("api", api)
        graph.add("api-schema", schema)
        graph.add_dependency("api-schema", "api")
    """

    def __init__(self) -> None:
        self._declarations: dict[str, Any] = {}
        self._edges: dict[str, list[str]] = {}

    def __contains__(self, declaration_id: str) -> bool:
        return declaration_id in self._declarations

    def __iter__(self) -> Iterator[str]:
        return iter(self._declarations)

    def __len__(self) -> int:
        return len(self._declarations)

    def add(self, declaration_id: str, construct: Any) -> Any:
        """Register a declaration and return the construct for chaining."""
        if declaration_id in self._declarations:
            raise DeclarationError(
                ErrorCode.DUPLICATE_DECLARATION,
                f"Declaration {declaration_id!r} is already registered",
                {"declarationId": declaration_id},
            )
        self._declarations[declaration_id] = construct
        self._edges[declaration_id] = []
        return construct

    def get(self, declaration_id: str) -> Any:
        self._require(declaration_id)
        return self._declarations[declaration_id]

    def add_dependency(self, dependent_id: str, dependency_id: str) -> None:
        """
        Declare that ``dependent_id`` must be provisioned after ``dependency_id``.

        Raises:
            DeclarationError: if either id is unknown or the edge closes a cycle
        """
        self._require(dependent_id)
        self._require(dependency_id)

        if dependency_id in self._edges[dependent_id]:
            return
        if dependent_id == dependency_id or self._reaches(dependency_id, dependent_id):
            raise DeclarationError(
                ErrorCode.DEPENDENCY_CYCLE,
                f"{dependent_id!r} -> {dependency_id!r} would create a dependency cycle",
                {"dependent": dependent_id, "dependency": dependency_id},
            )

        self._edges[dependent_id].append(dependency_id)
        _link(self._declarations[dependent_id], self._declarations[dependency_id])

    def dependencies_of(self, declaration_id: str) -> tuple[str, ...]:
        """Direct dependencies of a declaration, in insertion order."""
        self._require(declaration_id)
        return tuple(self._edges[declaration_id])

    def provisioning_order(self) -> list[str]:
        """
        Topological order of all declarations.

        Dependencies come before dependents; independent declarations keep
        their registration order.
        """
        remaining = {d: len(deps) for d, deps in self._edges.items()}
        dependents: dict[str, list[str]] = {d: [] for d in self._declarations}
        for dependent, deps in self._edges.items():
            for dependency in deps:
                dependents[dependency].append(dependent)

        order: list[str] = []
        ready = [d for d in self._declarations if remaining[d] == 0]
        while ready:
            current = ready.pop(0)
            order.append(current)
            for dependent in dependents[current]:
                remaining[dependent] -= 1
                if remaining[dependent] == 0:
                    ready.append(dependent)
            ready.sort(key=list(self._declarations).index)
        return order

    def _require(self, declaration_id: str) -> None:
        if declaration_id not in self._declarations:
            raise DeclarationError(
                ErrorCode.UNKNOWN_DECLARATION,
                f"Declaration {declaration_id!r} is not registered",
                {"declarationId": declaration_id},
            )

    def _reaches(self, start: str, target: str) -> bool:
        stack = [start]
        seen: set[str] = set()
        while stack:
            current = stack.pop()
            if current == target:
                return True
            if current in seen:
                continue
            seen.add(current)
            stack.extend(self._edges[current])
        return False


def _link(dependent: Any, dependency: Any) -> None:
    # L1 to L1 becomes a DependsOn on the resource itself; anything involving
    # an L2 construct goes through the construct tree.
    if isinstance(dependent, CfnResource) and isinstance(dependency, CfnResource):
        dependent.add_dependency(dependency)
    else:
        dependent.node.add_dependency(dependency)
