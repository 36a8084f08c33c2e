"""Interchange schema between a front-end and the engine.

A front-end that runs out of process (or in another language) hands over a
JSON document shaped like ``TreeDocument``: a flat list of nodes in pre-order,
each naming the index of its parent. The root comes first and has no parent.
Keeping the document flat means tree depth never turns into nesting depth for
the JSON parser or the validator, so deeply nested expressions load the same
as shallow ones.

Validation happens here, so a bad document is reported as a
``TreeProviderError`` for that unit before any rule runs.

Spans are optional. When a node omits one, a monotonically increasing span is
synthesized in pre-order so diagnostics still sort in visit order.
"""

from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import BaseModel, Field, ValidationError, model_validator

from code_analyzer.errors import TreeProviderError
from code_analyzer.models.syntax import SourceSpan, SyntaxKind, SyntaxNode, SyntaxTree

logger = structlog.get_logger()


class SpanModel(BaseModel):
    """Source span as emitted by the front-end."""

    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)
    line: int = Field(default=1, ge=1)
    column: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "SpanModel":
        if self.end < self.start:
            raise ValueError(f"span end {self.end} precedes start {self.start}")
        return self


class NodeModel(BaseModel):
    """One node of the interchange tree.

    ``parent`` is the index of the parent node in ``TreeDocument.nodes``;
    only the root (index 0) leaves it unset.
    """

    kind: SyntaxKind
    parent: int | None = Field(default=None, ge=0)
    text: str | None = None
    identifier: str | None = None
    role: str | None = None
    span: SpanModel | None = None


class TreeDocument(BaseModel):
    """A complete unit: the source path and its nodes in pre-order."""

    path: str = "<tree>"
    nodes: list[NodeModel] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _check_pre_order(self) -> "TreeDocument":
        # Indices of the nodes on the path from the root to the previous node.
        open_path: list[int] = []
        for index, node in enumerate(self.nodes):
            if index == 0:
                if node.parent is not None:
                    raise ValueError("nodes[0] is the root and must not have a parent")
                open_path.append(0)
                continue
            if node.parent is None:
                raise ValueError(f"nodes[{index}] has no parent; only nodes[0] may be the root")
            while open_path and open_path[-1] != node.parent:
                open_path.pop()
            if not open_path:
                raise ValueError(
                    f"nodes[{index}] names parent {node.parent}, "
                    "which is not an ancestor of the preceding node in pre-order"
                )
            open_path.append(index)
        return self

    @classmethod
    def from_tree(cls, tree: SyntaxTree) -> "TreeDocument":
        """Flatten a SyntaxTree into an interchange document."""
        index_of: dict[int, int] = {}
        nodes: list[NodeModel] = []

        for node in tree.walk():
            parent = node.parent if node is not tree.root else None
            index_of[id(node)] = len(nodes)
            nodes.append(NodeModel(
                kind=node.kind,
                parent=index_of[id(parent)] if parent is not None else None,
                text=node.text,
                identifier=node.identifier,
                role=node.role,
                span=SpanModel(
                    start=node.span.start,
                    end=node.span.end,
                    line=node.span.line,
                    column=node.span.column,
                ),
            ))

        return cls(path=tree.path, nodes=nodes)

    def to_tree(self) -> SyntaxTree:
        """Link the nodes bottom-up and validate the result."""
        spans = self._spans()
        children: list[list[SyntaxNode]] = [[] for _ in self.nodes]
        root = None

        # Reverse pre-order builds every child before its parent.
        for index in range(len(self.nodes) - 1, -1, -1):
            model = self.nodes[index]
            own_children = children[index]
            own_children.reverse()
            node = SyntaxNode.create(
                model.kind,
                *own_children,
                text=model.text,
                identifier=model.identifier,
                role=model.role,
                span=spans[index],
            )
            if model.parent is None:
                root = node
            else:
                children[model.parent].append(node)

        return SyntaxTree(root, self.path)

    def _spans(self) -> list[SourceSpan]:
        """Explicit spans, or pre-order offsets for nodes that omit one."""
        count = len(self.nodes)
        has_children = [False] * count
        for model in self.nodes:
            if model.parent is not None:
                has_children[model.parent] = True

        starts = [0] * count
        ends = [0] * count
        offset = 0
        for index, model in enumerate(self.nodes):
            if model.span is not None:
                continue
            starts[index] = ends[index] = offset
            if not has_children[index]:
                ends[index] = offset + len(model.text or "")
                offset = ends[index] + 1

        spans: list[SourceSpan | None] = [None] * count
        for index in range(count - 1, -1, -1):
            model = self.nodes[index]
            if model.span is not None:
                spans[index] = SourceSpan(**model.span.model_dump())
            else:
                spans[index] = SourceSpan(starts[index], ends[index], 1, starts[index])
                if model.parent is not None and self.nodes[model.parent].span is None:
                    ends[model.parent] = max(ends[model.parent], ends[index])
        return spans


def load_tree(data: Mapping[str, Any] | str | bytes) -> SyntaxTree:
    """Validate an interchange document and build the syntax tree.

    Args:
        data: A mapping, or a JSON ``str``/``bytes`` document

    Returns:
        The validated SyntaxTree

    Raises:
        TreeProviderError: If the document does not match the schema or does
            not describe a proper tree
    """
    path = "<unknown>"
    if isinstance(data, Mapping):
        path = str(data.get("path", path))

    try:
        if isinstance(data, (str, bytes)):
            document = TreeDocument.model_validate_json(data)
        else:
            document = TreeDocument.model_validate(data)
    except ValidationError as e:
        logger.warning(
            "Rejected syntax tree document",
            path=path,
            error_count=e.error_count(),
        )
        raise TreeProviderError(
            f"Invalid syntax tree document: {e.error_count()} validation error(s)",
            path=path,
            details=e.errors(include_url=False, include_context=False, include_input=False),
        ) from e

    return document.to_tree()
