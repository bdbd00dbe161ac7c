"""Tree building, pruning and flattening over flat hierarchy records.

All functions here are pure: they never mutate their input and build a fresh
forest per call. Traversals use explicit stacks over an id index built once,
so depth is bounded only by the number of nodes and cycles cannot loop.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Hashable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from backoffice.domain.access.model.role import HierarchyNode

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=HierarchyNode)


@dataclass
class TreeNode(Generic[T]):
    """A hierarchy record plus its ordered children."""

    node: T
    children: list[TreeNode[T]] = field(default_factory=list)


def _sibling_key(node: HierarchyNode) -> tuple[int, Hashable]:
    return (node.display_order, node.id)


def build_tree(nodes: Iterable[T]) -> list[TreeNode[T]]:
    """Build a forest from flat records, rooted at nodes without a parent.

    Siblings (roots included) are sorted by ``(display_order, id)``. Nodes
    whose parent is missing, nodes on a parent cycle, and every node only
    reachable through those are left out. The first record wins when an id
    appears more than once.
    """
    by_id: dict[Hashable, T] = {}
    for node in nodes:
        by_id.setdefault(node.id, node)

    roots: list[T] = []
    children_of: dict[Hashable, list[T]] = {}
    for node in by_id.values():
        if node.parent_id is None:
            roots.append(node)
        elif node.parent_id in by_id:
            children_of.setdefault(node.parent_id, []).append(node)

    roots.sort(key=_sibling_key)
    for siblings in children_of.values():
        siblings.sort(key=_sibling_key)

    forest: list[TreeNode[T]] = []
    visited: set[Hashable] = set()
    # Children are pushed in reverse so they pop, and attach, in sorted order.
    stack: list[tuple[T, list[TreeNode[T]]]] = [(root, forest) for root in reversed(roots)]
    while stack:
        node, siblings = stack.pop()
        if node.id in visited:
            continue
        visited.add(node.id)

        tree_node = TreeNode(node=node)
        siblings.append(tree_node)
        for child in reversed(children_of.get(node.id, [])):
            stack.append((child, tree_node.children))

    if len(visited) < len(by_id):
        excluded = sorted(str(node_id) for node_id in by_id.keys() - visited)
        logger.warning(
            "Excluded %d unreachable hierarchy node(s) (dangling parent or cycle): %s",
            len(excluded),
            ", ".join(excluded),
        )

    return forest


def prune(forest: Sequence[TreeNode[T]], keep_ids: Collection[Hashable]) -> list[TreeNode[T]]:
    """Keep nodes whose id is in `keep_ids`, plus every ancestor of such a node.

    A node with no kept node in its subtree is removed together with that subtree.
    Sibling order is unchanged. Returns new TreeNodes; `forest` is not modified.
    """
    # Post-order walk: a node is decided once all of its children have been.
    pruned_children: dict[int, list[TreeNode[T]]] = {}
    result: list[TreeNode[T]] = []
    stack: list[tuple[TreeNode[T], bool]] = [(root, False) for root in reversed(forest)]
    parents: dict[int, TreeNode[T] | None] = {id(root): None for root in forest}

    while stack:
        tree_node, expanded = stack.pop()
        if not expanded:
            stack.append((tree_node, True))
            for child in reversed(tree_node.children):
                parents[id(child)] = tree_node
                stack.append((child, False))
            continue

        kept_children = pruned_children.pop(id(tree_node), [])
        if tree_node.node.id not in keep_ids and not kept_children:
            continue

        kept = TreeNode(node=tree_node.node, children=kept_children)
        parent = parents[id(tree_node)]
        if parent is None:
            result.append(kept)
        else:
            pruned_children.setdefault(id(parent), []).append(kept)

    return result


def find_subtree(forest: Sequence[TreeNode[T]], node_id: Hashable) -> TreeNode[T] | None:
    """Return the TreeNode with the given id, searching in pre-order."""
    stack = list(reversed(forest))
    while stack:
        tree_node = stack.pop()
        if tree_node.node.id == node_id:
            return tree_node
        stack.extend(reversed(tree_node.children))
    return None


def iter_preorder(forest: Sequence[TreeNode[T]]) -> Iterator[T]:
    """Lazily yield records in pre-order: a node, then each child's subtree in order."""
    stack = list(reversed(forest))
    while stack:
        tree_node = stack.pop()
        yield tree_node.node
        stack.extend(reversed(tree_node.children))


def flatten(forest: Sequence[TreeNode[T]]) -> list[T]:
    """Pre-order list of the records in `forest`, depth discarded."""
    return list(iter_preorder(forest))
