"""Unit tests for tree building, pruning and flattening."""

import logging

from backoffice.domain.access.model.role import Menu, Role
from backoffice.domain.access.model.tree import (
    build_tree,
    find_subtree,
    flatten,
    iter_preorder,
    prune,
)
from backoffice.domain.access.model.value import MenuId, RoleId


def make_role(id: int, parent: int | None = None, order: int = 0, **kwargs) -> Role:
    return Role(
        id=RoleId(id),
        name=kwargs.pop("name", f"role-{id}"),
        parent_id=RoleId(parent) if parent is not None else None,
        display_order=order,
        **kwargs,
    )


def make_menu(id: int, parent: int | None = None, order: int = 0) -> Menu:
    return Menu(
        id=MenuId(id),
        name=f"menu-{id}",
        parent_id=MenuId(parent) if parent is not None else None,
        display_order=order,
    )


def ids(nodes) -> list[int]:
    return [n.id.root for n in nodes]


def shape(forest) -> list:
    """Nested (id, children) tuples, for comparing whole forests."""
    return [(t.node.id.root, shape(t.children)) for t in forest]


class TestBuildTree:
    def test_empty_input_builds_empty_forest(self):
        assert build_tree([]) == []

    def test_nests_children_under_parents(self):
        forest = build_tree([make_role(3, parent=2), make_role(1), make_role(2, parent=1)])

        assert shape(forest) == [(1, [(2, [(3, [])])])]

    def test_siblings_sorted_by_display_order_then_id(self):
        forest = build_tree(
            [
                make_role(1),
                make_role(5, parent=1, order=2),
                make_role(4, parent=1, order=1),
                make_role(3, parent=1, order=1),
                make_role(2, parent=1, order=0),
            ]
        )

        assert ids(t.node for t in forest[0].children) == [2, 3, 4, 5]

    def test_roots_sorted_with_the_same_key(self):
        forest = build_tree([make_role(9, order=0), make_role(2, order=1), make_role(7, order=0)])

        assert ids(t.node for t in forest) == [7, 9, 2]

    def test_dangling_parent_excludes_node_and_its_subtree(self, caplog):
        nodes = [make_role(1), make_role(2, parent=99), make_role(3, parent=2)]

        with caplog.at_level(logging.WARNING):
            forest = build_tree(nodes)

        assert shape(forest) == [(1, [])]
        assert "2, 3" in caplog.text

    def test_cycle_terminates_and_excludes_cycle_members(self):
        # 2 -> 3 -> 2 never reaches a root; 4 hangs off the cycle
        nodes = [
            make_role(1),
            make_role(2, parent=3),
            make_role(3, parent=2),
            make_role(4, parent=3),
        ]

        forest = build_tree(nodes)

        assert shape(forest) == [(1, [])]

    def test_self_parent_is_excluded(self):
        forest = build_tree([make_role(1), make_role(2, parent=2)])

        assert ids(flatten(forest)) == [1]

    def test_duplicate_ids_keep_first_occurrence(self):
        forest = build_tree([make_role(1, name="first"), make_role(1, name="second")])

        assert len(forest) == 1
        assert forest[0].node.name == "first"

    def test_input_is_not_mutated(self):
        nodes = [make_role(2, parent=1), make_role(1)]
        snapshot = [n.model_copy() for n in nodes]

        build_tree(nodes)

        assert nodes == snapshot

    def test_deep_chain_does_not_hit_recursion_limit(self):
        nodes = [make_menu(1)] + [make_menu(i, parent=i - 1) for i in range(2, 5001)]

        forest = build_tree(nodes)

        assert len(flatten(forest)) == 5000


class TestPrune:
    def test_keeps_ancestors_of_kept_leaf(self):
        forest = build_tree([make_menu(1), make_menu(2, parent=1), make_menu(3, parent=2)])

        assert shape(prune(forest, {MenuId(3)})) == [(1, [(2, [(3, [])])])]

    def test_drops_unkept_siblings(self):
        forest = build_tree(
            [make_menu(1), make_menu(2, parent=1), make_menu(3, parent=1), make_menu(4)]
        )

        assert shape(prune(forest, {MenuId(3)})) == [(1, [(3, [])])]

    def test_kept_parent_without_kept_children_loses_children(self):
        forest = build_tree([make_menu(1), make_menu(2, parent=1)])

        assert shape(prune(forest, {MenuId(1)})) == [(1, [])]

    def test_preserves_sibling_order(self):
        forest = build_tree([make_menu(1), make_menu(2, order=2), make_menu(3, order=1)])

        assert ids(t.node for t in prune(forest, {MenuId(1), MenuId(2), MenuId(3)})) == [1, 3, 2]

    def test_empty_keep_set_prunes_everything(self):
        forest = build_tree([make_menu(1), make_menu(2, parent=1)])

        assert prune(forest, set()) == []

    def test_does_not_modify_input_forest(self):
        forest = build_tree([make_menu(1), make_menu(2, parent=1), make_menu(3, parent=1)])

        prune(forest, {MenuId(2)})

        assert shape(forest) == [(1, [(2, []), (3, [])])]


class TestFlatten:
    def test_pre_order(self):
        forest = build_tree(
            [
                make_role(1),
                make_role(2, parent=1, order=0),
                make_role(3, parent=2),
                make_role(4, parent=1, order=1),
                make_role(5),
            ]
        )

        assert ids(flatten(forest)) == [1, 2, 3, 4, 5]

    def test_each_reachable_node_exactly_once(self):
        nodes = [make_role(i, parent=(i // 2) or None) for i in range(1, 32)]

        flat = flatten(build_tree(nodes))

        assert sorted(ids(flat)) == list(range(1, 32))

    def test_iter_preorder_restarts(self):
        forest = build_tree([make_role(1), make_role(2, parent=1)])

        assert ids(iter_preorder(forest)) == ids(iter_preorder(forest)) == [1, 2]

    def test_empty_forest(self):
        assert flatten([]) == []


class TestFindSubtree:
    def test_finds_nested_node_with_descendants(self):
        forest = build_tree([make_role(1), make_role(2, parent=1), make_role(3, parent=2)])

        subtree = find_subtree(forest, RoleId(2))

        assert subtree is not None
        assert shape([subtree]) == [(2, [(3, [])])]

    def test_missing_id_returns_none(self):
        assert find_subtree(build_tree([make_role(1)]), RoleId(42)) is None
