"""
Tests for traversal strategies and the resumable cursor.
"""

import pytest

from bstreelib.sync import (
    BinarySearchTree,
    TreeConfig,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    BreadthFirstTraverser,
    TraversalCursor,
    create_traverser,
    EMPTY,
)
from bstreelib.testing import TreeTestHelper


VALUES = [50, 30, 70, 20, 40, 60, 80]


@pytest.fixture
def balanced():
    tree = BinarySearchTree(TreeConfig.natural())
    tree.extend(VALUES)
    return tree


class TestTraversalOrders:
    """Each strategy visits the balanced tree in its own order."""

    def test_pre_order(self, balanced):
        assert list(PreOrderTraverser().values(balanced.root)) == [50, 30, 20, 40, 70, 60, 80]

    def test_in_order_is_sorted(self, balanced):
        assert list(InOrderTraverser().values(balanced.root)) == sorted(VALUES)

    def test_post_order(self, balanced):
        assert list(PostOrderTraverser().values(balanced.root)) == [20, 40, 30, 60, 80, 70, 50]

    def test_breadth_first(self, balanced):
        assert list(BreadthFirstTraverser().values(balanced.root)) == VALUES

    def test_depths_are_reported(self, balanced):
        depths = {node.value: depth for node, depth in PreOrderTraverser().traverse(balanced.root)}
        assert depths == {50: 0, 30: 1, 70: 1, 20: 2, 40: 2, 60: 2, 80: 2}

    def test_tree_shortcuts_match_traversers(self, balanced):
        assert list(balanced.pre_order()) == [50, 30, 20, 40, 70, 60, 80]
        assert list(balanced.in_order()) == sorted(VALUES)
        assert list(balanced.post_order()) == [20, 40, 30, 60, 80, 70, 50]

    def test_empty_root_yields_nothing(self):
        tree = BinarySearchTree()
        for strategy in ('pre', 'in', 'post', 'bfs'):
            assert list(create_traverser(strategy).values(tree.root)) == []

    def test_traversers_leave_flags_alone(self, balanced):
        for strategy in ('pre', 'in', 'post', 'bfs'):
            list(create_traverser(strategy).traverse(balanced.root))
        assert not any(TreeTestHelper(balanced).visited_flags())


class TestDepthLimits:
    """max_depth and min_depth filtering."""

    def test_max_depth_pre_order(self, balanced):
        values = [n.value for n, _ in PreOrderTraverser().traverse(balanced.root, max_depth=1)]
        assert values == [50, 30, 70]

    def test_max_depth_in_order(self, balanced):
        values = [n.value for n, _ in InOrderTraverser().traverse(balanced.root, max_depth=1)]
        assert values == [30, 50, 70]

    def test_max_depth_zero_is_root_only(self, balanced):
        for strategy in ('pre', 'in', 'post', 'bfs'):
            nodes = list(create_traverser(strategy).traverse(balanced.root, max_depth=0))
            assert [n.value for n, _ in nodes] == [50]

    def test_min_depth_breadth_first(self, balanced):
        values = [n.value for n, _ in BreadthFirstTraverser().traverse(balanced.root, min_depth=2)]
        assert values == [20, 40, 60, 80]

    def test_min_depth_post_order(self, balanced):
        values = [n.value for n, _ in PostOrderTraverser().traverse(balanced.root, min_depth=1)]
        assert values == [20, 40, 30, 60, 80, 70]


class TestCreateTraverser:

    @pytest.mark.parametrize("name,expected", [
        ('pre', PreOrderTraverser),
        ('PRE_ORDER', PreOrderTraverser),
        ('in', InOrderTraverser),
        ('in_order', InOrderTraverser),
        ('post', PostOrderTraverser),
        ('post_order', PostOrderTraverser),
        ('bfs', BreadthFirstTraverser),
        ('breadth_first', BreadthFirstTraverser),
    ])
    def test_known_names(self, name, expected):
        assert isinstance(create_traverser(name), expected)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown traversal strategy: zigzag"):
            create_traverser('zigzag')


class TestTraversalCursor:
    """The flag-driven cursor over a tree snapshot."""

    def test_starts_on_start_node(self, balanced):
        cursor = balanced.cursor()
        assert cursor.current == 50
        assert not cursor.finished

    def test_move_next_walks_post_order(self, balanced):
        cursor = balanced.cursor()
        seen = []
        while cursor.move_next():
            seen.append(cursor.current)
        assert seen == [20, 40, 30, 60, 80, 70, 50]
        assert cursor.finished
        assert cursor.move_next() is False

    def test_reset_repeats_the_walk(self, balanced):
        cursor = balanced.cursor()
        first = list(cursor)
        cursor.reset()
        second = list(cursor)
        assert first == second == [20, 40, 30, 60, 80, 70, 50]

    def test_reset_mid_walk(self, balanced):
        cursor = balanced.cursor()
        next(cursor)
        next(cursor)
        cursor.reset()
        assert cursor.current == 50
        assert list(cursor) == [20, 40, 30, 60, 80, 70, 50]

    def test_resumes_where_it_stopped(self, balanced):
        cursor = balanced.cursor()
        head = [next(cursor), next(cursor), next(cursor)]
        assert head == [20, 40, 30]
        assert list(cursor) == [60, 80, 70, 50]

    def test_cursor_works_on_a_snapshot(self, balanced):
        cursor = balanced.cursor()
        assert cursor.start is not balanced.root
        list(cursor)
        assert not any(TreeTestHelper(balanced).visited_flags())

    def test_cursor_over_subtree(self, balanced):
        cursor = TraversalCursor(balanced.root.right.clone())
        assert list(cursor) == [60, 80, 70]

    def test_empty_tree_cursor(self):
        cursor = BinarySearchTree().cursor()
        assert list(cursor) == []
        assert cursor.finished

    def test_current_after_running_off_the_end(self):
        tree = BinarySearchTree(TreeConfig.natural())
        tree.add(1)
        cursor = tree.cursor()
        assert cursor.move_next() is True
        assert cursor.current == 1
        assert cursor.move_next() is False
        assert cursor.current is not EMPTY
