import pytest

from tiling_model.nodes import Copied
from tiling_model.nodes import AddedToForest, AddedToParent, RemovedFromForest, RemovingFromParent
from tiling_model.selection import Selection
from tiling_model.tree import Observer, Tree


class SelectionObserver(Observer):
    def __init__(self):
        self.selection = Selection()

    def added_to_forest(self, map, node):
        self.selection.handle_event(map, AddedToForest(node))

    def added_to_parent(self, map, node):
        self.selection.handle_event(map, AddedToParent(node))

    def removing_from_parent(self, map, node):
        self.selection.handle_event(map, RemovingFromParent(node))

    def removed_from_forest(self, map, node):
        self.selection.handle_event(map, RemovedFromForest(node))


@pytest.fixture
def tree():
    return Tree(SelectionObserver())


def select(tree, node):
    tree.data.selection.select(tree.map, node)


def current(tree, root):
    return tree.data.selection.current_selection(root)


def remove(tree, node):
    tree.detach(node).remove()


def test_moves_as_nodes_are_added_and_removed(tree):
    root = tree.mk_node().id
    n1 = tree.mk_node().push_back(root)
    n2 = tree.mk_node().push_back(root)
    n3 = tree.mk_node().push_back(root)
    assert current(tree, root) == root
    select(tree, n2)
    assert current(tree, root) == n2
    remove(tree, n2)
    assert current(tree, root) == n3
    remove(tree, n3)
    assert current(tree, root) == n1
    remove(tree, n1)
    assert current(tree, root) == root


def test_remembers_nested_paths(tree):
    root = tree.mk_node().id
    a1 = tree.mk_node().push_back(root)
    a2 = tree.mk_node().push_back(root)
    tree.mk_node().push_back(a2)
    b2 = tree.mk_node().push_back(a2)
    tree.mk_node().push_back(a2)
    a3 = tree.mk_node().push_back(root)

    select(tree, b2)
    assert current(tree, root) == b2
    select(tree, a1)
    assert current(tree, root) == a1
    select(tree, a3)
    assert current(tree, root) == a3
    remove(tree, a3)
    assert current(tree, root) == b2


def test_preserves_selection_after_move_within_parent(tree):
    root = tree.mk_node().id
    n1 = tree.mk_node().push_back(root)
    n2 = tree.mk_node().push_back(root)
    tree.mk_node().push_back(root)
    select(tree, n2)
    tree.detach(n2).insert_before(n1).finish()
    assert list(tree.map.children(root))[0] == n2
    assert current(tree, root) == n2


def test_allows_parent_selection(tree):
    root = tree.mk_node().id
    tree.mk_node().push_back(root)
    a2 = tree.mk_node().push_back(root)
    b1 = tree.mk_node().push_back(a2)
    select(tree, b1)
    assert current(tree, root) == b1
    select(tree, a2)
    assert current(tree, root) == a2
    sel = tree.data.selection
    assert sel.local_selection(tree.map, a2) is None
    assert sel.last_selection(tree.map, a2) == b1
    assert sel.local_selection(tree.map, root) == a2


def test_select_locally_reports_changes(tree):
    root = tree.mk_node().id
    n1 = tree.mk_node().push_back(root)
    n2 = tree.mk_node().push_back(root)
    sel = tree.data.selection
    assert sel.select_locally(tree.map, n1) is True
    assert sel.select_locally(tree.map, n1) is False
    assert sel.select_locally(tree.map, n2) is True
    assert sel.select_locally(tree.map, root) is False
    assert sel.local_selection(tree.map, root) == n2


def test_removing_whole_subtree_clears_entries(tree):
    root = tree.mk_node().id
    a1 = tree.mk_node().push_back(root)
    a2 = tree.mk_node().push_back(root)
    b1 = tree.mk_node().push_back(a2)
    select(tree, b1)
    remove(tree, a2)
    sel = tree.data.selection
    assert sel.last_selection(tree.map, a2) is None
    assert current(tree, root) == a1


def test_copied_maps_selection_to_copy(tree):
    root = tree.mk_node().id
    tree.mk_node().push_back(root)
    a2 = tree.mk_node().push_back(root)
    tree.mk_node().push_back(a2)
    b2 = tree.mk_node().push_back(a2)
    select(tree, b2)

    copy_root = tree.deep_copy(root).id
    originals = list(tree.map.traverse_preorder(root))
    copies = list(tree.map.traverse_preorder(copy_root))
    for src, dest in zip(originals, copies):
        tree.data.selection.handle_event(tree.map, Copied(src, dest))

    mapping = dict(zip(originals, copies))
    assert current(tree, copy_root) == mapping[b2]
    assert current(tree, root) == b2


def test_copied_with_mismatched_structure_raises(tree):
    root = tree.mk_node().id
    child = tree.mk_node().push_back(root)
    select(tree, child)
    empty = tree.mk_node().id
    with pytest.raises(ValueError):
        tree.data.selection.handle_event(tree.map, Copied(root, empty))