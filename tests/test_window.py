import pytest

from tiling_model.nodes import AddedToParent, Copied, NodeMap, RemovedFromForest
from tiling_model.window import Window, WindowId

LAYOUT_A = "layout-a"
LAYOUT_B = "layout-b"


@pytest.fixture
def node_map():
    return NodeMap()


def test_set_window_is_two_way(node_map):
    window = Window()
    node = node_map.insert()
    wid = WindowId(1, 1)
    window.set_window(LAYOUT_A, node, wid)
    assert window.at(node) == wid
    assert window.node_for(LAYOUT_A, wid) == node
    assert window.node_for(LAYOUT_B, wid) is None
    assert window.node_for(LAYOUT_A, WindowId(1, 2)) is None


def test_set_window_refuses_overwrite(node_map):
    window = Window()
    node = node_map.insert()
    window.set_window(LAYOUT_A, node, WindowId(1, 1))
    with pytest.raises(ValueError):
        window.set_window(LAYOUT_A, node, WindowId(1, 2))
    assert window.at(node) == WindowId(1, 1)


def test_same_window_in_several_layouts(node_map):
    window = Window()
    na, nb = node_map.insert(), node_map.insert()
    wid = WindowId(3, 7)
    window.set_window(LAYOUT_A, na, wid)
    window.set_window(LAYOUT_B, nb, wid)
    assert window.node_for(LAYOUT_A, wid) == na
    assert window.node_for(LAYOUT_B, wid) == nb
    assert window.take_nodes_for(wid) == [(LAYOUT_A, na), (LAYOUT_B, nb)]
    assert window.node_for(LAYOUT_A, wid) is None
    assert list(window.window_ids()) == []


def test_swap_windows(node_map):
    window = Window()
    na, nb = node_map.insert(), node_map.insert()
    a, b = WindowId(1, 1), WindowId(1, 2)
    window.set_window(LAYOUT_A, na, a)
    window.set_window(LAYOUT_A, nb, b)
    window.swap_windows(na, nb)
    assert window.at(na) == b
    assert window.at(nb) == a
    assert window.node_for(LAYOUT_A, a) == nb
    assert window.node_for(LAYOUT_A, b) == na


def test_swap_with_empty_node_does_nothing(node_map):
    window = Window()
    na, nb = node_map.insert(), node_map.insert()
    window.set_window(LAYOUT_A, na, WindowId(1, 1))
    window.swap_windows(na, nb)
    assert window.at(na) == WindowId(1, 1)
    assert window.at(nb) is None


def test_window_ids_and_pids_are_sorted(node_map):
    window = Window()
    wids = [WindowId(2, 1), WindowId(1, 2), WindowId(1, 1)]
    for wid in wids:
        window.set_window(LAYOUT_A, node_map.insert(), wid)
    assert list(window.window_ids()) == sorted(wids)
    assert list(window.pids()) == [1, 2]


def test_take_nodes_for_app(node_map):
    window = Window()
    n1, n2, n3 = node_map.insert(), node_map.insert(), node_map.insert()
    window.set_window(LAYOUT_A, n2, WindowId(1, 2))
    window.set_window(LAYOUT_A, n1, WindowId(1, 1))
    window.set_window(LAYOUT_A, n3, WindowId(2, 1))
    taken = window.take_nodes_for_app(1)
    assert taken == [(WindowId(1, 1), LAYOUT_A, n1), (WindowId(1, 2), LAYOUT_A, n2)]
    assert list(window.window_ids()) == [WindowId(2, 1)]
    assert window.take_nodes_for_app(1) == []


def test_removed_from_forest_clears_both_sides(node_map):
    window = Window()
    node = node_map.insert()
    wid = WindowId(4, 4)
    window.set_window(LAYOUT_A, node, wid)
    window.handle_event(node_map, RemovedFromForest(node))
    assert window.at(node) is None
    assert window.node_for(LAYOUT_A, wid) is None
    assert list(window.window_ids()) == []


def test_copied_registers_destination(node_map):
    window = Window()
    src, dest = node_map.insert(), node_map.insert()
    wid = WindowId(5, 1)
    window.set_window(LAYOUT_A, src, wid)
    window.handle_event(node_map, Copied(src, dest, LAYOUT_B))
    assert window.at(dest) == wid
    assert window.node_for(LAYOUT_B, wid) == dest
    assert window.node_for(LAYOUT_A, wid) == src


def test_window_nodes_cannot_have_children(node_map):
    window = Window()
    parent, child = node_map.insert(), node_map.insert()
    window.set_window(LAYOUT_A, parent, WindowId(1, 1))
    node_map.link_under_back(child, parent)
    with pytest.raises(ValueError):
        window.handle_event(node_map, AddedToParent(child))


def test_children_of_plain_nodes_are_allowed(node_map):
    window = Window()
    parent, child = node_map.insert(), node_map.insert()
    node_map.link_under_back(child, parent)
    window.handle_event(node_map, AddedToParent(child))
    window.set_window(LAYOUT_A, child, WindowId(1, 1))
    assert window.at(child) == WindowId(1, 1)
    assert window.at(parent) is None