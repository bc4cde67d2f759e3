import pytest

from flukit.treemodel import TreeModel, TreeNode


def _sample():
    return [
        {
            "title": "a",
            "children": [
                {"title": "a1"},
                {"title": "a2", "children": [{"title": "a2x"}]},
            ],
        },
        {"title": "b"},
    ]


def _titles(model):
    return [node.data["title"] for node in model.rows]


@pytest.fixture
def model():
    m = TreeModel(column_source=[{"title": "Name"}, {"title": "Size"}])
    m.set_data_source(_sample())
    return m


def test_data_source_flattened_in_preorder(model):
    assert _titles(model) == ["a", "a1", "a2", "a2x", "b"]
    assert model.data_source_size == 5
    assert model.row_count() == 5
    assert model.column_count() == 2


def test_depths(model):
    assert [n.depth for n in model.rows] == [0, 1, 1, 2, 0]


def test_checked_from_data():
    m = TreeModel()
    m.set_data_source([{"title": "x", "checked": True}, {"title": "y"}])
    assert [n.checked for n in m.rows] == [True, False]


def test_collapse_and_expand(model):
    model.collapse(0)
    assert _titles(model) == ["a", "b"]
    assert model.get_row(0).is_expanded is False
    model.expand(0)
    assert _titles(model) == ["a", "a1", "a2", "a2x", "b"]


def test_expand_keeps_collapsed_children_hidden(model):
    model.collapse(2)
    assert _titles(model) == ["a", "a1", "a2", "b"]
    model.collapse(0)
    model.expand(0)
    assert _titles(model) == ["a", "a1", "a2", "b"]


def test_collapse_twice_is_noop(model):
    model.collapse(0)
    model.collapse(0)
    assert _titles(model) == ["a", "b"]


def test_check_parent_checks_leaves(model):
    model.check_row(0, True)
    rows = model.rows
    assert rows[1].checked and rows[3].checked
    assert rows[0].is_checked() and rows[2].is_checked()
    assert [n.data["title"] for n in model.selection()] == ["a", "a1", "a2", "a2x"]


def test_check_leaf(model):
    model.check_row(4, True)
    assert [n.data["title"] for n in model.selection()] == ["b"]
    model.check_row(1, True)
    assert model.get_row(0).is_checked() is False


def test_has_next_node_by_index(model):
    rows = model.rows
    assert rows[1].has_next_node_by_index(1) is True
    assert rows[3].has_next_node_by_index(0) is True
    assert rows[3].has_next_node_by_index(1) is False
    assert rows[4].has_next_node_by_index(0) is False


def test_hide_line_footer(model):
    rows = model.rows
    assert rows[1].hide_line_footer() is True
    assert rows[2].hide_line_footer() is True
    assert rows[0].hide_line_footer() is False
    assert rows[4].hide_line_footer() is True
    assert TreeNode().hide_line_footer() is False


def test_is_shown(model):
    model.collapse(2)
    child = model.get_row(2).children[0]
    assert child.is_shown() is False
    assert model.get_row(1).is_shown() is True


def test_all_collapse_and_all_expand(model):
    model.all_collapse()
    assert _titles(model) == ["a", "b"]
    assert model.get_row(0).is_expanded is False
    model.all_expand()
    assert _titles(model) == ["a", "a1", "a2", "a2x", "b"]
    assert all(n.is_expanded for n in model.rows if n.has_children())


def test_hit_has_children_expanded(model):
    assert model.hit_has_children_expanded(0) is True
    assert model.hit_has_children_expanded(1) is False
    model.collapse(0)
    assert model.hit_has_children_expanded(0) is False


def test_remove_and_insert_rows(model):
    removed = model.rows[1:3]
    model.remove_rows(1, 2)
    assert _titles(model) == ["a", "a2x", "b"]
    model.insert_rows(1, removed)
    assert _titles(model) == ["a", "a1", "a2", "a2x", "b"]


def test_out_of_range_edits_ignored(model):
    model.remove_rows(4, 2)
    model.remove_rows(0, 0)
    model.insert_rows(9, [TreeNode()])
    model.insert_rows(0, [])
    assert model.row_count() == 5


def test_set_row_replaces_data(model):
    model.set_row(4, {"title": "renamed"})
    assert model.get_row(4).data == {"title": "renamed"}


def test_set_data_replaces_rows(model):
    node = TreeNode(data={"title": "solo"})
    model.set_data([node])
    assert model.rows == [node]


def test_get_row_out_of_range(model):
    with pytest.raises(IndexError):
        model.get_row(-1)
    with pytest.raises(IndexError):
        model.get_row(5)