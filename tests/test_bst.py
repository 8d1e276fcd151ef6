import pytest

from netlogkit.bst import BST, BinaryTree, TreeNode
from netlogkit.records import Connection

VALUES = [50, 30, 70, 20, 40, 60, 80]


@pytest.fixture
def tree():
    bst = BST()
    for value in VALUES:
        assert bst.insert(value) is True
    return bst


def test_inorder_is_sorted(tree):
    assert list(tree.inorder()) == sorted(VALUES)


def test_preorder_and_postorder_place_root(tree):
    pre = list(tree.preorder())
    post = list(tree.postorder())
    assert pre[0] == VALUES[0]
    assert post[-1] == VALUES[0]
    assert sorted(pre) == sorted(post) == sorted(VALUES)


def test_preorder_exact(tree):
    assert list(tree.preorder()) == [50, 30, 20, 40, 70, 60, 80]


def test_duplicate_rejected(tree):
    assert tree.insert(40) is False
    assert list(tree.inorder()) == sorted(VALUES)


def test_insert_none_rejected():
    bst = BST()
    assert bst.insert(None) is False
    assert bst.is_empty()


def test_search(tree):
    node = tree.search(60)
    assert node.info == 60
    assert node.parent.info == 70
    assert tree.search(65) is None


def test_ancestors(tree):
    assert tree.ancestors(tree.search(20)) == [30, 50]
    assert tree.ancestors(tree.root) == []


def test_ancestors_foreign_node(tree):
    with pytest.raises(ValueError):
        tree.ancestors(TreeNode(99))


def test_levels_and_height(tree):
    assert tree.height() == 0
    levels = tree.levels()
    assert levels[0] == [50]
    assert sorted(v for level in levels for v in level) == sorted(VALUES)
    assert tree.height() == len(levels)
    assert tree.level_of(tree.root) == 1
    assert tree.level_of(tree.search(80)) == len(levels)


def test_set_levels_children_one_deeper(tree):
    tree.set_levels()
    for value in VALUES[1:]:
        node = tree.search(value)
        assert node.level == node.parent.level + 1


def test_leaves(tree):
    leaves = list(tree.leaves())
    assert leaves == [20, 40, 60, 80]
    for value in leaves:
        node = tree.search(value)
        assert node.left is None and node.right is None


def test_top_n(tree):
    assert tree.top_n(3) == sorted(VALUES, reverse=True)[:3]
    assert [tree.top(i) for i in range(3)] == sorted(VALUES, reverse=True)[:3]
    assert tree.top(4) is None


def test_top_n_more_than_size(tree):
    assert tree.top_n(20) == sorted(VALUES, reverse=True)
    assert [tree.top(i) for i in range(5)] == sorted(VALUES, reverse=True)[:5]


def test_top_index_out_of_range(tree):
    with pytest.raises(IndexError):
        tree.top(5)
    with pytest.raises(IndexError):
        tree.top(-1)


def test_visit_texts(tree):
    inorder = "".join(f"{v} " for v in sorted(VALUES))
    assert tree.visit(2) == "\nSe imprime el BST en InOrden\n" + inorder + "\n"
    assert tree.visit(1).startswith("\nSe imprime el BST en PreOrden\n50 ")
    assert tree.visit(3).endswith("50 \n")
    assert tree.visit(4).startswith("\nSe imprime el BST por nivel \n\nNivel 1: 50 - ")
    assert tree.visit(7) == ""


def test_visit_levels_on_empty_tree():
    assert BST().visit(4) == "\nSe imprime el BST por nivel \n\n"


def test_clear(tree):
    tree.clear()
    assert tree.is_empty()
    assert list(tree.inorder()) == []


def test_connections_ranked_by_frequency():
    bst = BST()
    bst.insert(Connection("10.0.0.1", 4))
    bst.insert(Connection("10.0.0.2", 9))
    bst.insert(Connection("10.0.0.3", 1))
    ranked = bst.top_n(2)
    assert [c.ip for c in ranked] == ["10.0.0.2", "10.0.0.1"]
    assert bst.insert(Connection("10.0.0.1", 7)) is False


def test_insert_under_empty_and_new_root():
    tree = BinaryTree()
    assert tree.insert_under(1, None) is False
    assert tree.root.info == 1
    assert tree.insert_under(2, None) is False
    assert tree.root.info == 2
    assert tree.root.left.info == 1


def test_insert_under_fills_slots():
    tree = BinaryTree()
    tree.insert_under("a", None)
    root = tree.root
    assert tree.insert_under("b", root) is True
    assert tree.insert_under("c", root) is True
    assert tree.insert_under("d", root) is True
    assert root.left.info == "b"
    assert root.right.info == "c"
    assert root.left.left.info == "d"
    assert list(tree.preorder()) == ["a", "b", "d", "c"]