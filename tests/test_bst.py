import pytest

from bstree.bst import BstNode, tree_delete

SAMPLE_KEYS = [15, 6, 18, 17, 20, 3, 7, 2, 4, 13, 9]
INSERTED = [10, 30, 25, 21, 19, 11, 23, 27, 28, 26]
DELETED = [2, 3, 17, 20, 7, 4, 13, 9, 10]


def _sample():
    root = BstNode(15)
    six = root.add_left_child(6)
    eighteen = root.add_right_child(18)
    eighteen.add_left_child(17)
    eighteen.add_right_child(20)
    three = six.add_left_child(3)
    seven = six.add_right_child(7)
    three.add_left_child(2)
    three.add_right_child(4)
    thirteen = seven.add_right_child(13)
    thirteen.add_left_child(9)
    return root


def _inorder(node):
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.key
    yield from _inorder(node.right)


def _nodes(node):
    if node is None:
        return
    yield node
    yield from _nodes(node.left)
    yield from _nodes(node.right)


def _next_key(keys, key):
    ordered = sorted(keys)
    index = ordered.index(key)
    return ordered[index + 1] if index + 1 < len(ordered) else None


def test_add_children_set_parent():
    root = BstNode(15)
    left = root.add_left_child(6)
    right = root.add_right_child(18)
    assert root.left is left and root.right is right
    assert left.parent is root and right.parent is root


def test_sample_is_sorted():
    assert list(_inorder(_sample())) == sorted(SAMPLE_KEYS)


@pytest.mark.parametrize("key", SAMPLE_KEYS)
def test_tree_search_finds_present_keys(key):
    found = _sample().tree_search(key)
    assert found is not None
    assert found.key == key


def test_tree_search_missing_key():
    assert _sample().tree_search(22) is None


def test_tree_search_returns_copy_sharing_children():
    root = _sample()
    found = root.tree_search(15)
    assert found is not root
    assert found.left is root.left and found.right is root.right


def test_minimum_and_maximum():
    root = _sample()
    assert root.minimum().key == min(SAMPLE_KEYS)
    assert root.maximum().key == max(SAMPLE_KEYS)


def test_root_from_deep_node():
    root = _sample()
    deepest = root.left.right.right.left
    assert deepest.root() is root
    assert root.root() is root


@pytest.mark.parametrize("key", SAMPLE_KEYS)
def test_tree_successor_is_next_key(key):
    root = _sample()
    node = root.tree_search(key)
    successor = node.tree_successor()
    expected = _next_key(SAMPLE_KEYS, key)
    if expected is None:
        assert successor is None
    else:
        assert successor.key == expected


def test_successor_simpler_of_minimum_is_parent():
    root = _sample()
    node = root.tree_search(2)
    assert node.tree_successor_simpler().key == 3


def test_successor_simpler_of_root_uses_right_subtree():
    root = _sample()
    result = root.tree_successor_simpler()
    assert result.key == _next_key(SAMPLE_KEYS, 15)


def test_successor_simpler_without_parent_raises():
    with pytest.raises(ValueError):
        BstNode(5).tree_successor_simpler()


def test_tree_insert_keeps_order():
    root = _sample()
    for value in INSERTED:
        leaf = root.tree_insert(value)
        assert leaf.key == value
        assert leaf.left is None and leaf.right is None
    assert list(_inorder(root)) == sorted(SAMPLE_KEYS + INSERTED)


def test_tree_insert_duplicate_goes_right():
    root = BstNode(5)
    leaf = root.tree_insert(5)
    assert root.right is leaf
    assert leaf.parent is root


def test_delete_sequence():
    root = _sample()
    for value in INSERTED:
        root.tree_insert(value)
    for value in DELETED:
        node = root.tree_search(value)
        root = tree_delete(root, node)
        assert root.tree_search(value) is None
    remaining = sorted(set(SAMPLE_KEYS + INSERTED) - set(DELETED))
    assert list(_inorder(root)) == remaining
    for node in _nodes(root):
        for child in (node.left, node.right):
            if child is not None:
                assert child.parent is node


def test_delete_leaf():
    root = _sample()
    root = tree_delete(root, root.tree_search(4))
    assert list(_inorder(root)) == sorted(set(SAMPLE_KEYS) - {4})


def test_delete_root_with_two_children():
    root = _sample()
    new_root = tree_delete(root, root)
    assert new_root.key == _next_key(SAMPLE_KEYS, 15)
    assert list(_inorder(new_root)) == sorted(set(SAMPLE_KEYS) - {15})


def test_delete_only_node_gives_zero_root():
    root = BstNode(8)
    assert tree_delete(root, root).key == 0


def test_delete_root_with_single_child():
    root = BstNode(8)
    child = root.add_right_child(12)
    assert tree_delete(root, root) is child