from kataset.trees import TreeNode, postorder_traversal, preorder_traversal


def _sample():
    # 1 -> right 2 -> left 3
    return TreeNode(1, None, TreeNode(2, TreeNode(3)))


def _full():
    return TreeNode(
        1,
        TreeNode(2, TreeNode(4), TreeNode(5)),
        TreeNode(3, TreeNode(6), TreeNode(7)),
    )


def test_default_node():
    node = TreeNode()
    assert (node.val, node.left, node.right) == (0, None, None)


def test_empty_tree():
    assert preorder_traversal(None) == []
    assert postorder_traversal(None) == []


def test_single_node():
    assert preorder_traversal(TreeNode(5)) == [5]
    assert postorder_traversal(TreeNode(5)) == [5]


def test_preorder_sample():
    assert preorder_traversal(_sample()) == [1, 2, 3]


def test_postorder_sample():
    assert postorder_traversal(_sample()) == [3, 2, 1]


def test_full_tree_orders():
    tree = _full()
    assert preorder_traversal(tree) == [1, 2, 4, 5, 3, 6, 7]
    assert postorder_traversal(tree) == [4, 5, 2, 6, 7, 3, 1]


def test_traversals_visit_every_node_once():
    tree = _full()
    assert sorted(preorder_traversal(tree)) == sorted(postorder_traversal(tree))
    assert preorder_traversal(tree)[0] == tree.val
    assert postorder_traversal(tree)[-1] == tree.val


def test_repeated_calls_are_independent():
    tree = _sample()
    first = preorder_traversal(tree)
    assert preorder_traversal(tree) == first


def test_deep_tree():
    depth = 5000
    root = TreeNode(0)
    node = root
    for value in range(1, depth):
        node.left = TreeNode(value)
        node = node.left
    assert preorder_traversal(root) == list(range(depth))
    assert postorder_traversal(root) == list(range(depth - 1, -1, -1))