from hypothesis import given
from hypothesis import strategies as st

from arbortree.metrics import (
    balance,
    depth,
    height,
    internal_nodes,
    is_complete,
    is_full,
    is_perfect,
    leaves,
    size,
)
from arbortree.node import Node

specs = st.recursive(
    st.none(), lambda c: st.tuples(st.integers(), c, c), max_leaves=16
)
nonempty = st.tuples(st.integers(), specs, specs)
full_specs = st.recursive(
    st.builds(lambda v: (v, None, None), st.integers()),
    lambda c: st.tuples(st.integers(), c, c),
    max_leaves=16,
)


def build(spec, parent=None):
    if spec is None:
        return None
    value, left, right = spec
    node = Node(value, parent)
    node.left = build(left, node)
    node.right = build(right, node)
    return node


def from_list(values):
    nodes = [Node(v) for v in values]
    for index, node in enumerate(nodes):
        for child_index, side in ((2 * index + 1, "left"), (2 * index + 2, "right")):
            if child_index < len(nodes):
                setattr(node, side, nodes[child_index])
                nodes[child_index].parent = node
    return nodes[0] if nodes else None


def walk(node):
    if node is None:
        return []
    return [node] + walk(node.left) + walk(node.right)


def spec_values(spec):
    if spec is None:
        return []
    return [spec[0]] + spec_values(spec[1]) + spec_values(spec[2])


def mirror(spec):
    if spec is None:
        return None
    return (spec[0], mirror(spec[2]), mirror(spec[1]))


def left_chain(length):
    root = Node(0)
    node = root
    for value in range(1, length + 1):
        node = node.insert_left(value)
    return root, node


def test_empty_and_single_node():
    lone = Node(1)
    assert height(None) == 0
    assert height(lone) == 0
    assert depth(None) == 0
    assert depth(lone) == 0
    assert size(None) == 0
    assert leaves(None) == 0
    assert internal_nodes(None) == 0
    assert balance(None) == 0
    assert size(lone) == leaves(lone)


@given(st.integers(min_value=0, max_value=60))
def test_chain_height_and_depth(length):
    root, tail = left_chain(length)
    assert height(root) == length
    assert depth(tail) == length
    assert depth(root) == 0
    assert size(root) == length + 1
    assert balance(root) == length


@given(nonempty)
def test_height_is_deepest_depth(spec):
    root = build(spec)
    assert height(root) == max(depth(node) for node in walk(root))


@given(specs)
def test_size_counts_every_node(spec):
    assert size(build(spec)) == len(spec_values(spec))


@given(specs)
def test_leaves_and_internal_nodes_partition(spec):
    root = build(spec)
    assert leaves(root) + internal_nodes(root) == size(root)


@given(full_specs)
def test_full_tree_properties(spec):
    root = build(spec)
    assert is_full(root)
    assert leaves(root) == internal_nodes(root) + 1


@given(full_specs, st.data())
def test_single_child_breaks_fullness(spec, data):
    root = build(spec)
    leaf = data.draw(st.sampled_from([n for n in walk(root) if n.is_leaf()]))
    leaf.insert_left(0)
    assert not is_full(root)


def test_is_full_special_cases():
    root = Node(1)
    assert not is_full(None)
    assert is_full(root)
    root.insert_right(2)
    assert not is_full(root)


@given(specs)
def test_balance_of_mirror_is_negated(spec):
    assert balance(build(mirror(spec))) == -balance(build(spec))


@given(st.integers(min_value=1, max_value=6))
def test_perfect_trees(levels):
    count = 2**levels - 1
    root = from_list(list(range(count)))
    assert is_perfect(root)
    assert is_full(root)
    assert is_complete(root)
    assert height(root) == levels - 1
    assert leaves(root) == (count + 1) // 2


@given(st.integers(min_value=1, max_value=6))
def test_one_extra_node_breaks_perfection(levels):
    root = from_list(list(range(2**levels)))
    assert not is_perfect(root)
    assert is_complete(root)


def test_is_perfect_special_cases():
    root = Node(1)
    assert not is_perfect(None)
    assert is_perfect(root)
    root.insert_left(2)
    assert not is_perfect(root)


@given(st.integers(min_value=1, max_value=80))
def test_list_built_trees_are_complete(count):
    assert is_complete(from_list(list(range(count))))


@given(st.integers(min_value=5, max_value=80))
def test_hole_breaks_completeness(count):
    root = from_list(list(range(count)))
    root.left.left = None
    assert not is_complete(root)


def test_is_complete_special_cases():
    root = Node(1)
    assert not is_complete(None)
    assert is_complete(root)
    root.insert_right(2)
    assert not is_complete(root)
    root.insert_left(3)
    assert is_complete(root)