import pytest

from algokit.nary import NaryTree


def filesystem():
    root = NaryTree("/")
    tmp = root.insert("tmp")
    tmp.insert("tmp_file")
    var = root.insert("var")
    var.insert("www")
    opt = root.insert("opt")
    betty = opt.insert("Betty")
    betty.insert("betty-style.pl")
    betty.insert("betty-doc.pl")
    home = root.insert("home")
    alex = home.insert("alex")
    for name in (
        "Desktop",
        "Downloads",
        "Pictures",
        "Movies",
        "Documents",
        "Applications",
    ):
        alex.insert(name)
    return root


def walk(root):
    seen = []
    depth = root.traverse(lambda node, d: seen.append((node.content, d)))
    return depth, seen


def test_traverse_order_and_depth():
    depth, seen = walk(filesystem())
    assert depth == 3
    assert [name for name, _ in seen] == [
        "/",
        "home",
        "alex",
        "Applications",
        "Documents",
        "Movies",
        "Pictures",
        "Downloads",
        "Desktop",
        "opt",
        "Betty",
        "betty-doc.pl",
        "betty-style.pl",
        "var",
        "www",
        "tmp",
        "tmp_file",
    ]


def test_diameter_of_filesystem():
    assert filesystem().diameter() == 7


def test_path_exists_from_source_example():
    root = filesystem()
    assert root.path_exists(["/", "opt", "Betty", "betty-style.pl"])
    assert not root.path_exists(
        ["/", "opt", "Betty", "betty-style.pl", "Holberton"]
    )


def test_path_must_start_at_root():
    root = filesystem()
    assert not root.path_exists(["opt", "Betty"])
    assert not root.path_exists([])
    assert root.path_exists(["/"])


def test_insert_puts_newest_first_and_links_parent():
    root = NaryTree("r")
    first = root.insert("first")
    second = root.insert("second")
    assert list(root) == [second, first]
    assert len(root) == root.nb_children == len(["first", "second"])
    assert first.parent is root and second.parent is root
    assert root.parent is None


def test_constructor_with_parent_links_child():
    root = NaryTree("r")
    child = NaryTree("c", root)
    assert root.children == [child]
    assert child.parent is root


def test_content_must_be_string():
    with pytest.raises(TypeError):
        NaryTree(None)
    with pytest.raises(TypeError):
        NaryTree("r").insert(None)


def test_traverse_requires_action():
    with pytest.raises(TypeError):
        filesystem().traverse(None)


def test_traverse_visits_every_node_once_with_parent_depths():
    root = filesystem()
    nodes = []
    root.traverse(lambda node, d: nodes.append((node, d)))
    assert len(nodes) == 17
    assert len({id(n) for n, _ in nodes}) == len(nodes)
    depth_of = {id(n): d for n, d in nodes}
    children = [(n, d) for n, d in nodes if n.parent is not None]
    assert len(children) == len(nodes) - 1
    assert all(depth_of[id(n.parent)] == d - 1 for n, d in children)


def test_height_exceeds_traverse_depth_by_one():
    root = filesystem()
    depth, _ = walk(root)
    assert root.height() == depth + 1


def test_single_node_diameter_equals_height():
    leaf = NaryTree("leaf")
    assert leaf.diameter() == leaf.height()
    depth, seen = walk(leaf)
    assert depth == 0
    assert seen == [("leaf", 0)]


def test_chain_diameter_equals_height():
    root = NaryTree("a")
    node = root
    for name in "bcde":
        node = node.insert(name)
    assert root.diameter() == root.height() == len("abcde")


def test_diameter_joins_two_tallest_children():
    root = NaryTree("r")
    a = root.insert("a")
    a.insert("a1").insert("a2")
    b = root.insert("b")
    b.insert("b1")
    root.insert("c")
    assert root.diameter() == a.height() + b.height() + 1


def test_path_follows_first_matching_child():
    root = NaryTree("r")
    older = root.insert("dup")
    older.insert("deep")
    root.insert("dup")
    assert not root.path_exists(["r", "dup", "deep"])
    assert root.path_exists(("r", "dup"))