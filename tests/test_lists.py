import io

from pushswap.lists import LinkedList, Node


def test_add_puts_new_content_in_front():
    items = LinkedList()
    items.add("a")
    node = items.add("b")
    assert list(items) == ["b", "a"]
    assert items.head is node


def test_constructor_keeps_order():
    assert list(LinkedList([1, 2, 3])) == [1, 2, 3]


def test_len():
    assert len(LinkedList()) == 0
    assert len(LinkedList(range(5))) == 5


def test_reverse_round_trip():
    items = LinkedList([1, 2, 3, 4])
    items.reverse()
    assert list(items) == [4, 3, 2, 1]
    items.reverse()
    assert list(items) == [1, 2, 3, 4]


def test_reverse_empty():
    items = LinkedList()
    items.reverse()
    assert items.head is None


def test_foreach_visits_nodes_in_order():
    items = LinkedList([1, 2, 3])
    seen = []

    def double(node):
        seen.append(node.content)
        node.content *= 2

    items.foreach(double)
    assert seen == [1, 2, 3]
    assert list(items) == [2, 4, 6]


def test_map_builds_new_list():
    items = LinkedList(["x", "y"])
    mapped = items.map(str.upper)
    assert list(mapped) == ["X", "Y"]
    assert list(items) == ["x", "y"]
    assert mapped.head is not items.head


def test_delete_calls_destructor_and_empties():
    items = LinkedList([1, 2, 3])
    released = []
    items.delete(released.append)
    assert released == [1, 2, 3]
    assert items.head is None
    assert len(items) == 0


def test_write_skips_empty_contents():
    items = LinkedList(["ab", None, "cd"])
    out = io.StringIO()
    items.write(out)
    assert out.getvalue() == "abcd"


def test_node_defaults():
    node = Node()
    assert node.content is None
    assert node.next is None