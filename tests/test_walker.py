import copy
from jpread.core import NOT_FOUND, tokenize
from jpread.walker import walk, resolve_index

doc = {
    "store": {
        "book": [{"title": "A", "tags": ["x", "y"]}, {"title": "B"}],
        "bicycle": {"color": "red"},
        "nothing": None,
    }
}

def test_descends_keys_and_indices():
    assert walk(doc, tokenize("store.book[0].tags")) == ["x", "y"]
    assert walk(doc, tokenize("$.store.bicycle")) == {"color": "red"}

def test_empty_tokens_are_skipped():
    assert walk(doc, tokenize("store..bicycle")) == {"color": "red"}

def test_wildcard_keeps_array():
    assert walk(doc, tokenize("store.book[*]")) is doc["store"]["book"]

def test_root_array_index():
    assert walk([[1, 2], [3]], tokenize("[1]")) == [3]

def test_misses():
    assert walk(doc, tokenize("store.nope")) is NOT_FOUND
    assert walk(doc, tokenize("store.book[2]")) is NOT_FOUND
    assert walk(doc, tokenize("store.book[-1]")) is NOT_FOUND
    assert walk(doc, tokenize("store.book[x]")) is NOT_FOUND
    assert walk(doc, tokenize("store.bicycle[0]")) is NOT_FOUND
    assert walk(doc, tokenize("store.book.title")) is NOT_FOUND
    assert walk(doc, tokenize("store.bicycle.color.x")) is NOT_FOUND

def test_null_is_not_a_miss():
    assert walk(doc, tokenize("store.nothing")) is None

def test_short_circuits_on_first_miss():
    assert walk(doc, tokenize("nope.store.book")) is NOT_FOUND

def test_resolve_index_bounds():
    assert resolve_index([1, 2, 3], "2") == 3
    assert resolve_index([1, 2, 3], "3") is NOT_FOUND
    assert resolve_index({"0": 1}, "0") is NOT_FOUND

def test_document_untouched():
    before = copy.deepcopy(doc)
    walk(doc, tokenize("store.book[*]"))
    walk(doc, tokenize("store.book[1].title"))
    assert doc == before

def test_oversized_index_is_a_miss():
    assert walk({"xs": [1]}, tokenize("xs[" + "9" * 5000 + "]")) is NOT_FOUND
    assert resolve_index(list(range(12)), "1" * 5000) is NOT_FOUND

def test_leading_zeros_still_resolve():
    assert resolve_index(list(range(12)), "0011") == 11
    assert resolve_index([7], "0" * 5000) == 7
