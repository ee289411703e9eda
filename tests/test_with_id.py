import pytest

from resembla.response import ResemblaResponse
from resembla.with_id import ResemblaWithId, ResponseWithId


class FakeSearcher:
    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def find(self, query, threshold=0.0, max_response=0):
        self.calls.append(("find", query, threshold, max_response))
        return list(self.responses)

    def eval(self, query, candidates, threshold=0.0, max_response=0):
        self.calls.append(("eval", query, threshold, max_response))
        return [r for r in self.responses if r.text in candidates]


ROWS = [["10", "apple"], ["20", "banana"], ["30", "apple"]]


def test_find_attaches_ids_from_corpus():
    searcher = FakeSearcher([ResemblaResponse("banana", 0.9), ResemblaResponse("apple", 0.4)])
    wrapped = ResemblaWithId(searcher, ROWS)
    assert wrapped.find("q", 0.1, 5) == [
        ResponseWithId("banana", 0.9, 20),
        ResponseWithId("apple", 0.4, 10),
    ]
    assert searcher.calls == [("find", "q", 0.1, 5)]


def test_find_raises_for_text_outside_corpus():
    wrapped = ResemblaWithId(FakeSearcher([ResemblaResponse("cherry", 0.5)]), ROWS)
    with pytest.raises(KeyError):
        wrapped.find("q")


def test_eval_uses_zero_for_unknown_text():
    searcher = FakeSearcher([ResemblaResponse("apple", 0.8), ResemblaResponse("cherry", 0.3)])
    wrapped = ResemblaWithId(searcher, ROWS)
    results = wrapped.eval("q", ["apple", "cherry"])
    assert [(r.text, r.id) for r in results] == [("apple", 10), ("cherry", 0)]


def test_sequential_ids_without_id_column():
    searcher = FakeSearcher([ResemblaResponse("x", 0.5), ResemblaResponse("y", 0.2)])
    wrapped = ResemblaWithId(searcher, [["x"], ["y"], ["x"]], id_col=0, text_col=1)
    assert [r.id for r in wrapped.find("q")] == [1, 2]


def test_missing_id_continues_after_largest_seen():
    searcher = FakeSearcher([ResemblaResponse("b", 0.5), ResemblaResponse("a", 0.2)])
    wrapped = ResemblaWithId(searcher, [["a", "5"], ["b"]], id_col=2, text_col=1)
    assert [r.id for r in wrapped.find("q")] == [6, 5]


def test_rows_without_text_column_are_skipped():
    searcher = FakeSearcher([ResemblaResponse("only", 1.0)])
    wrapped = ResemblaWithId(searcher, [["7"], ["8", "only"]])
    assert wrapped.find("q") == [ResponseWithId("only", 1.0, 8)]


def test_invalid_id_raises():
    with pytest.raises(ValueError):
        ResemblaWithId(FakeSearcher([]), [["abc", "text"]])


def test_responses_with_id_sort_best_first():
    items = [ResponseWithId("a", 0.1, 1), ResponseWithId("b", 0.9, 2)]
    assert [r.id for r in sorted(items)] == [2, 1]