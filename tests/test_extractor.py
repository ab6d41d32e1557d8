import pytest
from lexorder.extractor import ColumnScan, extract_constraints
from lexorder.core.digraph import DirectedGraph


def test_extract_empty_dictionary():
    graph = extract_constraints([])
    assert graph.vertex_count() == 0
    assert graph.edge_count() == 0


def test_extract_sample_dictionary():
    graph = extract_constraints(["cbca", "cbb", "aa", "aba"])

    # column 0: c < a, column 1: a < b (prefix "a"), column 2: c < b (prefix "cb")
    assert graph.has_edge('c', 'a')
    assert graph.has_edge('a', 'b')
    assert graph.has_edge('c', 'b')
    assert graph.edge_count() == 3
    assert set(graph) == {'a', 'b', 'c'}


def test_extract_ignores_letters_with_different_prefixes():
    # "b" and "a" line up in column 1 but their rows differ in column 0
    graph = extract_constraints(["xb", "ya"])

    assert graph.has_edge('x', 'y')
    assert not graph.has_edge('b', 'a')
    assert graph.edge_count() == 1


def test_extract_skips_rows_without_letter_in_column():
    # "c" is too short for column 1, so "ac" and "ab" are adjacent there
    graph = extract_constraints(["c", "ac", "ab"])

    assert graph.has_edge('c', 'a')
    assert graph.has_edge('c', 'b')
    assert not graph.has_edge('a', 'b')


def test_extract_only_consecutive_pairs():
    graph = extract_constraints(["a", "b", "c"])

    assert graph.has_edge('a', 'b')
    assert graph.has_edge('b', 'c')
    assert not graph.has_edge('a', 'c')


def test_extract_duplicate_constraints_collapse():
    graph = extract_constraints(["ax", "ay", "bx", "by"])

    assert graph.has_edge('x', 'y')
    assert graph.in_degree('y') == 1


def test_extract_equal_letters_emit_nothing():
    graph = extract_constraints(["aa", "aa"])
    assert graph.edge_count() == 0
    assert set(graph) == {'a'}


def test_extract_registers_isolated_letters():
    graph = extract_constraints(["ab", "ac", "d"])

    assert 'd' in graph
    # "q" only lives past the last comparable column
    graph = extract_constraints(["a", "bq"])
    assert 'q' in graph
    assert graph.in_degree('q') == 0
    assert graph.successors('q') == set()


def test_extract_prefix_word_before_longer_word():
    graph = extract_constraints(["ab", "abc", "abd"])

    assert graph.has_edge('c', 'd')
    assert graph.edge_count() == 1


def test_extract_empty_words_are_skipped_in_columns():
    graph = extract_constraints(["", "a", "", "b"])

    assert graph.has_edge('a', 'b')
    assert graph.vertex_count() == 2


def test_column_scan_resets_per_column():
    graph = DirectedGraph()
    scan = ColumnScan(column=1)
    scan.feed("xa", graph)
    scan.feed("xb", graph)
    scan.feed("yc", graph)

    assert scan.entries == 3
    assert scan.prev_letter == 'b'
    assert scan.curr_letter == 'c'
    assert scan.prev_prefix == 'y'
    assert graph.has_edge('a', 'b')
    assert not graph.has_edge('b', 'c')


@pytest.mark.parametrize('words', [["ba", "bb"], ["a", "b"], ["za", "zb", "zzz"]])
def test_extract_no_reverse_edges(words):
    graph = extract_constraints(words)
    for src in graph:
        for dst in graph.successors(src):
            assert not graph.has_edge(dst, src)
