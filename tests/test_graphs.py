import pytest

from dsapractice.graphs import (
    INF,
    alien_order,
    floyd_warshall,
    format_distances,
    has_cycle,
    topological_sort,
)

SOURCE_GRAPH = [
    [0, 5, INF, 10],
    [INF, 0, 3, INF],
    [INF, INF, 0, 1],
    [INF, INF, INF, 0],
]


def test_has_cycle_source_examples():
    assert has_cycle(5, [(1, 0), (0, 2), (2, 1), (0, 3), (3, 4)]) is True
    assert has_cycle(3, [(0, 1), (1, 2)]) is False


def test_self_loop_is_a_cycle():
    assert has_cycle(2, [(0, 1), (1, 1)]) is True


def test_empty_graph_has_no_cycle():
    assert has_cycle(0, []) is False


def test_has_cycle_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        has_cycle(2, [(0, 2)])


def test_floyd_warshall_source_example():
    assert floyd_warshall(SOURCE_GRAPH) == [
        [0, 5, 8, 9],
        [INF, 0, 3, 4],
        [INF, INF, 0, 1],
        [INF, INF, INF, 0],
    ]


def test_floyd_warshall_invariants():
    dist = floyd_warshall(SOURCE_GRAPH)
    size = len(dist)
    assert all(dist[i][i] == 0 for i in range(size))
    for i in range(size):
        for j in range(size):
            assert dist[i][j] <= SOURCE_GRAPH[i][j]
            for k in range(size):
                if dist[i][k] < INF and dist[k][j] < INF:
                    assert dist[i][j] <= dist[i][k] + dist[k][j]


def test_floyd_warshall_leaves_input_alone():
    graph = [row[:] for row in SOURCE_GRAPH]
    floyd_warshall(graph)
    assert graph == SOURCE_GRAPH


def test_floyd_warshall_rejects_non_square():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1]])


def test_format_distances_layout():
    dist = floyd_warshall(SOURCE_GRAPH)
    text = format_distances(dist)
    lines = text.split("\n")
    assert text.endswith("\n")
    assert lines[0] == (
        "The following matrix shows the shortest distances between every pair of vertices "
    )
    rows = lines[1:-1]
    assert len(rows) == len(dist)
    for line, row in zip(rows, dist):
        assert len(line) == 7 * len(row)
        assert line.split() == ["INF" if d == INF else str(d) for d in row]


def test_topological_sort_respects_edges():
    adjacency = [[], [], [3], [1], [0, 1], [0, 2]]
    order = topological_sort(6, adjacency)
    assert sorted(order) == list(range(6))
    position = {vertex: index for index, vertex in enumerate(order)}
    for source, targets in enumerate(adjacency):
        for target in targets:
            assert position[source] < position[target]


def test_topological_sort_drops_cycle():
    order = topological_sort(3, [[1], [0], []])
    assert 0 not in order and 1 not in order
    assert 2 in order


def test_alien_order_source_example():
    assert alien_order(["caa", "aaa", "aab"], 3) == ["c", "a", "b"]


def test_alien_order_respects_word_order():
    order = alien_order(["baa", "abcd", "abca", "cab", "cad"], 4)
    assert sorted(order) == ["a", "b", "c", "d"]
    position = {letter: index for index, letter in enumerate(order)}
    for before, after in [("b", "a"), ("d", "a"), ("a", "c"), ("b", "d")]:
        assert position[before] < position[after]


def test_alien_order_rejects_foreign_letter():
    with pytest.raises(ValueError):
        alien_order(["z", "a"], 3)