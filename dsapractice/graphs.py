"""Graph exercises: cycles, shortest paths and topological orders."""

from collections import deque
from itertools import pairwise

INF = 99999
"""Distance used for vertices that are not connected."""

_HEADER = (
    "The following matrix shows the shortest distances"
    " between every pair of vertices "
)


def _check_vertex(vertex, vertex_count):
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} is out of range")


def has_cycle(vertex_count, edges):
    """Tell whether an undirected graph given by its edges holds a cycle."""
    adjacency = [[] for _ in range(vertex_count)]
    for u, v in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append(v)
        adjacency[v].append(u)

    visited = [False] * vertex_count
    for start in range(vertex_count):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, -1, iter(adjacency[start]))]
        while stack:
            vertex, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, vertex, iter(adjacency[neighbour])))
                    break
                if neighbour != parent:
                    return True
            else:
                stack.pop()
    return False


def floyd_warshall(matrix):
    """Return the all-pairs shortest distances of a square weight matrix."""
    dist = [list(row) for row in matrix]
    size = len(dist)
    if any(len(row) != size for row in dist):
        raise ValueError("the matrix must be square")
    for k in range(size):
        through = dist[k]
        for row in dist:
            via = row[k]
            for j in range(size):
                if via + through[j] < row[j]:
                    row[j] = via + through[j]
    return dist


def format_distances(matrix):
    """Render a distance matrix as text, seven columns a cell, INF where unreachable."""
    lines = [_HEADER]
    lines.extend(
        "".join(f"{'INF':>7}" if distance == INF else f"{distance:7d}" for distance in row)
        for row in matrix
    )
    return "\n".join(lines) + "\n"


def topological_sort(vertex_count, adjacency):
    """Return vertices in topological order by Kahn's algorithm.

    Vertices on a cycle are left out.
    """
    indegree = [0] * vertex_count
    for targets in adjacency:
        for target in targets:
            indegree[target] += 1
    queue = deque(vertex for vertex in range(vertex_count) if indegree[vertex] == 0)
    order = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for target in adjacency[vertex]:
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)
    return order


def alien_order(words, alphabet_size):
    """Return the letters of an alien alphabet in an order the sorted ``words`` imply."""

    def index(letter):
        position = ord(letter) - ord("a")
        if not 0 <= position < alphabet_size:
            raise ValueError(f"letter {letter!r} is outside the alphabet")
        return position

    adjacency = [[] for _ in range(alphabet_size)]
    for first, second in pairwise(words):
        for a, b in zip(first, second):
            if a != b:
                adjacency[index(a)].append(index(b))
                break

    visited = [False] * alphabet_size
    finished = []
    for start in range(alphabet_size):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            vertex, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                finished.append(vertex)
    return [chr(ord("a") + vertex) for vertex in reversed(finished)]