import logging
from typing import List, Optional, Tuple

from heap_ import Heap
from utils import is_key_equal

logger = logging.getLogger(__name__)

INF = float("inf")


class Edge:
    def __init__(self, from_node_id, to_node_id, weight):
        self.from_node_id = from_node_id
        self.to_node_id = to_node_id
        self.weight = weight


class Graph:
    def __init__(self, n_nodes: int):
        if n_nodes < 0:
            raise ValueError(f"Number of nodes must be non-negative, got {n_nodes}")
        self.n_nodes = n_nodes
        self.edges: List[List[Edge]] = [[] for _ in range(n_nodes)]

    def _check_node(self, node_id):
        if not 0 <= node_id < self.n_nodes:
            raise ValueError(f"Node {node_id} is not in the graph (0..{self.n_nodes - 1})")

    def add_edge(self, from_node_id: int, to_node_id: int, weight: float) -> Edge:
        self._check_node(from_node_id)
        self._check_node(to_node_id)
        if weight < 0:
            raise ValueError(f"Edge weight must be non-negative, got {weight}")
        edge = Edge(from_node_id, to_node_id, weight)
        self.edges[from_node_id].append(edge)
        return edge


class Distance:
    def __init__(self, node, distance_=INF):
        self.node = node
        self.distance = distance_

    def __repr__(self):
        return f"Distance(node={self.node}, distance={self.distance})"


def _node_of(d: Distance):
    return d.node


def compare_distance(a: Distance, b: Distance) -> bool:
    # ties on distance go to the lower node id
    if a.distance == b.distance:
        return a.node < b.node
    return a.distance < b.distance


def dijkstra(graph: Graph, source: int) -> Tuple[List[float], List[int]]:
    """Single-source shortest distances and predecessor nodes.

    Unreachable nodes keep distance ``INF`` and predecessor ``-1``.
    """
    graph._check_node(source)
    dist = [INF] * graph.n_nodes
    prev = [-1] * graph.n_nodes
    done = [False] * graph.n_nodes

    frontier = Heap(compare_distance, max(graph.n_nodes, 1))
    dist[source] = 0
    frontier.push(Distance(source, 0))

    while not frontier.is_empty():
        d = frontier.pop()
        best_node_id = d.node
        done[best_node_id] = True

        for edge in graph.edges[best_node_id]:
            to_node_id = edge.to_node_id
            if done[to_node_id]:
                continue
            tmp_dist = d.distance + edge.weight
            if tmp_dist >= dist[to_node_id]:
                continue

            dist[to_node_id] = tmp_dist
            prev[to_node_id] = best_node_id
            # decrease-key when the node is already queued
            frontier.push_or_modify(Distance(to_node_id, tmp_dist), is_key_equal(_node_of, to_node_id))

    logger.debug("Shortest paths from node %d reach %d of %d nodes", source,
                 sum(1 for x in dist if x != INF), graph.n_nodes)
    return dist, prev


def shortest_path(graph: Graph, source: int, target: int) -> Optional[List[int]]:
    graph._check_node(target)
    dist, prev = dijkstra(graph, source)
    if dist[target] == INF:
        return None

    path = [target]
    curr = target
    while curr != source:
        curr = prev[curr]
        path.append(curr)
    path.reverse()
    return path
