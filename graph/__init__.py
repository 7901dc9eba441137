"""
Graph algorithms producing step sequences.

**Model** (types.py)
    - GraphNode, GraphEdge: node ids with labels, undirected (weighted) edges
    - Graph: validated immutable node + edge lists, neighbor lookup

**Traversal** (traversal.py)
    - run_bfs(nodes, edges, start_id)
    - run_dfs(nodes, edges, start_id)

**Minimum spanning trees** (mst.py)
    - run_prim(nodes, edges, selection="scan" | "heap")
    - run_kruskal(nodes, edges)
    - MSTResult: accepted edges, total weight, spanning flag
"""

from .mst import MSTResult, run_kruskal, run_prim
from .traversal import run_bfs, run_dfs
from .types import Graph, GraphEdge, GraphNode

__all__ = [
    # Model
    "GraphNode",
    "GraphEdge",
    "Graph",
    # Traversal
    "run_bfs",
    "run_dfs",
    # Minimum spanning trees
    "MSTResult",
    "run_prim",
    "run_kruskal",
]
