"""
Global constants used throughout the project
"""
from linked.types import LinkedNode


DEFAULT_BUFFER_CAPACITY = 6

LOG_FORMAT = "%(levelname)s | %(message)s"

# Sample inputs, as shown by the visualizer pages

# Traversal page: A-B, A-C, B-C, C-D
SAMPLE_GRAPH_NODES = ("A", "B", "C", "D")
SAMPLE_GRAPH_EDGES = (("A", "B"), ("A", "C"), ("B", "C"), ("C", "D"))
SAMPLE_START_NODE = "A"

# MST pages share the nodes; each page lists the edges in its own order
SAMPLE_MST_NODES = ("A", "B", "C", "D", "E")
KRUSKAL_EDGES = (
    ("A", "B", 2),
    ("B", "D", 1),
    ("C", "E", 2),
    ("B", "C", 3),
    ("A", "D", 4),
    ("B", "E", 5),
    ("D", "E", 6),
)
PRIM_EDGES = (
    ("A", "B", 2),
    ("A", "D", 4),
    ("B", "C", 3),
    ("B", "D", 1),
    ("B", "E", 5),
    ("C", "E", 2),
    ("D", "E", 6),
)

# Cycle page: 1 -> 2 -> 3 -> 4 -> 5, with 5 -> 3 closing the cycle
CYCLIC_LIST = (
    LinkedNode("1", 1, "2"),
    LinkedNode("2", 2, "3"),
    LinkedNode("3", 3, "4"),
    LinkedNode("4", 4, "5"),
    LinkedNode("5", 5, "3"),
)
LINEAR_LIST = CYCLIC_LIST[:-1] + (LinkedNode("5", 5, None),)

SAMPLE_QUEUE_VALUES = (10, 20, 30)
SAMPLE_BUFFER_VALUES = (10, 20, 30)
