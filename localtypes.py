"""
Type definitions shared across the step-generation core.

This module contains the aliases used by every engine, organized by their
primary use cases: identities, edges and step metrics.
"""

from collections.abc import Mapping
from typing import TypeVar

# Basic type variables for generic containers
T = TypeVar("T")


# Identities
type NodeId = str | int  # Graph nodes, linked nodes and union-find elements

# Edges are keyed by their endpoints in the order the caller supplied them.
# Parallel edges are rejected, so this pair identifies an undirected edge.
type EdgeKey = tuple[NodeId, NodeId]


# Step payloads
type Metric = int | float | str | tuple | None
type Metrics = Mapping[str, Metric]
