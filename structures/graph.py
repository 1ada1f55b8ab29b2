"""
graph.py — Graph State
=======================
Nodes, edges and the two graph-level toggles (directed / weighted).

Design decisions:
  - Edges hold node-id strings, NOT node references, so the whole
    state deep-copies and serialises without cycles.
  - Undirected edges are stored ONCE.  Adjacency is derived from the
    edge list on every query instead of being cached in a side index,
    so the two can never drift apart.
  - Edges are addressed by their index in `edges`; graph steps carry
    that index.
  - Directedness is a graph-level flag only; toggling it re-interprets
    the existing edge list.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
@dataclass
class GraphNode:
    """
    Attributes:
        id          : Unique identifier ("node1", "node2", …).
        label       : Human-readable name shown on the canvas.
        x, y        : Canvas coordinates.
        highlighted : Currently active in a running algorithm.
        visited     : Reached by the running traversal.
        distance    : Dijkstra tentative distance (None = not computed).
        predecessor : Dijkstra predecessor node id.
    """

    id:          str
    label:       str
    x:           float           = 0.0
    y:           float           = 0.0
    highlighted: bool            = False
    visited:     bool            = False
    distance:    Optional[float] = None
    predecessor: Optional[str]   = None

    def reset(self) -> None:
        """Wipe algorithm state back to defaults — called before every run."""
        self.highlighted = False
        self.visited     = False
        self.distance    = None
        self.predecessor = None

    def to_dict(self) -> dict:
        return {
            "id":          self.id,
            "label":       self.label,
            "x":           self.x,
            "y":           self.y,
            "highlighted": self.highlighted,
            "visited":     self.visited,
            # JSON has no infinity
            "distance":    None if self.distance is None or math.isinf(self.distance) else self.distance,
            "unreached":   self.distance is not None and math.isinf(self.distance),
            "predecessor": self.predecessor,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GraphNode":
        distance = data.get("distance")
        if data.get("unreached"):
            distance = math.inf
        return cls(
            id=data["id"],
            label=data.get("label", data["id"]),
            x=data.get("x", 0.0),
            y=data.get("y", 0.0),
            highlighted=data.get("highlighted", False),
            visited=data.get("visited", False),
            distance=distance,
            predecessor=data.get("predecessor"),
        )


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------
@dataclass
class GraphEdge:
    source:      str
    target:      str
    weight:      float = 1
    highlighted: bool  = False

    def connects(self, a: str, b: str, directed: bool) -> bool:
        """True if this edge links a → b (either way when undirected)."""
        if self.source == a and self.target == b:
            return True
        return not directed and self.source == b and self.target == a

    def to_dict(self) -> dict:
        return {"source": self.source, "target": self.target, "weight": self.weight, "highlighted": self.highlighted}

    @classmethod
    def from_dict(cls, data: dict) -> "GraphEdge":
        return cls(
            source=data["source"],
            target=data["target"],
            weight=data.get("weight", 1),
            highlighted=data.get("highlighted", False),
        )


# ---------------------------------------------------------------------------
# Graph
# ---------------------------------------------------------------------------
@dataclass
class GraphState:
    nodes:    List[GraphNode] = field(default_factory=list)
    edges:    List[GraphEdge] = field(default_factory=list)
    directed: bool            = False
    weighted: bool            = False
    next_id:  int             = 1

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def get_node(self, node_id: str) -> Optional[GraphNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def create_node(self, label: str, x: float = 0.0, y: float = 0.0) -> GraphNode:
        node = GraphNode(id=f"node{self.next_id}", label=label, x=x, y=y)
        self.next_id += 1
        self.nodes.append(node)
        return node

    def remove_node(self, node_id: str) -> None:
        """Drop the node and every edge touching it."""
        self.nodes = [n for n in self.nodes if n.id != node_id]
        self.edges = [e for e in self.edges if e.source != node_id and e.target != node_id]

    def move_node(self, node_id: str, x: float, y: float) -> None:
        node = self.get_node(node_id)
        if node is not None:
            node.x, node.y = x, y

    def node_ids(self) -> List[str]:
        return [n.id for n in self.nodes]

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def has_edge(self, source: str, target: str) -> bool:
        return any(e.source == source and e.target == target for e in self.edges)

    def create_edge(self, source: str, target: str, weight: float = 1) -> Optional[GraphEdge]:
        """Add source → target.  Returns None if that exact edge exists."""
        if self.has_edge(source, target):
            return None
        edge = GraphEdge(source=source, target=target, weight=weight)
        self.edges.append(edge)
        return edge

    def remove_edge(self, source: str, target: str) -> None:
        """Drop source → target (either direction when undirected)."""
        self.edges = [e for e in self.edges if not e.connects(source, target, self.directed)]

    def edge_index_between(self, a: str, b: str) -> Optional[int]:
        """Index of the first edge a → b (direction-aware)."""
        for idx, edge in enumerate(self.edges):
            if edge.connects(a, b, self.directed):
                return idx
        return None

    # ==================================================================
    # ADJACENCY (derived)
    # ==================================================================
    def neighbours(self, node_id: str) -> List[Tuple[str, int]]:
        """[(neighbour_id, edge_index)] in edge-list order."""
        result = []
        for idx, edge in enumerate(self.edges):
            if edge.source == node_id:
                result.append((edge.target, idx))
            elif not self.directed and edge.target == node_id:
                result.append((edge.source, idx))
        return result

    def has_negative_edges(self) -> bool:
        return any(e.weight < 0 for e in self.edges)

    # ==================================================================
    # RESET / TOGGLES
    # ==================================================================
    def reset_algo_state(self) -> None:
        for node in self.nodes:
            node.reset()
        for edge in self.edges:
            edge.highlighted = False

    def clear(self) -> None:
        self.nodes.clear()
        self.edges.clear()
        self.next_id = 1

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "directed": self.directed,
            "weighted": self.weighted,
            "next_id":  self.next_id,
            "nodes":    [n.to_dict() for n in self.nodes],
            "edges":    [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GraphState":
        nodes = [GraphNode.from_dict(n) for n in data.get("nodes", [])]
        return cls(
            nodes=nodes,
            edges=[GraphEdge.from_dict(e) for e in data.get("edges", [])],
            directed=data.get("directed", False),
            weighted=data.get("weighted", False),
            next_id=data.get("next_id", len(nodes) + 1),
        )

    def __repr__(self) -> str:
        return f"GraphState(nodes={len(self.nodes)}, edges={len(self.edges)}, directed={self.directed})"


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------
def sample_graph(directed: bool = False, weighted: bool = True) -> GraphState:
    """
    Six nodes A–F, seven edges:
        A–B(4)  A–D(2)  B–C(3)  B–E(5)  C–F(1)  D–E(6)  E–F(7)
    """
    g = GraphState(directed=directed, weighted=weighted)
    layout = [("A", 100, 100), ("B", 250, 50), ("C", 400, 100),
              ("D", 100, 250), ("E", 250, 300), ("F", 400, 250)]
    for label, x, y in layout:
        g.create_node(label, x, y)
    for src, tgt, w in [(1, 2, 4), (1, 4, 2), (2, 3, 3), (2, 5, 5), (3, 6, 1), (4, 5, 6), (5, 6, 7)]:
        g.create_edge(f"node{src}", f"node{tgt}", weight=w)
    return g
