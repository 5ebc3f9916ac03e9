from typing import Dict, Any, Optional, NamedTuple
from dataclasses import dataclass


@dataclass
class JgfNode:
    """Represents a node in a JGF graph."""
    id: str
    label: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire representation, omitting absent fields."""
        data: Dict[str, Any] = {"id": self.id}
        if self.label is not None:
            data["label"] = self.label
        if self.metadata is not None:
            data["metadata"] = self.metadata
        return data

@dataclass
class JgfEdge:
    """Represents an edge in a JGF graph.
    
    ``directed`` overrides the graph-level directedness when set.
    """
    source: str
    target: str
    relation: Optional[str] = None
    label: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    directed: Optional[bool] = None
    
    def matches(self, source: str, target: str, relation: Optional[str] = None) -> bool:
        """Check whether this edge connects source to target, with an optional relation filter.
        
        An empty relation matches edges of any relation.
        """
        return (self.source == source and
                self.target == target and
                (not relation or self.relation == relation))
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire representation, omitting absent fields."""
        data: Dict[str, Any] = {"source": self.source, "target": self.target}
        for key in ("relation", "label", "metadata", "directed"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


class GraphDimensions(NamedTuple):
    """Node and edge counts of a graph."""
    nodes: int
    edges: int
    
    def to_dict(self) -> Dict[str, int]:
        return {"nodes": self.nodes, "edges": self.edges}
