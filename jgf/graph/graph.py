from typing import List, Dict, Any, Iterable, Mapping, Optional, Union
import copy

from ..config import settings
from ..errors import DuplicateIdError, InvalidArgumentError, NotFoundError
from ..schema.models import GraphModel
from ..schema.validator import parse_graph
from ..types import JgfNode, JgfEdge, GraphDimensions
from ..utils.json_utils import remove_null_values
from ..utils.logger import app_logger


def _field(item: Any, key: str) -> Any:
    """Read a field from either a wire mapping or a node/edge object."""
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, key, None)


class JgfGraph:
    """A single JGF graph, usually owned by a JgfContainer.
    
    Nodes are kept in an id-keyed dict (insertion ordered) and edges in a
    list. Every read accessor returns copies, so callers can't change the
    graph except through its mutators.
    """
    
    def __init__(self, type: str = "", label: str = "", directed: bool = True,
                 metadata: Optional[Dict[str, Any]] = None, *,
                 cascade_node_removal: Optional[bool] = None):
        self.logger = app_logger.bind(component="jgf_graph")
        self._nodes: Dict[str, JgfNode] = {}
        self._edges: List[JgfEdge] = []
        
        self.type = type
        self.label = label
        self.directed = directed
        self.metadata = metadata
        self.is_partial = False
        
        if cascade_node_removal is None:
            cascade_node_removal = settings.cascade_node_removal
        self.cascade_node_removal = cascade_node_removal
    
    def __repr__(self) -> str:
        return (f"JgfGraph(type={self.type!r}, label={self.label!r}, "
                f"nodes={len(self._nodes)}, edges={len(self._edges)})")
    
    def load_from_json(self, graph_json: Union[GraphModel, Mapping[str, Any]]):
        """Replace the graph's content with a JGF graph object.
        
        Nodes are all added before any edge, so edges may reference nodes
        that appear later in the ``nodes`` array. A ``metadata.isPartial``
        marker turns the graph partial instead of being kept as metadata.
        
        Raises:
            ValidationError: if ``graph_json`` isn't a valid JGF graph object.
        """
        model = parse_graph(graph_json)
        
        self.type = model.type
        self.label = model.label
        if settings.legacy_force_directed:
            self.directed = True
        else:
            self.directed = model.directed
        
        self.is_partial = model.is_partial
        metadata = copy.deepcopy(model.metadata)
        if metadata is not None:
            metadata.pop("isPartial", None)
        self.metadata = metadata or None
        
        self._nodes = {}
        self._edges = []
        self.add_nodes(model.nodes)
        self.add_edges(model.edges)
        self.logger.debug(f"Loaded graph {self.label!r}: {self.graph_dimensions.to_dict()}")
    
    @property
    def nodes(self) -> List[JgfNode]:
        """All nodes, in insertion order."""
        return copy.deepcopy(list(self._nodes.values()))
    
    @property
    def edges(self) -> List[JgfEdge]:
        """All edges, in insertion order."""
        return copy.deepcopy(self._edges)
    
    @property
    def json(self) -> Dict[str, Any]:
        """The graph as a JGF graph object."""
        graph_json: Dict[str, Any] = {}
        if self.type is not None:
            graph_json["type"] = self.type
        if self.label is not None:
            graph_json["label"] = self.label
        graph_json["directed"] = self.directed
        
        metadata = dict(self.metadata or {})
        if self.is_partial:
            metadata["isPartial"] = True
        metadata = remove_null_values(metadata)
        if metadata:
            graph_json["metadata"] = metadata
        
        graph_json["nodes"] = [remove_null_values(node.to_dict()) for node in self._nodes.values()]
        graph_json["edges"] = [remove_null_values(edge.to_dict()) for edge in self._edges]
        
        return copy.deepcopy(graph_json)
    
    @property
    def graph_dimensions(self) -> GraphDimensions:
        return GraphDimensions(nodes=len(self._nodes), edges=len(self._edges))
    
    def add_node(self, id: str, label: Optional[str] = None, metadata: Optional[Dict[str, Any]] = None):
        """Add a new node.
        
        Raises:
            InvalidArgumentError: if id isn't a non-empty string.
            DuplicateIdError: if a node with this id already exists.
        """
        if not id or not isinstance(id, str):
            raise InvalidArgumentError(f"add_node failed: id parameter is not valid. id = {id!r}")
        
        if id in self._nodes:
            raise DuplicateIdError(id)
        
        self._nodes[id] = JgfNode(id=id, label=label, metadata=copy.deepcopy(metadata))
    
    def add_nodes(self, nodes: Optional[Iterable[Any]]):
        """Add multiple nodes, in order.
        
        Accepts JGF node mappings or node objects. Nodes added before a
        failing one are kept.
        """
        if not nodes:
            return
        for node in nodes:
            self.add_node(_field(node, "id"), _field(node, "label"), _field(node, "metadata"))
    
    def update_node(self, id: str, label: Optional[str] = None, metadata: Optional[Dict[str, Any]] = None):
        """Update the label and/or metadata of an existing node."""
        node = self._get_node_or_raise(id, f"Can't update node. A node doesn't exist with id = {id}")
        
        if label is not None:
            node.label = label
        
        if metadata is not None:
            node.metadata = copy.deepcopy(metadata)
    
    def remove_node(self, id: str):
        """Remove an existing node.
        
        Incident edges are left in place unless the graph was created with
        ``cascade_node_removal=True``.
        """
        self._get_node_or_raise(id)
        del self._nodes[id]
        
        if self.cascade_node_removal:
            before = len(self._edges)
            self._edges = [edge for edge in self._edges if edge.source != id and edge.target != id]
            self.logger.debug(f"Removed node {id!r} and {before - len(self._edges)} incident edges")
    
    def get_node(self, id: str) -> JgfNode:
        """Lookup a node by id."""
        return copy.deepcopy(self._get_node_or_raise(id))
    
    def has_node(self, id: str) -> bool:
        return id in self._nodes
    
    def add_edge(self, source: str, target: str, relation: Optional[str] = None, label: Optional[str] = None,
                 metadata: Optional[Dict[str, Any]] = None, directed: Optional[bool] = None):
        """Add an edge between a source node and a target node.
        
        Args:
            source: Source node id
            target: Target node id
            relation: Edge relation (AKA 'relationship type')
            label: Edge label (the display name of the edge)
            metadata: Custom edge metadata
            directed: True for a directed edge, False for undirected; unset
                means the graph's directedness applies
        
        Raises:
            InvalidArgumentError: if source or target is empty.
            NotFoundError: if the graph isn't partial and an endpoint is unknown.
        """
        if not source:
            raise InvalidArgumentError("add_edge failed: source parameter is not valid")
        
        if not target:
            raise InvalidArgumentError("add_edge failed: target parameter is not valid")
        
        if not self.is_partial:
            if source not in self._nodes:
                raise NotFoundError(source, f"add_edge failed: source node isn't found in nodes. source = {source}")
            
            if target not in self._nodes:
                raise NotFoundError(target, f"add_edge failed: target node isn't found in nodes. target = {target}")
        
        self._edges.append(JgfEdge(
            source=source,
            target=target,
            relation=relation,
            label=label,
            metadata=copy.deepcopy(metadata),
            directed=directed,
        ))
    
    def add_edges(self, edges: Optional[Iterable[Any]]):
        """Add multiple edges, in order."""
        if not edges:
            return
        for edge in edges:
            self.add_edge(
                _field(edge, "source"),
                _field(edge, "target"),
                _field(edge, "relation"),
                _field(edge, "label"),
                _field(edge, "metadata"),
                _field(edge, "directed"),
            )
    
    def remove_edges(self, source: str, target: str, relation: Optional[str] = None):
        """Remove every edge from source to target.
        
        With a relation, only edges of that relation are removed.
        """
        self._edges = [edge for edge in self._edges if not edge.matches(source, target, relation)]
    
    def get_edges(self, source: str, target: str, relation: Optional[str] = None) -> List[JgfEdge]:
        """Get the edges from source to target, optionally of one relation."""
        if not self.is_partial:
            self._get_node_or_raise(source)
            self._get_node_or_raise(target)
        
        return copy.deepcopy([edge for edge in self._edges if edge.matches(source, target, relation)])
    
    def _get_node_or_raise(self, id: str, message: Optional[str] = None) -> JgfNode:
        if id not in self._nodes:
            raise NotFoundError(id, message)
        return self._nodes[id]
