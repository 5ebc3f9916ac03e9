from typing import Any, Dict, List, Optional, Union

from .container import JgfContainer
from .graph import JgfGraph
from ..errors import InvalidArgumentError
from ..schema.models import SingleGraphDocument
from ..schema.validator import SchemaValidator
from ..utils.json_utils import remove_null_values


class JgfJsonDecorator:
    """Transforms graphs or containers to JGF JSON and back.
    
    Called a decorator for historical reasons; it's a plain converter, not
    the GoF pattern.
    """
    
    @staticmethod
    def _guard_against_invalid_graph_object(graph: Any):
        if not isinstance(graph, (JgfGraph, JgfContainer)):
            raise InvalidArgumentError("JgfJsonDecorator can only decorate graphs or containers.")
    
    @classmethod
    def to_json(cls, graph: Union[JgfGraph, JgfContainer]) -> Dict[str, Any]:
        """Transform a graph or a container to a JGF document.
        
        A lone graph and a single-graph container produce ``{"graph": ...}``;
        a multi-graph container produces ``{"graphs": [...]}``.
        """
        cls._guard_against_invalid_graph_object(graph)
        
        if isinstance(graph, JgfGraph):
            is_single_graph = True
        else:
            is_single_graph = graph.is_single_graph
        
        all_graphs_json = [cls._graph_to_json(single_graph) for single_graph in cls._normalize_to_graph_list(graph)]
        
        if is_single_graph:
            return {"graph": all_graphs_json[0]}
        
        return {"graphs": all_graphs_json}
    
    @staticmethod
    def from_json(json_value: Any, validator: Optional[SchemaValidator] = None) -> Union[JgfGraph, JgfContainer]:
        """Build a graph from a single-graph document, or a multi-graph
        container from a multi-graph document.
        
        Raises:
            ValidationError: if ``json_value`` isn't a valid JGF document.
        """
        validator = validator or SchemaValidator()
        document = validator.parse(json_value)
        
        if isinstance(document, SingleGraphDocument):
            graph = JgfGraph()
            graph.load_from_json(document.graph)
            return graph
        
        container = JgfContainer(single_graph=False, validator=validator)
        for graph_model in document.graphs:
            container.add_empty_graph().load_from_json(graph_model)
        return container
    
    @staticmethod
    def _normalize_to_graph_list(graph: Union[JgfGraph, JgfContainer]) -> List[JgfGraph]:
        if isinstance(graph, JgfGraph):
            return [graph]
        if graph.is_single_graph:
            return [graph.graph]
        return list(graph.graphs)
    
    @staticmethod
    def _graph_to_json(graph: JgfGraph) -> Dict[str, Any]:
        return remove_null_values(graph.json)
