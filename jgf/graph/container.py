from typing import List, Dict, Any, Optional
import copy

from .graph import JgfGraph
from ..config import settings
from ..errors import ModeError, ValidationError
from ..schema.models import GraphModel, SingleGraphDocument
from ..schema.validator import SchemaValidator
from ..storage.file_store import JsonFileStore
from ..utils.logger import app_logger


class JgfContainer:
    """Container of one or more JGF graphs.
    
    In single-graph mode the container always holds exactly one graph and is
    serialized under a ``graph`` key; in multi-graph mode it holds any number
    of graphs, serialized under ``graphs``.
    """
    
    def __init__(self, single_graph: bool = True, *,
                 validator: Optional[SchemaValidator] = None,
                 file_store: Optional[JsonFileStore] = None):
        self.logger = app_logger.bind(component="jgf_container")
        self.validator = validator or SchemaValidator()
        self.file_store = file_store or JsonFileStore()
        
        self._graphs: List[JgfGraph] = []
        self.is_single_graph = single_graph
        
        if single_graph:
            self.add_empty_graph()
    
    def __repr__(self) -> str:
        mode = "single" if self.is_single_graph else "multi"
        return f"JgfContainer(mode={mode!r}, graphs={len(self._graphs)})"
    
    @property
    def graphs(self) -> List[JgfGraph]:
        """All graphs, in multi-graph mode."""
        if self.is_single_graph:
            raise ModeError("Cannot access graphs in single-graph mode")
        
        return self._graphs
    
    @property
    def graph(self) -> JgfGraph:
        """The graph, in single-graph mode."""
        if not self.is_single_graph:
            raise ModeError("Cannot access graph in multi-graph mode")
        
        return self._graphs[0]
    
    @property
    def is_multi_graph(self) -> bool:
        return not self.is_single_graph
    
    @property
    def json(self) -> Dict[str, Any]:
        """The container as a JGF document."""
        from .decorator import JgfJsonDecorator
        
        return JgfJsonDecorator.to_json(self)
    
    def add_empty_graph(self, type: str = "", label: str = "") -> JgfGraph:
        """Append an empty graph and return it."""
        graph = JgfGraph(type=type, label=label)
        self._graphs.append(graph)
        
        return graph
    
    async def load_from_file(self, filename: str):
        """Load a JGF file, replacing every graph currently held.
        
        The container switches to single- or multi-graph mode according to
        the file's top-level key. On failure the container is left unchanged.
        
        Raises:
            ValidationError: if the file doesn't conform to the JGF schema.
        """
        try:
            json_value = await self.file_store.read_json(filename)
            document = self.validator.parse(json_value, source=filename)
            
            is_single_graph = isinstance(document, SingleGraphDocument)
            self.logger.info(f"load_from_file {filename}, is_single_graph: {is_single_graph}")
            
            if is_single_graph:
                graph_models = [document.graph]
            else:
                graph_models = document.graphs
            graphs = [self._graph_from_model(model) for model in graph_models]
        except Exception as e:
            self.logger.error(f"Failed loading JGF from file {filename}: {e}")
            raise
        
        self.is_single_graph = is_single_graph
        self._graphs = graphs
    
    async def load_from_partial_files(self, filename_pattern: str, type: str = "", label: str = ""):
        """Merge partial graph files into a single graph.
        
        Every file matching ``filename_pattern`` must hold a single graph.
        Nodes from all files are added before any edge, so an edge may point
        at a node defined in another file. The first file's ``directed`` and
        ``metadata`` are adopted by the merged graph, minus the partial marker.
        
        A failing file aborts the merge; nodes merged from earlier files stay
        in the graph.
        
        Raises:
            ValidationError: if a file isn't a valid single-graph JGF document.
            DuplicateIdError: if two files declare the same node id.
            NotFoundError: if an edge references a node no file declares.
        """
        self.is_single_graph = True
        self._graphs = []
        main_graph = self.add_empty_graph(type=type, label=label)
        
        filenames = self.file_store.match_files(filename_pattern)
        if not filenames:
            self.logger.warning(f"No partial graph files match {filename_pattern}")
        
        edge_groups = []
        try:
            for index, filename in enumerate(filenames):
                fragment = await self._load_fragment(filename)
                
                if index == 0:
                    main_graph.directed = fragment.directed
                    metadata = copy.deepcopy(fragment.metadata)
                    if metadata is not None:
                        metadata.pop("isPartial", None)
                    main_graph.metadata = metadata or None
                
                main_graph.add_nodes(fragment.nodes)
                edge_groups.append(fragment.edges)
                self.logger.debug(f"Merged {len(fragment.nodes)} nodes from {filename}")
            
            for edges in edge_groups:
                main_graph.add_edges(edges)
        except Exception as e:
            self.logger.error(f"Failed merging partial files {filename_pattern}: {e}")
            raise
        
        self.logger.info(f"Merged {len(filenames)} partial files into graph {label!r}: "
                         f"{main_graph.graph_dimensions.to_dict()}")
    
    async def save_to_file(self, filename: str, pretty_print: bool = False):
        """Save the container as a JGF file."""
        try:
            container_json = self.json
            indent = settings.pretty_print_spaces if pretty_print else None
            await self.file_store.write_json(filename, container_json, indent=indent)
        except Exception as e:
            self.logger.error(f"Failed saving JGF to file {filename}, error: {e}")
            raise
        
        self.logger.info(f"Saved JGF to file {filename}")
    
    async def _load_fragment(self, filename: str) -> GraphModel:
        json_value = await self.file_store.read_json(filename)
        document = self.validator.parse(json_value, source=filename)
        
        if not isinstance(document, SingleGraphDocument):
            raise ValidationError(
                [{"loc": ["graphs"], "type": "partial_multi_graph",
                  "msg": "Partial graph files must contain a single graph"}],
                source=filename,
            )
        
        return document.graph
    
    def _graph_from_model(self, model: GraphModel) -> JgfGraph:
        graph = JgfGraph()
        graph.load_from_json(model)
        return graph
