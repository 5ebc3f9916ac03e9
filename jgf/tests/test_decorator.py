import pytest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from jgf.errors import InvalidArgumentError, ValidationError
from jgf.graph.container import JgfContainer
from jgf.graph.decorator import JgfJsonDecorator
from jgf.graph.graph import JgfGraph


class TestJsonDecoratorToJson:
    """Test transforming graphs and containers to JSON."""
    
    def test_graph_to_json(self, nba_graph: JgfGraph):
        """Test that a lone graph gets the single-graph envelope."""
        graph_json = JgfJsonDecorator.to_json(nba_graph)
        
        assert list(graph_json.keys()) == ['graph']
        assert graph_json['graph'] == nba_graph.json
    
    def test_single_graph_container_to_json(self):
        container = JgfContainer(single_graph=True)
        container.graph.add_node('a', 'A')
        
        assert JgfJsonDecorator.to_json(container) == {'graph': container.graph.json}
    
    def test_multi_graph_container_to_json(self):
        """Test that a multi-graph container gets the multi-graph envelope."""
        container = JgfContainer(single_graph=False)
        container.add_empty_graph(type='car').add_node('nissan', 'Nissan')
        container.add_empty_graph(type='bus')
        
        container_json = JgfJsonDecorator.to_json(container)
        
        assert list(container_json.keys()) == ['graphs']
        assert [graph['type'] for graph in container_json['graphs']] == ['car', 'bus']
        assert container_json['graphs'][0]['nodes'] == [{'id': 'nissan', 'label': 'Nissan'}]
    
    def test_empty_multi_graph_container_to_json(self):
        assert JgfJsonDecorator.to_json(JgfContainer(single_graph=False)) == {'graphs': []}
    
    def test_nulls_are_removed(self):
        """Test that no explicit null reaches the output."""
        graph = JgfGraph(type='car', label=None, metadata={'owner': None, 'tags': ['a', None]})
        graph.add_node('a', None, {'nested': {'value': None, 'kept': 1}})
        graph.add_edge('a', 'a', relation=None, metadata={'weight': None})
        
        graph_json = JgfJsonDecorator.to_json(graph)['graph']
        
        assert 'label' not in graph_json
        assert graph_json['metadata'] == {'tags': ['a']}
        assert graph_json['nodes'] == [{'id': 'a', 'metadata': {'nested': {'kept': 1}}}]
        assert graph_json['edges'] == [{'source': 'a', 'target': 'a', 'metadata': {}}]
    
    def test_to_json_does_not_mutate_input(self, nba_graph: JgfGraph):
        before = nba_graph.json
        
        JgfJsonDecorator.to_json(nba_graph)['graph']['nodes'].clear()
        
        assert nba_graph.json == before
    
    @pytest.mark.parametrize("value", [None, {}, [], "graph", object()])
    def test_rejects_non_graph_values(self, value):
        """Test that only graphs and containers can be decorated."""
        with pytest.raises(InvalidArgumentError, match="can only decorate graphs"):
            JgfJsonDecorator.to_json(value)


class TestJsonDecoratorFromJson:
    """Test building graphs and containers from JSON."""
    
    def test_single_graph_document(self, nba_graph: JgfGraph):
        """Test that a single-graph document gives a graph."""
        graph = JgfJsonDecorator.from_json(JgfJsonDecorator.to_json(nba_graph))
        
        assert isinstance(graph, JgfGraph)
        assert graph.json == nba_graph.json
    
    def test_multi_graph_document(self):
        """Test that a multi-graph document gives a multi-graph container."""
        container = JgfJsonDecorator.from_json({
            'graphs': [
                {'type': 'car', 'nodes': [{'id': 'nissan'}]},
                {'type': 'bus', 'directed': False},
            ]
        })
        
        assert isinstance(container, JgfContainer)
        assert container.is_multi_graph
        assert [graph.type for graph in container.graphs] == ['car', 'bus']
        assert container.graphs[1].directed is False
    
    def test_invalid_document(self):
        with pytest.raises(ValidationError):
            JgfJsonDecorator.from_json({'nodes': []})
