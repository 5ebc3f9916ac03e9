from .models import (
    EdgeModel,
    GraphModel,
    JgfDocument,
    MultiGraphDocument,
    NodeModel,
    SingleGraphDocument,
)
from .validator import SchemaValidator, ValidationResult, parse_graph

__all__ = [
    'EdgeModel',
    'GraphModel',
    'JgfDocument',
    'MultiGraphDocument',
    'NodeModel',
    'SingleGraphDocument',
    'SchemaValidator',
    'ValidationResult',
    'parse_graph',
]
