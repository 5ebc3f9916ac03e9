"""
Graph module: JGF graphs, containers and their JSON projection.
"""

from .graph import JgfGraph
from .container import JgfContainer
from .decorator import JgfJsonDecorator

__all__ = [
    'JgfGraph',
    'JgfContainer',
    'JgfJsonDecorator'
]
