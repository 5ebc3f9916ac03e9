"""
jgf: in-memory JSON Graph Format graphs and containers.
"""

from .errors import (
    JgfError,
    DuplicateIdError,
    NotFoundError,
    InvalidArgumentError,
    ModeError,
    ValidationError,
)
from .types import JgfNode, JgfEdge, GraphDimensions
from .graph import JgfGraph, JgfContainer, JgfJsonDecorator
from .schema import SchemaValidator, ValidationResult
from .storage import JsonFileStore
from .utils.logger import setup_logging

__version__ = "0.1.0"

__all__ = [
    'JgfError',
    'DuplicateIdError',
    'NotFoundError',
    'InvalidArgumentError',
    'ModeError',
    'ValidationError',
    'JgfNode',
    'JgfEdge',
    'GraphDimensions',
    'JgfGraph',
    'JgfContainer',
    'JgfJsonDecorator',
    'SchemaValidator',
    'ValidationResult',
    'JsonFileStore',
    'setup_logging',
]
