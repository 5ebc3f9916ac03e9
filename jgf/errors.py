from typing import Any, Dict, List, Optional


class JgfError(Exception):
    """Base class for all JGF errors."""


class DuplicateIdError(JgfError, ValueError):
    """A node with the same id already exists in the graph."""
    
    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"A node already exists with id = {node_id}")


class NotFoundError(JgfError, LookupError):
    """A referenced node id doesn't exist in the graph."""
    
    def __init__(self, node_id: str, message: Optional[str] = None):
        self.node_id = node_id
        super().__init__(message or f"A node doesn't exist with id = {node_id}")


class InvalidArgumentError(JgfError, ValueError):
    """A required argument is missing or of the wrong kind."""


class ModeError(JgfError, RuntimeError):
    """A single-graph accessor was used in multi-graph mode, or vice versa."""


class ValidationError(JgfError, ValueError):
    """A JSON document doesn't conform to the JGF schema."""
    
    def __init__(self, errors: List[Dict[str, Any]], source: Optional[str] = None):
        self.errors = errors
        self.source = source
        where = f" ({source})" if source else ""
        super().__init__(f"Invalid JGF format{where}. Validation Errors: {errors}")
