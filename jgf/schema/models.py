"""
Pydantic models describing the JGF wire format.

These models are the schema: a document is valid JGF when it validates
against ``JgfDocument``. Every model forbids unknown keys, and leaf values
use strict types so that e.g. ``"directed": "yes"`` is rejected instead of
being coerced.
"""
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, StrictBool, StrictStr, Tag


class NodeModel(BaseModel):
    """A node entry of a graph's ``nodes`` array."""
    model_config = ConfigDict(extra="forbid")
    
    id: StrictStr
    label: Optional[StrictStr] = None
    metadata: Optional[Dict[str, Any]] = None


class EdgeModel(BaseModel):
    """An edge entry of a graph's ``edges`` array."""
    model_config = ConfigDict(extra="forbid")
    
    source: StrictStr
    target: StrictStr
    relation: Optional[StrictStr] = None
    label: Optional[StrictStr] = None
    metadata: Optional[Dict[str, Any]] = None
    directed: Optional[StrictBool] = None


class GraphModel(BaseModel):
    """A single graph object."""
    model_config = ConfigDict(extra="forbid")
    
    type: Optional[StrictStr] = None
    label: Optional[StrictStr] = None
    directed: StrictBool = True
    metadata: Optional[Dict[str, Any]] = None
    nodes: List[NodeModel] = Field(default_factory=list)
    edges: List[EdgeModel] = Field(default_factory=list)
    
    @property
    def is_partial(self) -> bool:
        return bool(self.metadata and self.metadata.get("isPartial"))


class SingleGraphDocument(BaseModel):
    """``{"graph": {...}}``"""
    model_config = ConfigDict(extra="forbid")
    
    graph: GraphModel


class MultiGraphDocument(BaseModel):
    """``{"graphs": [{...}, ...]}``"""
    model_config = ConfigDict(extra="forbid")
    
    graphs: List[GraphModel]


def _document_kind(value: Any) -> Optional[str]:
    """Pick the document variant from the envelope key that is present."""
    if isinstance(value, dict):
        if "graph" in value:
            return "single"
        if "graphs" in value:
            return "multi"
        return None
    if isinstance(value, SingleGraphDocument):
        return "single"
    if isinstance(value, MultiGraphDocument):
        return "multi"
    return None


JgfDocument = Annotated[
    Union[
        Annotated[SingleGraphDocument, Tag("single")],
        Annotated[MultiGraphDocument, Tag("multi")],
    ],
    Discriminator(
        _document_kind,
        custom_error_type="invalid_jgf_document",
        custom_error_message="Document must contain either a 'graph' or a 'graphs' key",
    ),
]
