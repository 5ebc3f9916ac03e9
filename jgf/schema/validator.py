from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .models import GraphModel, JgfDocument, MultiGraphDocument, SingleGraphDocument
from ..errors import ValidationError
from ..utils.logger import app_logger


@dataclass
class ValidationResult:
    """Outcome of validating a JSON value against the JGF schema."""
    valid: bool
    errors: List[Dict[str, Any]] = field(default_factory=list)
    document: Optional[Union[SingleGraphDocument, MultiGraphDocument]] = None


def _error_details(error: PydanticValidationError) -> List[Dict[str, Any]]:
    return [
        {"loc": list(detail["loc"]), "type": detail["type"], "msg": detail["msg"]}
        for detail in error.errors(include_url=False)
    ]


class SchemaValidator:
    """Validates JSON values against the JGF schema.
    
    The compiled validator and the exported JSON schema are built on first
    use and cached on the instance.
    """
    
    def __init__(self):
        self.logger = app_logger.bind(component="jgf_schema")
        self._adapter: Optional[TypeAdapter] = None
        self._schema: Optional[Dict[str, Any]] = None
    
    @property
    def adapter(self) -> TypeAdapter:
        if self._adapter is None:
            self._adapter = TypeAdapter(JgfDocument)
            self.logger.debug("Compiled JGF document schema")
        return self._adapter
    
    @property
    def schema(self) -> Dict[str, Any]:
        """The JGF schema as a JSON Schema document."""
        if self._schema is None:
            self._schema = self.adapter.json_schema()
        return self._schema
    
    def validate(self, json_value: Any) -> ValidationResult:
        """Validate a parsed JSON value; never raises for invalid input."""
        try:
            document = self.adapter.validate_python(json_value)
        except PydanticValidationError as e:
            return ValidationResult(valid=False, errors=_error_details(e))
        return ValidationResult(valid=True, document=document)
    
    def parse(self, json_value: Any, source: Optional[str] = None) -> Union[SingleGraphDocument, MultiGraphDocument]:
        """Validate a parsed JSON value and return the typed document.
        
        Raises:
            ValidationError: if the value doesn't conform to the schema.
        """
        result = self.validate(json_value)
        if not result.valid:
            raise ValidationError(result.errors, source=source)
        return result.document


def parse_graph(graph_json: Union[GraphModel, Mapping[str, Any]]) -> GraphModel:
    """Validate a single graph object (the value under a ``graph`` key)."""
    if isinstance(graph_json, GraphModel):
        return graph_json
    try:
        return GraphModel.model_validate(graph_json)
    except PydanticValidationError as e:
        raise ValidationError(_error_details(e)) from e
