"""Tool definitions for the FuturePalz MCP dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, ClassVar, Dict

from pydantic import BaseModel, ConfigDict, ValidationError

ToolHandler = Callable[[Dict[str, Any]], Awaitable[Dict[str, Any]]]


class ToolParameters(BaseModel):
    """Base parameters schema for MCP tools.

    Fields are declared optional so that missing values reach the handler,
    which decides how to report them. ``required_fields`` lists the names
    advertised as required in the handshake schema.
    """

    model_config = ConfigDict(extra="ignore")

    required_fields: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def parameter_schema(cls) -> Dict[str, Any]:
        """Build the JSON schema advertised for this parameter model."""
        properties: Dict[str, Any] = {}
        for name, field in cls.model_fields.items():
            prop: Dict[str, Any] = {"type": "string"}
            if field.description:
                prop["description"] = field.description
            properties[name] = prop
        return {
            "type": "object",
            "properties": properties,
            "required": list(cls.required_fields),
        }


@dataclass
class ToolDefinition:
    """Description of a tool that can be registered with the server.

    Attributes:
        name: Unique name of the tool.
        description: Human-readable description of the tool purpose.
        parameters_model: Pydantic model used to validate input parameters.
        handler: Coroutine function that executes the tool logic.
    """

    name: str
    description: str
    parameters_model: type[ToolParameters]
    handler: ToolHandler

    def validate(self, parameters: Dict[str, Any]) -> Dict[str, Any]:
        """Validate and coerce incoming tool parameters.

        Args:
            parameters: Input parameters provided for the tool.

        Raises:
            ValueError: If parameter validation fails.

        Returns:
            Validated parameter dictionary.
        """

        try:
            model = self.parameters_model.model_validate(parameters)
        except ValidationError as error:
            raise ValueError(f"Invalid parameters for tool '{self.name}'") from error
        return model.model_dump()

    def metadata(self) -> Dict[str, Any]:
        """Return the handshake descriptor for the tool."""

        return {
            "tool_name": self.name,
            "description": self.description,
            "parameters": self.parameters_model.parameter_schema(),
        }
