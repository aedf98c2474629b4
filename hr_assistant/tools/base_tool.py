# Base class for all agent tools.
# Author: NEA HR Engineering
# Date: 2025-07-04
# Version: 0.2.0

from abc import ABC, abstractmethod
from pydantic import BaseModel
from typing import Dict, Any, Type

from hr_assistant.core.context import ToolContext
from hr_assistant.models.common import ToolResult


class BaseTool(ABC):
    """
    Abstract Base Class for all tools.

    Attributes:
        name (str): The name the model uses to call the tool.
        description (str): German description shown to the model.
        args_schema (Type[BaseModel]): A Pydantic model for the arguments. Field
            aliases carry the camelCase names the model sees; ``execute``
            receives the snake_case field names.
    """
    name: str
    description: str
    args_schema: Type[BaseModel]

    @abstractmethod
    async def execute(self, context: ToolContext, **kwargs) -> ToolResult:
        """
        The core logic of the tool.

        Args:
            context: The per-turn context (session, transcript, UI capabilities).
            **kwargs: The arguments, already validated against args_schema.

        Returns:
            A tagged ToolResult. Expected failures are returned, not raised.
        """

    def get_definition(self) -> Dict[str, Any]:
        """
        Returns the tool's definition in the flat function format used by the
        Responses API and by realtime sessions.
        """
        return {
            "type": "function",
            "name": self.name,
            "description": self.description,
            "parameters": self.args_schema.model_json_schema(),
            "strict": False,
        }
