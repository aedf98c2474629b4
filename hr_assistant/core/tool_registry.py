# Discovers and manages the tools of an agent.
# Author: NEA HR Engineering
# Date: 2025-07-04
# Version: 0.2.0

import importlib
import inspect
import pkgutil
from types import ModuleType
from typing import Any, Dict, List

from pydantic import ValidationError

from hr_assistant.core.context import ToolContext
from hr_assistant.models.common import ToolResult
from hr_assistant.tools import supervisor as supervisor_package
from hr_assistant.tools.base_tool import BaseTool
from hr_assistant.utils.logger import console

# Output for tool names the registry does not know
DEFAULT_TOOL_RESULT = {"result": True}

TOOL_FAILURE_MESSAGE = (
    "Bei der Bearbeitung ist ein Fehler aufgetreten. "
    "Bitte versuchen Sie es später erneut oder wenden Sie sich an den Support."
)


class ToolRegistry:
    """
    Discovers the BaseTool subclasses of one tools package and executes them by name.
    """
    def __init__(self, package: ModuleType):
        self.package_name = package.__name__
        self.tools: Dict[str, BaseTool] = {}
        self._discover_tools(package)
        console.success(f"Tool discovery for '{self.package_name}' complete. Found {len(self.tools)} tools: {list(self.tools.keys())}")

    def _discover_tools(self, package: ModuleType):
        """
        Imports every module of the package and registers an instance of each
        BaseTool subclass defined there.
        """
        module_infos = pkgutil.iter_modules(package.__path__, f"{package.__name__}.")
        for modname in sorted(info.name for info in module_infos):
            try:
                module = importlib.import_module(modname)
                for _, obj in inspect.getmembers(module, inspect.isclass):
                    if issubclass(obj, BaseTool) and obj is not BaseTool and obj.__module__ == module.__name__:
                        instance = obj()
                        self.tools[instance.name] = instance
                        console.info(f"Successfully registered tool: '{instance.name}'")
            except Exception as e:
                console.error(f"Failed to load or register tool from module {modname}: {e}")

    def get_definitions(self) -> List[Dict[str, Any]]:
        """Returns the tool catalog sent to the model."""
        return [tool.get_definition() for tool in self.tools.values()]

    async def execute(self, tool_name: str, context: ToolContext, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """
        Runs a tool and returns its JSON-ready output.

        Unknown names yield DEFAULT_TOOL_RESULT. Invalid arguments and
        exceptions raised by the tool become a failure ToolResult, so the
        caller always gets an output to hand back to the model.
        """
        tool = self.tools.get(tool_name)
        if tool is None:
            console.warning(f"Unknown tool '{tool_name}' requested. Answering with the default result.")
            return dict(DEFAULT_TOOL_RESULT)

        try:
            arguments = tool.args_schema.model_validate(kwargs)
        except ValidationError as e:
            console.error(f"Invalid arguments for tool '{tool_name}': {e}")
            return ToolResult.failure(f"Ungültige Angaben für {tool_name}.", error=str(e)).to_payload()

        try:
            result = await tool.execute(context, **arguments.model_dump())
        except Exception as e:
            console.exception(f"Error executing tool '{tool_name}'")
            return ToolResult.failure(TOOL_FAILURE_MESSAGE, error=str(e)).to_payload()
        return result.to_payload()

supervisor_registry = ToolRegistry(supervisor_package)
