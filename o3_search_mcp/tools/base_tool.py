# The module is to define the base class for all tools exposed over MCP.
# Author: Shibo Li
# Date: 2026-10-17
# Version: 0.1.0

from abc import ABC, abstractmethod
from typing import List
from mcp.types import TextContent


class BaseTool(ABC):
    """
    Abstract Base Class for all tools.

    This class defines a standard interface that all tools must implement.
    Attributes:
        name (str): The name of the tool, as advertised to MCP clients.
        description (str): A brief description of what the tool does. Clients
            show it to the model to decide when to call the tool.
    """
    name: str
    description: str

    @abstractmethod
    async def execute(self, **kwargs) -> List[TextContent]:
        """
        The core logic of the tool. This method must be implemented by all subclasses.
        Its parameters define the tool's input schema: FastMCP derives the JSON
        schema from the signature, so subclasses declare them explicitly with
        type annotations and Field descriptions.

        Returns:
            The MCP content blocks to send back to the client.
        """
        pass
