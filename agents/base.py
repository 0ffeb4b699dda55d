from abc import ABC, abstractmethod
from typing import Dict, Any


class BaseAgent(ABC):
    """
    Base interface for all agents in the video blueprint engine.

    Agents are stateless and deterministic: the same input always
    produces the same output.
    """

    name: str

    @abstractmethod
    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        """
        Execute the agent.

        Args:
            input: Structured input dictionary defined by the agent schema.

        Returns:
            Structured output dictionary defined by the agent schema.
        """
        raise NotImplementedError
