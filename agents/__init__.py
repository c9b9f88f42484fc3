"""Agents package - the code assistant demo built on a small agent runtime.

The model is asked for a JSON object with keys `action` (tool name) and
`args` (tool arguments). A Network runs agents in the order its router
picks, and tools share a NetworkState key-value store.

The Google ADK variant lives in agents.assistant and is not imported here.
"""

from .agent import Agent
from .network import Network
from .state import NetworkState
from .tools import TOOLS

__all__ = ["Agent", "Network", "NetworkState", "TOOLS"]
