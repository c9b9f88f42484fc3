"""Google ADK flavour of the code assistant (`adk run agents/assistant`)."""

from . import agent
