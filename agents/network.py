"""Router-driven network of agents sharing one state."""

import logging
from typing import Any, Callable, Dict, List, Optional

import config
from .agent import Agent
from .state import NetworkState

logger = logging.getLogger('agent.network')


class Network:
    """Runs agents in the order chosen by a router callback.

    The router receives the network and returns the next Agent, or None to
    stop. Each agent step sees the original input plus a short log of the
    previous steps.
    """

    def __init__(self, name: str, agents: List[Agent], router: Callable[['Network'], Optional[Agent]],
                 state: NetworkState = None, max_iterations: int = None):
        self.name = name
        self.agents: Dict[str, Agent] = {agent.name: agent for agent in agents}
        self.router = router
        self.state = state if state is not None else NetworkState()
        if max_iterations is None:
            max_iterations = config.AGENT_MAX_ITERATIONS
        self.max_iterations = max_iterations
        self.history: List[Dict[str, Any]] = []

    def _instruction(self, user_input: str) -> str:
        if not self.history:
            return user_input
        steps = []
        for step in self.history:
            outcome = step.get('error') or step.get('result')
            steps.append(f"- {step.get('agent')}: {step.get('action') or 'reply'} -> {outcome}")
        return user_input + "\n\nPrevious steps:\n" + '\n'.join(steps)

    def run(self, user_input: str) -> 'Network':
        """Route and run agents until the router returns None or the iteration limit is hit."""
        logger.info("Network %s started", self.name)
        for iteration in range(1, self.max_iterations + 1):
            agent = self.router(self)
            if agent is None:
                logger.info("Network %s finished after %d step(s)", self.name, len(self.history))
                return self
            logger.info("Network %s step %d: %s", self.name, iteration, agent.name)
            result = agent.run(self._instruction(user_input), network=self)
            if 'error' in result:
                logger.warning("Agent %s reported an error: %s", agent.name, result['error'])
            self.history.append(result)

        logger.warning("Network %s stopped at the %d iteration limit", self.name, self.max_iterations)
        return self
