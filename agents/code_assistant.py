"""Code assistant: explain a source file and suggest improvements.

Two flows:
- ask_about_file: single agent, read the file then ask the model about it.
- build_network: a code assistant agent reads the file and plans which
  worker agents (documentation, analysis) to run; their suggestions are
  summarised at the end. The router below decides the order from the shared
  state.

Run `python -m agents.code_assistant [path]` to try it from a shell.
"""

import argparse
import logging
from pathlib import Path
from typing import Optional

import config
from .agent import Agent
from .network import Network
from .state import NetworkState
from .tools import TOOLS

logger = logging.getLogger(__name__)

CODE_ASSISTANT = 'code_assistant_agent'
DOCUMENTATION = 'documentation_agent'
ANALYSIS = 'analysis_agent'
SUMMARIZATION = 'summarization_agent'

# Agents the planner may not schedule itself
COORDINATORS = (CODE_ASSISTANT, SUMMARIZATION)

DEFAULT_FILE = Path(__file__).resolve().parent.parent / 'core' / 'sorting.py'

REQUEST_TEMPLATE = (
    "Please help with the following request:\n\n"
    "What does the following code do, and how can it be improved?\n\n"
    "{filename}\n"
)


def _code_assistant_system(network: Optional[Network]) -> str:
    workers = []
    if network is not None:
        for agent in network.agents.values():
            if agent.name not in COORDINATORS:
                workers.append(f"{agent.name} ({agent.description or agent.system_prompt(network)})")
    return (
        "From a given user request, ONLY perform the following tool calls:\n"
        "- read the file content\n"
        f"- generate a plan of agents to run from the following list: {', '.join(workers)}\n\n"
        "Answer with \"done\" when you are finished."
    )


def _summarization_system(network: Optional[Network]) -> str:
    suggestions = (network.state.get('suggestions') or []) if network is not None else []
    return (
        "You are an expert at summarizing suggestions made by other agents. "
        f"Here are the suggestions you need to summarize: {', '.join(suggestions)}"
    )


def _worker_system(expertise: str):
    def system(network: Optional[Network]) -> str:
        code = network.state.get('code') if network is not None else None
        if not code:
            return expertise
        return f"{expertise}. Save your suggestions with the save_suggestions tool.\n\nCode:\n{code}"
    return system


def route(network: Network) -> Optional[Agent]:
    """Pick the next agent from the network state.

    Until both the file and the plan are in state the code assistant runs.
    Then planned agents run first-to-last, then the summarizer once.
    """
    state = network.state
    if not state.has('code') or not state.has('plan'):
        return network.agents[CODE_ASSISTANT]

    plan = list(state.get('plan') or [])
    while plan:
        name = plan.pop(0)
        state.set('plan', plan)
        agent = network.agents.get(name)
        if agent is not None and name not in COORDINATORS:
            return agent
        logger.warning("Skipping unknown planned agent: %s", name)

    if not state.has('summary'):
        return network.agents[SUMMARIZATION]
    return None


def build_network(client=None, base_dir=None, max_iterations: int = None) -> Network:
    """Wire the code assistant, worker and summarization agents into a network."""
    save_suggestions = {'save_suggestions': TOOLS['save_suggestions']}
    agents = [
        Agent(
            name=CODE_ASSISTANT,
            system=_code_assistant_system,
            description='Reads the requested file and plans which agents should review it',
            tools={'read_file': TOOLS['read_file'], 'generate_plan': TOOLS['generate_plan']},
            client=client,
        ),
        Agent(
            name=DOCUMENTATION,
            system=_worker_system('You are an expert at generating documentation for code'),
            description='You are an expert at generating documentation for code',
            tools=save_suggestions,
            client=client,
        ),
        Agent(
            name=ANALYSIS,
            system=_worker_system('You are an expert at analyzing code and suggesting improvements'),
            description='You are an expert at analyzing code and suggesting improvements',
            tools=save_suggestions,
            client=client,
        ),
        Agent(
            name=SUMMARIZATION,
            system=_summarization_system,
            tools={'save_summary': TOOLS['save_summary']},
            client=client,
        ),
    ]
    state = NetworkState({'base_dir': str(base_dir) if base_dir else str(Path.cwd())})
    return Network('code_assistant_v2', agents, route, state=state, max_iterations=max_iterations)


def ask_about_file(path, agent: Agent = None) -> str:
    """Single-agent flow: read `path`, then ask the model what the code does."""
    code = Path(path).read_text(encoding='utf-8')
    agent = agent or Agent(
        name='code_assistant',
        system='An AI assistant that helps answer questions about code by reading and analyzing files',
    )
    result = agent.run(f"What does the following code do?\n\n{code}\n")
    if 'error' in result:
        logger.error("Code assistant failed: %s", result['error'])
        return ''
    return result.get('result') or ''


def main(argv=None):
    parser = argparse.ArgumentParser(description='Ask the code assistant about a source file.')
    parser.add_argument('path', nargs='?', default=str(DEFAULT_FILE), help='File to explain')
    parser.add_argument('--single', action='store_true', help='Only explain the file, without the agent network')
    args = parser.parse_args(argv)

    config.configure_logging()
    path = Path(args.path).resolve()

    if args.single:
        print("Assistant response:", ask_about_file(path))
        return 0

    network = build_network(base_dir=path.parent)
    network.run(REQUEST_TEMPLATE.format(filename=path.name))
    print("Final Summary:\n", network.state.get('summary') or 'No summary generated.')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
