import json
import re
import logging
from typing import Any, Callable, Dict, Union
from openai import OpenAI

import config
from .state import NetworkState

logger = logging.getLogger('agent')


class Agent:
    """A minimal LLM-driven agent that can call registered tools.

    Usage: instantiate with a name, a system prompt and a tool registry
    (`{name: callable(state, **args)}`). The system prompt may be a string or
    a callable receiving the running network, so it can reflect shared state.
    Call `run` with an instruction and the agent will ask the model for an
    action, parse the JSON response, and dispatch to the matching tool with
    the network state.
    """

    def __init__(self, name: str, system: Union[str, Callable, None] = None, description: str = '',
                 tools: Dict[str, Callable] = None, client: OpenAI = None, model: str = None):
        # Without a client and without OPENAI_API_KEY the agent answers with safe
        # descriptive payloads instead of calling the model.
        if client:
            self.client = client
        elif config.OPENAI_API_KEY:
            self.client = OpenAI(api_key=config.OPENAI_API_KEY)
        else:
            self.client = None
        self.name = name
        self.system = system
        self.description = description
        self.tools = tools or {}
        self.model = model or config.OPENAI_MODEL

    def __repr__(self):
        return f"Agent({self.name!r}, tools={sorted(self.tools)})"

    def system_prompt(self, network=None) -> str:
        if callable(self.system):
            return self.system(network)
        return self.system or ''

    def _build_prompt(self, instruction: str) -> str:
        lines = []
        for tool_name in sorted(self.tools):
            doc = (self.tools[tool_name].__doc__ or '').strip().splitlines()
            lines.append(f"- {tool_name}: {doc[0] if doc else ''}")
        tool_list = '\n'.join(lines) or 'none'
        return (
            "You can call the following tools:\n"
            f"{tool_list}\n\n"
            "OUTPUT CONTRACT (strict JSON):\n"
            "Output ONLY a single JSON object (no surrounding text) matching: {\n"
            "  \"action\": string | null,   // the tool name to call, or null to only reply\n"
            "  \"args\": object              // tool parameters, or {\"message\": ...} when action is null\n"
            "}\n\n"
            "Examples:\n"
            "{\"action\": \"read_file\", \"args\": {\"filename\": \"core/sorting.py\"}}\n"
            "{\"action\": null, \"args\": {\"message\": \"done\"}}\n\n"
            f"Request: {instruction}\n\nPlease output the JSON now."
        )

    @staticmethod
    def _parse_payload(content: str) -> Dict[str, Any]:
        try:
            payload = json.loads(content)
        except (TypeError, json.JSONDecodeError):
            m = re.search(r"\{.*\}", content or '', re.S)
            payload = None
            if m:
                try:
                    payload = json.loads(m.group(0))
                except json.JSONDecodeError:
                    payload = None
        if not isinstance(payload, dict):
            payload = {'action': None, 'args': {'message': content}}
        return payload

    def plan(self, instruction: str, network=None) -> Dict[str, Any]:
        """Ask the model to PLAN an action without executing any tool.

        Returns the parsed JSON payload (action + args). If no LLM client is
        configured, returns a safe descriptive payload.
        """
        logger.info('Agent %s planning: %s', self.name, instruction[:80])
        if not self.client:
            return {'action': None, 'args': {'message': f"No LLM client configured. Available tools: {', '.join(sorted(self.tools)) or 'none'}"}}

        messages = [
            {'role': 'system', 'content': self.system_prompt(network)},
            {'role': 'user', 'content': self._build_prompt(instruction)},
        ]
        resp = self.client.chat.completions.create(model=self.model, messages=messages, temperature=0.2)
        try:
            content = resp.choices[0].message.content
        except (AttributeError, IndexError):
            content = str(resp)
        return self._parse_payload(content)

    def run(self, instruction: str, network=None, execute: bool = True) -> Dict[str, Any]:
        """Plan and optionally execute an instruction.

        Tools are called with the network state (a throwaway state when no
        network is given). Failures are reported in the returned payload.
        """
        try:
            planned = self.plan(instruction, network)
        except Exception as e:
            logger.exception('Agent %s failed to plan', self.name)
            return {'agent': self.name, 'action': None, 'error': str(e)}

        action = planned.get('action')
        args = planned.get('args') or {}

        if not action:
            message = args.get('message') if isinstance(args, dict) else args
            return {'agent': self.name, 'action': None, 'result': message}

        if not isinstance(action, str):
            logger.warning('Agent %s got a malformed action: %r', self.name, action)
            return {'agent': self.name, 'action': action, 'error': 'action must be a tool name'}

        if not execute:
            return {'agent': self.name, 'action': action, 'args': args}

        tool = self.tools.get(action)
        if not tool:
            return {'agent': self.name, 'action': action, 'error': f"Tool '{action}' not found"}
        if not isinstance(args, dict):
            return {'agent': self.name, 'action': action, 'error': 'Tool arguments must be an object'}

        state = network.state if network is not None else NetworkState()
        try:
            result = tool(state, **args)
            return {'agent': self.name, 'action': action, 'result': result}
        except Exception as e:
            logger.exception('Tool call failed')
            return {'agent': self.name, 'action': action, 'error': str(e)}
