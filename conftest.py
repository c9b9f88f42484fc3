"""Shared pytest fixtures: a scripted stand-in for the OpenAI chat client."""

import json
from types import SimpleNamespace

import pytest


class FakeCompletions:
    """Returns queued replies in order, then a plain 'done' reply."""

    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = []

    def create(self, model, messages, **kwargs):
        self.calls.append({'model': model, 'messages': messages})
        if self.replies:
            reply = self.replies.pop(0)
        else:
            reply = {'action': None, 'args': {'message': 'done'}}
        content = reply if isinstance(reply, str) else json.dumps(reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class FakeClient:
    def __init__(self, replies=()):
        self.chat = SimpleNamespace(completions=FakeCompletions(replies))

    @property
    def calls(self):
        return self.chat.completions.calls


@pytest.fixture
def fake_client():
    """Factory: fake_client([reply, ...]) -> client answering with those replies."""
    return FakeClient


@pytest.fixture
def sample_dir(tmp_path):
    (tmp_path / 'sample.py').write_text('def add(a, b):\n    return a + b\n', encoding='utf-8')
    return tmp_path


# Replies that walk the code assistant network through one full run
NETWORK_SCRIPT = [
    {'action': 'read_file', 'args': {'filename': 'sample.py'}},
    {'action': 'generate_plan', 'args': {'plan': ['analysis_agent', 'documentation_agent']}},
    {'action': 'save_suggestions', 'args': {'suggestions': ['Add type hints']}},
    {'action': 'save_suggestions', 'args': {'suggestions': ['Add a docstring']}},
    {'action': 'save_summary', 'args': {'summary': 'Add type hints and a docstring.'}},
]


@pytest.fixture
def network_script():
    return [dict(step) for step in NETWORK_SCRIPT]
