"""Tests for the Flask endpoints in agents.server."""

from pathlib import Path

import pytest

import config
from agents import server
from agents.code_assistant import build_network


@pytest.fixture
def client(monkeypatch, sample_dir):
    monkeypatch.setattr(server, 'BASE_DIR', sample_dir)
    server.app.config['TESTING'] = True
    return server.app.test_client()


def test_run_network_endpoint(monkeypatch, client, fake_client, network_script):
    llm = fake_client(network_script)
    monkeypatch.setattr(
        server, 'build_network',
        lambda base_dir=None: build_network(client=llm, base_dir=base_dir, max_iterations=10),
    )
    resp = client.post('/agent', json={'request': 'What does this do?', 'filename': 'sample.py'})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['summary'] == 'Add type hints and a docstring.'
    assert body['suggestions'] == ['Add type hints', 'Add a docstring']
    assert body['plan'] == []
    assert len(body['history']) == 5
    assert 'sample.py' in llm.calls[0]['messages'][1]['content']


def test_base_dir_comes_from_config():
    assert server.BASE_DIR == Path(config.AGENT_BASE_DIR)


def test_run_network_requires_request(client):
    resp = client.post('/agent', json={})
    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'no request provided'}


def test_ask_endpoint(monkeypatch, client):
    monkeypatch.setattr(server, 'ask_about_file', lambda path: f'{path.name} adds numbers')
    resp = client.post('/agent/ask', json={'filename': 'sample.py'})
    assert resp.status_code == 200
    assert resp.get_json() == {'filename': 'sample.py', 'response': 'sample.py adds numbers'}


def test_ask_endpoint_errors(client):
    assert client.post('/agent/ask', json={}).status_code == 400
    assert client.post('/agent/ask', json={'filename': '../outside.py'}).status_code == 400
    assert client.post('/agent/ask', json={'filename': 'missing.py'}).status_code == 404


def test_list_agents(client):
    resp = client.get('/agent/agents')
    assert resp.get_json() == {'agents': [
        'code_assistant_agent', 'documentation_agent', 'analysis_agent', 'summarization_agent',
    ]}
