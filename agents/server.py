from flask import Flask, request, jsonify
from pathlib import Path
import logging

import config
from agents.code_assistant import build_network, ask_about_file
from agents.tools import resolve_within

logger = logging.getLogger(__name__)

app = Flask(__name__)

# HTTP endpoints only read files under this directory
BASE_DIR = Path(config.AGENT_BASE_DIR)


@app.route('/agent', methods=['POST'])
def run_agent_network():
    data = request.get_json(force=True, silent=True) or {}
    req = data.get('request') or data.get('prompt') or ''
    if not req:
        return jsonify({'error': 'no request provided'}), 400
    filename = data.get('filename')
    if filename:
        req = f"{req}\n\n{filename}"

    # Fresh network (and state) per request
    network = build_network(base_dir=BASE_DIR)
    network.run(req)
    state = network.state
    return jsonify({
        'summary': state.get('summary'),
        'suggestions': state.get('suggestions') or [],
        'plan': state.get('plan') or [],
        'history': network.history,
    })


@app.route('/agent/ask', methods=['POST'])
def ask():
    data = request.get_json(force=True, silent=True) or {}
    filename = data.get('filename') or ''
    if not filename:
        return jsonify({'error': 'no filename provided'}), 400
    try:
        path = resolve_within(BASE_DIR, filename)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    if not path.is_file():
        return jsonify({'error': f'{filename} not found'}), 404
    return jsonify({'filename': filename, 'response': ask_about_file(path)})


@app.route('/agent/agents', methods=['GET'])
def list_agents():
    network = build_network(base_dir=BASE_DIR)
    return jsonify({'agents': list(network.agents.keys())})


if __name__ == '__main__':
    config.configure_logging()
    app.run(host='0.0.0.0', port=config.AGENT_PORT)
