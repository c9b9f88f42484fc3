"""Tool handlers the code assistant agents can call.

Each tool takes the network state first, then keyword args chosen by the
model, and returns a JSON-serializable dict. Problems the model can fix
(bad path, wrong argument shape) come back as {'error': ...} payloads.
"""
from typing import Any, Dict, List
import logging
import os
from pathlib import Path

from .state import NetworkState

logger = logging.getLogger('agent.tools')


def resolve_within(base_dir, filename: str) -> Path:
    """Resolve `filename` against `base_dir`, refusing paths that leave it.

    Raises:
        ValueError: the resolved path is outside base_dir
    """
    base = Path(base_dir).resolve()
    path = (base / filename).resolve()
    if path != base and base not in path.parents:
        raise ValueError(f"{filename} is outside {base}")
    return path


def tool_read_file(state: NetworkState, filename: str) -> Dict[str, Any]:
    """Read a file from the current directory and keep its content for the other agents."""
    base_dir = state.get('base_dir') or os.getcwd()
    try:
        path = resolve_within(base_dir, filename)
    except ValueError as e:
        logger.warning('Refused to read %s: %s', filename, e)
        return {'error': str(e)}
    if not path.is_file():
        return {'error': f"File {filename} not found"}

    code = path.read_text(encoding='utf-8')
    state.set('code', code)
    state.set('filename', filename)
    logger.info('Read %s (%d characters)', path, len(code))
    return {'message': f"File {filename} read successfully.", 'characters': len(code)}


def tool_generate_plan(state: NetworkState, plan: List[str]) -> Dict[str, Any]:
    """Save the ordered list of agent names to run next."""
    if not isinstance(plan, list) or not all(isinstance(name, str) for name in plan):
        return {'error': 'plan must be a list of agent names'}
    state.set('plan', list(plan))
    return {'message': 'Plan generated and saved.', 'plan': list(plan)}


def tool_save_suggestions(state: NetworkState, suggestions: List[str]) -> Dict[str, Any]:
    """Save the suggestions made by an agent into the shared state."""
    if isinstance(suggestions, str):
        suggestions = [suggestions]
    if not isinstance(suggestions, list):
        return {'error': 'suggestions must be a list of strings'}
    saved = state.extend('suggestions', [str(s) for s in suggestions])
    return {'message': 'Suggestions saved.', 'count': len(saved)}


def tool_save_summary(state: NetworkState, summary: str) -> Dict[str, Any]:
    """Save a summary of the suggestions made by other agents into the shared state."""
    state.set('summary', str(summary))
    return {'message': 'Summary saved.'}


# Registry of tools the agents can call
TOOLS = {
    'read_file': tool_read_file,
    'generate_plan': tool_generate_plan,
    'save_suggestions': tool_save_suggestions,
    'save_summary': tool_save_summary,
}
