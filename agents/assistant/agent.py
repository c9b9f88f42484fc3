import os
import logging
from pathlib import Path
from dotenv import load_dotenv
from google.adk.agents.llm_agent import Agent

logger = logging.getLogger(__name__)
load_dotenv()
adk_model = os.getenv('ADK_MODEL', 'gemini-2.0-flash')


def read_source_file(filename: str) -> dict:
    """
    Read a source file from the current directory.
    Args:
        filename (str): Path relative to the working directory.
    Example:
        read_source_file(filename="core/sorting.py")
    Response:
        {"filename": "core/sorting.py", "content": "..."}
    """
    base = Path(os.getcwd()).resolve()
    path = (base / filename).resolve()
    if path != base and base not in path.parents:
        return {'error': f'{filename} is outside {base}'}
    if not path.is_file():
        return {'error': f'File {filename} not found'}
    logger.info('ADK agent reading %s', path)
    return {'filename': filename, 'content': path.read_text(encoding='utf-8')}


# Export the agent as root_agent (ADK requirement). This module loads on its own
# under `adk run`, so it does not import the rest of the repository.
root_agent = Agent(
    model=adk_model,
    name='code_assistant',
    description='An AI assistant that helps answer questions about code by reading and analyzing files',
    instruction=(
        'When asked about a file, call read_source_file first, then explain what the code does '
        'and how it could be improved.'
    ),
    tools=[read_source_file],
)
