"""Environment-driven settings for the code assistant agents.

Values come from the process environment, with a local `.env` file loaded
first via python-dotenv.
"""

import logging
import os
from dotenv import load_dotenv

load_dotenv()

OPENAI_API_KEY = os.getenv('OPENAI_API_KEY')
OPENAI_MODEL = os.getenv('OPENAI_MODEL', 'gpt-4o-mini')

# Google ADK reads GEMINI_API_KEY / GOOGLE_API_KEY itself; kept here for diagnostics
GEMINI_API_KEY = os.getenv('GEMINI_API_KEY') or os.getenv('GOOGLE_API_KEY')
ADK_MODEL = os.getenv('ADK_MODEL', 'gemini-2.0-flash')

# Files the HTTP endpoints may read are confined to this directory
AGENT_BASE_DIR = os.getenv('AGENT_BASE_DIR') or os.getcwd()
AGENT_PORT = int(os.getenv('AGENT_PORT', '5600'))
AGENT_MAX_ITERATIONS = int(os.getenv('AGENT_MAX_ITERATIONS', '10'))
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()


def configure_logging(level: str = None):
    """Configure root logging for scripts and the HTTP server."""
    logging.basicConfig(level=level or LOG_LEVEL, format='%(asctime)s %(levelname)s %(message)s')
