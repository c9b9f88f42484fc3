import config
from agents.server import app

config.configure_logging()

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=config.AGENT_PORT)
