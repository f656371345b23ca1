import os
import sys
import logging

from dotenv import load_dotenv

from early_edge.orchestration.config import load_config
from early_edge.orchestration.startup import build_renderer, start
from early_edge.web.app import create_app

# Logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)
logger = logging.getLogger(__name__)

logger.info("====== Early Edge starting ======")
logger.info(f"Python version: {sys.version}")
logger.info(f"Working directory: {os.getcwd()}")

# Load environment variables
load_dotenv()

config_path = os.getenv('EARLY_EDGE_CONFIG', 'configs/default.yaml')
logger.info(f"Config: {config_path}")
cfg = load_config(config_path)
if os.getenv('EARLY_EDGE_DATASET'):
    cfg["paths"]["dataset"] = os.getenv('EARLY_EDGE_DATASET')

# Load first, then build the dashboard; a failed load stops here.
controller, validation = start(cfg)
app = create_app(controller, build_renderer(cfg))

if __name__ == '__main__':
    server = cfg.get("server", {})
    port = int(os.getenv('PORT', server.get("port", 5000)))
    host = server.get("host", "0.0.0.0")
    logger.info(f"Serving on {host}:{port}")
    app.run(host=host, port=port, debug=False)
