import os
from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv()

LOG_LEVEL = os.getenv("SUPPLYGRAPH_LOG_LEVEL", "WARNING").upper()
GRAPH_FILE = os.getenv("SUPPLYGRAPH_GRAPH_FILE", "supply_chain.yaml")
