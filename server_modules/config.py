import os
import logging
from dotenv import load_dotenv

from . import strings_en
from . import strings_es

logger = logging.getLogger(__name__)

# Load environment variables from .env file (only SERVER_LANGUAGE is read)
load_dotenv()

# Set language based on environment
SERVER_LANGUAGE = os.environ.get("SERVER_LANGUAGE", "english").lower()
s = strings_es if SERVER_LANGUAGE == "spanish" else strings_en

logger.info(s.LOG_DOTENV_LOADED)

# --- Network Configuration ---
# Fixed listener address, not read from the environment
HOST = "0.0.0.0"
PORT = 4000

# --- TLS Configuration ---
# Relative paths resolve against the working directory the server is started from
TLS_KEY_FILE = "key.pem"
TLS_CERT_FILE = "cert.pem"
