# main.py
import logging
import os
import sys

# Import from our modules
from server_modules import config
from server_modules.config import s
from server_modules.errors import FileReadError, ServerStartupError
from server_modules.flask_app import create_app
from server_modules.server import start_server

# --- Initial Logging Setup ---
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main(host=None, port=None, key_path=None, cert_path=None):
    """Start the HTTPS server and serve until the process is stopped.

    Arguments left as None fall back to the values in server_modules.config.
    Any startup failure is logged and terminates the process with status 1.
    """
    host = config.HOST if host is None else host
    port = config.PORT if port is None else port
    key_path = config.TLS_KEY_FILE if key_path is None else key_path
    cert_path = config.TLS_CERT_FILE if cert_path is None else cert_path

    logger.info(s.LOG_SERVER_LANGUAGE.format(language=config.SERVER_LANGUAGE))

    app = create_app()
    try:
        server = start_server(app, host, port, key_path, cert_path)
    except FileReadError as e:
        logger.error(s.FATAL_STARTUP_FAILED.format(error=e))
        logger.error(s.LOG_KEY_PATH_CHECKED.format(path=os.path.abspath(key_path)))
        logger.error(s.LOG_CERT_PATH_CHECKED.format(path=os.path.abspath(cert_path)))
        sys.exit(1)
    except ServerStartupError as e:
        logger.error(s.FATAL_STARTUP_FAILED.format(error=e))
        sys.exit(1)
    except Exception as e:
        logger.error(s.FATAL_UNEXPECTED_STARTUP_ERROR.format(error=e), exc_info=True)
        sys.exit(1)

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
        logger.info(s.LOG_SERVER_STOPPED)


# --- Main Execution Logic ---
if __name__ == '__main__':
    main()
