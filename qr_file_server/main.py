import logging
import sys

from qr_file_server.algorithms.exceptions import LocalAddressNotFound, QRCodeEncodingError
from qr_file_server.file_server import QRFileServer
from qr_file_server.utils import get_local_address, setup_logging
from qr_file_server.utils.config import ServerConfig

logger = logging.getLogger(__name__)


def run_server() -> None:
    log_level: int = setup_logging()
    config: ServerConfig = QRFileServer.parse_launch_arguments()
    server = QRFileServer(config)

    try:
        server.print_banner(get_local_address())

    except (LocalAddressNotFound, QRCodeEncodingError) as err:
        logger.error("Unable to start the file service: %s", err)
        sys.exit(1)

    server.start(log_level)


if __name__ == "__main__":
    run_server()
