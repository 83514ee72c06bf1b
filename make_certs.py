# make_certs.py - Generate a self-signed key.pem/cert.pem pair for local runs
import argparse
import logging
import sys

from server_modules.selfsigned import generate_self_signed, write_pem_pair

logging.basicConfig(level=logging.INFO,
                    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Generate a self-signed private key and certificate for the HTTPS server.')
    parser.add_argument('--dir',
                        default='.',
                        type=str,
                        help='directory to write key.pem and cert.pem into (default: current directory)')
    parser.add_argument('--common-name',
                        default='localhost',
                        type=str,
                        help='subject common name of the certificate')
    parser.add_argument('--days',
                        default=365,
                        type=int,
                        help='number of days the certificate stays valid')
    parser.add_argument('--force',
                        action='store_true',
                        help='overwrite existing key.pem and cert.pem')
    return parser


def main(argv=None):
    arguments = create_parser().parse_args(argv)
    key_pem, cert_pem = generate_self_signed(common_name=arguments.common_name, days=arguments.days)
    try:
        key_path, cert_path = write_pem_pair(arguments.dir, key_pem, cert_pem, force=arguments.force)
    except FileExistsError as e:
        logger.error(str(e))
        return 1
    print(f"Key written to {key_path}")
    print(f"Certificate written to {cert_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
