"""
Command Line Interface

Encrypts or decrypts a file with DES in ECB mode:

    python -m desfeistel encrypt --key 12345678 plain.txt cipher.bin
    python -m desfeistel decrypt --key 12345678 cipher.bin plain.txt

The key may also come from the DESFEISTEL_KEY environment variable.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import load_config, configure_logging, validate_log_level
from .ecb_mode.ecb import decrypt, encrypt
from .errors import DESError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='desfeistel',
        description='Encrypt or decrypt files with DES in ECB mode (PKCS#7 padding).')
    parser.add_argument('command', choices=('encrypt', 'decrypt'),
                        help='Operation to perform.')
    parser.add_argument('input', type=Path, help='File to read.')
    parser.add_argument('output', type=Path, help='File to write.')
    parser.add_argument('--key', '-k',
                        help='Cipher key (text, truncated or zero-padded to 8 bytes). '
                             'Defaults to $DESFEISTEL_KEY.')
    parser.add_argument('--log-level', type=validate_log_level,
                        help='Logging level. Defaults to $DESFEISTEL_LOG_LEVEL or INFO.')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config()
    except ValueError as e:
        parser.error(str(e))

    configure_logging(args.log_level or config.log_level)

    key = args.key if args.key is not None else config.key
    if key is None:
        parser.error("no key given: use --key or set DESFEISTEL_KEY")

    data = args.input.read_bytes()
    operation = encrypt if args.command == 'encrypt' else decrypt

    try:
        result = operation(data, key)
    except DESError as e:
        logger.error("Failed to %s %s: %s", args.command, args.input, e)
        return 1

    args.output.write_bytes(result)
    logger.info("%s: %d bytes -> %d bytes written to %s",
                args.command, len(data), len(result), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
