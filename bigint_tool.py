#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Command-line tool for encoding arbitrary-precision integers.

Usage:
    python bigint_tool.py encode 12345 --format postcard
    python bigint_tool.py decode 023930 --format postcard
    python bigint_tool.py encode 0xff --format json
    python bigint_tool.py --port /dev/ttyACM0 send 12345
    python bigint_tool.py --port /dev/ttyACM0 receive
"""

import argparse
import logging
import sys

import serial
from gmpy2 import mpz

from bigint_serde import Integer, IntegerStream, SerdeError
from bigint_serde.formats import FORMATS

TEXT_FORMATS = {"json"}


def parse_value(text: str) -> Integer:
    """Parse a decimal or 0x-prefixed hex integer."""
    text = text.strip().replace("_", "")
    base = 16 if text.lower().startswith("0x") else 10
    if base == 16:
        text = text[2:]
    return Integer(mpz(text, base))


def cmd_encode(value: str, fmt: str):
    """Print the encoding of a value."""
    codec = FORMATS[fmt]
    data = codec.dumps(parse_value(value))
    if fmt in TEXT_FORMATS:
        print(data)
    else:
        print(data.hex())


def cmd_decode(data: str, fmt: str):
    """Print the decimal value of an encoding."""
    codec = FORMATS[fmt]
    if fmt in TEXT_FORMATS:
        number = codec.loads(data)
    else:
        number = codec.loads(bytes.fromhex(data))
    print(number.value)


def cmd_send(stream: IntegerStream, value: str):
    """Send a value over the stream."""
    number = parse_value(value)
    stream.send(number)
    print(f"Sent {number.value}")


def cmd_receive(stream: IntegerStream):
    """Receive a value from the stream."""
    number = stream.receive()
    print(number.value)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Encode and decode arbitrary-precision integers"
    )
    parser.add_argument(
        "--port", "-p",
        help="Serial port or pyserial URL for send/receive (e.g., /dev/ttyACM0)"
    )
    parser.add_argument(
        "--timeout", "-t",
        type=float, default=5.0,
        help="Read timeout in seconds"
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Encode a value")
    encode_parser.add_argument("value", help="Decimal or 0x-prefixed hex value")
    encode_parser.add_argument("--format", "-f", default="postcard", choices=sorted(FORMATS))

    decode_parser = subparsers.add_parser("decode", help="Decode a value")
    decode_parser.add_argument("data", help="Hex bytes, or JSON text for --format json")
    decode_parser.add_argument("--format", "-f", default="postcard", choices=sorted(FORMATS))

    send_parser = subparsers.add_parser("send", help="Send a value over the serial port")
    send_parser.add_argument("value", help="Decimal or 0x-prefixed hex value")

    subparsers.add_parser("receive", help="Receive a value from the serial port")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        if args.command == "encode":
            cmd_encode(args.value, args.format)
        elif args.command == "decode":
            cmd_decode(args.data, args.format)
        else:
            if not args.port:
                parser.error(f"--port is required for {args.command}")
            try:
                stream = IntegerStream(args.port, timeout=args.timeout)
            except serial.SerialException as e:
                print(f"Error opening {args.port}: {e}")
                sys.exit(1)
            with stream:
                if args.command == "send":
                    cmd_send(stream, args.value)
                else:
                    cmd_receive(stream)
    except (SerdeError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
