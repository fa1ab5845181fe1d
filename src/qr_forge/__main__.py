"""Command line interface for generating QR codes."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import generator, render
from .exceptions import QRError
from .model import QRModel

logger = logging.getLogger("qr_forge")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="qr_forge", description="Generate QR codes as PNG, SVG or text")
    data_group = parser.add_mutually_exclusive_group(required=True)
    data_group.add_argument("--text", help="Literal text/URL to encode")
    data_group.add_argument("--contact", action="store_true", help="Encode a contact card (vCard)")
    data_group.add_argument("--wifi", action="store_true", help="Encode Wi-Fi credentials")
    data_group.add_argument("--file", type=Path, help="Read the payload from a file")

    parser.add_argument("--name", help="Contact name", default="")
    parser.add_argument("--phone", help="Contact phone number", default="")
    parser.add_argument("--email", help="Contact email address", default="")
    parser.add_argument("--address", help="Contact postal address", default="")

    parser.add_argument("--ssid", help="Wi-Fi SSID", default="")
    parser.add_argument("--password", help="Wi-Fi password", default="")
    parser.add_argument("--auth", help="Wi-Fi authentication (WEP/WPA/WPA2/nopass); derived from --password if omitted")
    parser.add_argument("--hidden", action="store_true", help="Mark Wi-Fi network as hidden")

    parser.add_argument("-o", "--output", type=Path, default=Path("qr_code.png"), help="Output file (.png, .svg or .txt)")
    parser.add_argument("--ecc", choices=["L", "M", "Q", "H"], type=str.upper, default="H", help="Error correction level")
    parser.add_argument("--border", type=int, default=4, help="Quiet-zone width in modules")
    parser.add_argument("--box-size", type=int, default=10, help="Pixels per module")
    parser.add_argument("--min-version", type=int, default=None, help="Smallest symbol version to use (1-40)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log encoder decisions")
    return parser


def resolve_payload(args: argparse.Namespace) -> str:
    if args.wifi:
        return generator.build_wifi_payload(args.ssid, password=args.password, auth=args.auth, hidden=args.hidden)
    if args.contact:
        return generator.build_vcard_payload(args.name, args.phone, args.email, args.address)
    if args.text is not None:
        return generator.build_text_payload(args.text)
    if args.file is not None:
        return generator.build_text_payload(args.file.read_text(encoding="utf-8"))
    raise SystemExit("No payload provided")


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        payload = resolve_payload(args)
        qr = QRModel.encode_text(payload, args.ecc, min_version=args.min_version)
        render.save(qr, args.output, box_size=args.box_size, border=args.border)
    except (QRError, ValueError) as exc:
        logger.debug("generation failed", exc_info=True)
        parser.exit(2, f"{parser.prog}: error: {exc}\n")
    parser.exit(0, f"Saved version {qr.version} QR code to {args.output}\n")


if __name__ == "__main__":
    main(sys.argv[1:])
