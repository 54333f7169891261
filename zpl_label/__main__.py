"""
ZPL Label - Command Line
========================

Usage:
    python -m zpl_label render label.json     Render a JSON label to stdout
    python -m zpl_label render -              Read the JSON label from stdin
    python -m zpl_label demo                  Print a sample label
    python -m zpl_label serve [--port 5100]   Start the render service
"""

import argparse
import json
import logging
import sys

from .config import HOST, PORT, DEBUG, LOG_LEVEL
from .errors import LabelError
from .models import Label, BarcodeType, Font
from .builder import LabelBuilder

logger = logging.getLogger('zpl_label')


def demo_label() -> Label:
    """Sample 50x25 mm label."""
    return (
        LabelBuilder(50, 25)
        .font_name(Font.ZEBRA_0)
        .font_size(20)
        .add_text(10, 10, 'Hello World')
        .add_barcode(10, 30, BarcodeType.CODE128, '12345')
        .build()
    )


def _render(path: str) -> int:
    try:
        if path == '-':
            data = json.load(sys.stdin)
        else:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        label = Label.from_dict(data)
        zpl = label.to_zpl()
    except (OSError, ValueError, LabelError) as e:
        logger.error(f"Cannot render {path}: {e}")
        return 1

    sys.stdout.write(zpl)
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog='zpl-label', description='Generate ZPL label markup')
    subparsers = parser.add_subparsers(dest='command', required=True)

    render_parser = subparsers.add_parser('render', help='Render a JSON label file to ZPL')
    render_parser.add_argument('path', help="Label JSON file ('-' for stdin)")

    subparsers.add_parser('demo', help='Print a sample label')

    serve_parser = subparsers.add_parser('serve', help='Start the render service')
    serve_parser.add_argument('--host', default=HOST)
    serve_parser.add_argument('--port', type=int, default=PORT)
    serve_parser.add_argument('--debug', action='store_true', default=DEBUG)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVEL,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    if args.command == 'render':
        return _render(args.path)

    if args.command == 'demo':
        sys.stdout.write(demo_label().to_zpl())
        return 0

    from .app import main as serve
    serve(host=args.host, port=args.port, debug=args.debug)
    return 0


if __name__ == '__main__':
    sys.exit(main())
