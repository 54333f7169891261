"""
ZPL Label - Render Service
==========================

HTTP service that turns JSON label descriptions into ZPL.
The service only renders markup, it never talks to a printer.

Run: python -m zpl_label serve
"""

import sys
import logging
from datetime import datetime
from flask import Flask, Response, request, jsonify
from flask_cors import CORS

from . import __version__
from .config import (
    PORT, HOST, DEBUG, API_KEY, ALLOW_IMAGE_PATHS, MAX_CONTENT_LENGTH, LABEL_FORMATS,
)
from .errors import ImageDecodeError
from .models import Label, Image
from .encoders import get_encoder

logger = logging.getLogger(__name__)

# =============================================================================
# Application Setup
# =============================================================================

app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = MAX_CONTENT_LENGTH
CORS(app)


def _check_api_key():
    """Validate API key from request (open when no key is configured)."""
    if not API_KEY:
        return True

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    auth_header = request.headers.get('Authorization', '')

    # Check body
    if data.get('api_key') == API_KEY:
        return True

    # Check header (Bearer token)
    if auth_header.startswith('Bearer ') and auth_header[7:] == API_KEY:
        return True

    return False


def _has_image_paths(label: Label) -> bool:
    """Check if any image element references a server-side file."""
    return any(isinstance(element, Image) and element.is_path for element in label)


# =============================================================================
# Health & Info Endpoints
# =============================================================================

@app.route('/health', methods=['GET'])
def health():
    """Health check with system info."""
    import platform

    return jsonify({
        'status': 'online',
        'version': __version__,
        'platform': platform.system(),
        'python': sys.version.split()[0],
        'timestamp': datetime.now().isoformat(),
    })


@app.route('/api', methods=['GET'])
def api_info():
    """API info (JSON)."""
    return jsonify({
        'service': 'ZPL Label Service',
        'version': __version__,
        'status': 'running',
        'formats': list(LABEL_FORMATS.keys()),
        'endpoints': {
            'health': '/health',
            'render': '/api/labels/render',
        }
    })


# =============================================================================
# Rendering
# =============================================================================

@app.route('/api/labels/render', methods=['POST'])
def render_label():
    """Render a label description to markup.

    Body:
        elements - List of element objects (see Label.to_dict)
        format   - Markup format (default: zpl)

    Query params:
        raw=true - Return the markup as text/plain instead of JSON
    """
    if not _check_api_key():
        return jsonify({'success': False, 'error': 'Invalid API key'}), 401

    data = request.get_json(silent=True)
    if not data:
        return jsonify({'success': False, 'error': 'Request body required'}), 400
    if not isinstance(data, dict):
        return jsonify({'success': False, 'error': 'Request body must be a JSON object'}), 400

    format_name = data.get('format', 'zpl')
    encoder = get_encoder(format_name) if isinstance(format_name, str) else None
    if encoder is None:
        return jsonify({
            'success': False,
            'error': f'Invalid format. Valid: {list(LABEL_FORMATS.keys())}'
        }), 400

    try:
        label = Label.from_dict(data)
    except ValueError as e:
        logger.warning(f"Rejected label: {e}")
        return jsonify({'success': False, 'error': str(e)}), 400

    if not ALLOW_IMAGE_PATHS and _has_image_paths(label):
        return jsonify({
            'success': False,
            'error': 'Image paths are disabled, send image_data instead'
        }), 400

    try:
        markup = encoder.encode_label(label)
    except ImageDecodeError as e:
        logger.warning(f"Render failed: {e}")
        return jsonify({'success': False, 'error': str(e)}), 422

    logger.info(f"Rendered {format_name} label with {len(label)} element(s)")

    if request.args.get('raw', 'false').lower() == 'true':
        return Response(markup, content_type=LABEL_FORMATS[format_name]['content_type'])

    return jsonify({
        'success': True,
        'format': format_name,
        'zpl': markup,
        'elements': len(label),
    })


# =============================================================================
# Main
# =============================================================================

def main(host: str = HOST, port: int = PORT, debug: bool = DEBUG):
    """Run the service."""
    print("=" * 60)
    print("  ZPL Label Service")
    print("=" * 60)
    print(f"  Version: {__version__}")
    print(f"  Port: {port}")
    print(f"  Auth: {'API key' if API_KEY else 'open'}")
    print(f"  Image paths: {'allowed' if ALLOW_IMAGE_PATHS else 'disabled'}")
    print("=" * 60)
    print("  API Endpoints:")
    print("    GET  /health                          - Health check")
    print("    GET  /api                             - Service info")
    print("    POST /api/labels/render               - Render label to ZPL")
    print("=" * 60)

    app.run(host=host, port=port, debug=debug)


if __name__ == '__main__':
    main()
