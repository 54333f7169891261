"""
ZPL Label Configuration
"""

import os

# =============================================================================
# Server Configuration
# =============================================================================

PORT = int(os.environ.get('ZPL_LABEL_PORT', 5100))
HOST = os.environ.get('ZPL_LABEL_HOST', '0.0.0.0')
DEBUG = os.environ.get('ZPL_LABEL_DEBUG', 'false').lower() == 'true'

# API Key for authentication (unset = open service)
API_KEY = os.environ.get('ZPL_LABEL_API_KEY') or None

# Image elements may reference files on the server only when enabled
ALLOW_IMAGE_PATHS = os.environ.get('ZPL_LABEL_ALLOW_IMAGE_PATHS', 'false').lower() == 'true'

# Request body limit (bytes), images arrive base64 encoded
MAX_CONTENT_LENGTH = int(os.environ.get('ZPL_LABEL_MAX_CONTENT_LENGTH', 16 * 1024 * 1024))

LOG_LEVEL = os.environ.get('ZPL_LABEL_LOG_LEVEL', 'INFO').upper()

# =============================================================================
# Encoding Defaults
# =============================================================================

DEFAULT_DENSITY = 8  # dots per mm (203 dpi)
BARCODE_MODULE_WIDTH = 2  # dots
LUMINANCE_THRESHOLD = 128  # below = black dot

# =============================================================================
# Supported Markup Formats
# =============================================================================

LABEL_FORMATS = {
    'zpl': {
        'name': 'ZPL II',
        'content_type': 'text/plain; charset=utf-8',
    },
}
