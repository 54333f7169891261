"""
ZPL Label
=========

Build label-printer markup (ZPL II) from a programmatic description.

Supports:
- Text fields with resident fonts
- Barcodes (Code 39/128, EAN, GS1 DataBar, QR, Aztec, Data Matrix)
- Images (embedded as ^GFA graphic fields)
- Icons and simple shapes
- Label dimensions and density

Usage:
    python -m zpl_label render label.json

API Endpoints:
    GET  /health              - Health check
    GET  /api                 - Service info
    POST /api/labels/render   - Render label JSON to ZPL
"""

__version__ = '1.0.0'

from .errors import LabelError, ImageDecodeError
from .models import (
    Label,
    BarcodeType,
    IconType,
    ShapeType,
    Font,
)
from .builder import LabelBuilder
from .encoders import ZPLEncoder, image_to_zpl

__all__ = [
    'Label', 'LabelBuilder', 'ZPLEncoder', 'image_to_zpl',
    'BarcodeType', 'IconType', 'ShapeType', 'Font',
    'LabelError', 'ImageDecodeError',
]
