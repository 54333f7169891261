"""
ZPL Label Encoders
==================

Markup encoders for built labels.
"""

from .graphic import Raster, load_raster, raster_to_hex, raster_to_zpl, image_to_zpl
from .zpl import ZPLEncoder

__all__ = [
    'Raster', 'load_raster', 'raster_to_hex', 'raster_to_zpl', 'image_to_zpl',
    'ZPLEncoder', 'get_encoder',
]

# Encoder registry
ENCODERS = {
    'zpl': ZPLEncoder,
}


def get_encoder(format_name: str) -> type:
    """Get encoder class by markup format name."""
    return ENCODERS.get(format_name)
