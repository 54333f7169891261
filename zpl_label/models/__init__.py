"""
ZPL Label Models
"""

from .elements import (
    BarcodeType,
    IconType,
    ShapeType,
    Font,
    Element,
    Setting,
    LabelDimensions,
    FontSize,
    FontName,
    Component,
    Text,
    Barcode,
    Icon,
    Shape,
    Image,
    ELEMENT_TYPES,
    element_from_dict,
)
from .label import Label

__all__ = [
    'BarcodeType', 'IconType', 'ShapeType', 'Font',
    'Element', 'Setting', 'LabelDimensions', 'FontSize', 'FontName',
    'Component', 'Text', 'Barcode', 'Icon', 'Shape', 'Image',
    'ELEMENT_TYPES', 'element_from_dict', 'Label',
]
