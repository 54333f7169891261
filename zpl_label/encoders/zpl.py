"""
ZPL Encoder
===========

Serializes labels to ZPL II (Zebra Programming Language).

Every element becomes one newline-terminated command block, emitted in
label order. The document is wrapped once in ^XA / ^XZ.

Key Commands:
- ^XA / ^XZ     - Start / end label format
- ^PW / ^LL     - Print width / label length (dots)
- ^LH x,y       - Label home (origin)
- ^CF f,h       - Default font and height
- ^FO x,y       - Field origin
- ^FD ... ^FS   - Field data / field separator
- ^BY w         - Barcode module width
- ^B<c>         - Barcode field
- ^GB           - Graphic box
- ^GFA          - ASCII hex graphic field

Field data is not escaped. Text containing '^' or '~' will be read as
commands by the printer.
"""

import logging
from typing import Iterable

from ..config import DEFAULT_DENSITY, BARCODE_MODULE_WIDTH
from ..models import (
    Label,
    Element,
    LabelDimensions,
    FontSize,
    FontName,
    Text,
    Barcode,
    Icon,
    Shape,
    Image,
    BarcodeType,
    ShapeType,
    Font,
)
from .graphic import image_to_zpl

logger = logging.getLogger(__name__)


class ZPLEncoder:
    """Stateless ZPL serializer for labels and their elements."""

    START = '^XA\n'
    END = '^XZ\n'

    # EAN-8 and EAN-13 share ^BE
    BARCODE_CODES = {
        BarcodeType.CODE39: '3',
        BarcodeType.CODE128: 'C',
        BarcodeType.AZTEC: 'Z',
        BarcodeType.DATA_MATRIX: 'D',
        BarcodeType.EAN13: 'E',
        BarcodeType.EAN8: 'E',
        BarcodeType.GS1_DATABAR: 'K',
        BarcodeType.QR_CODE: 'Q',
    }

    SHAPE_CODES = {
        ShapeType.ELLIPSE: 'E',
        ShapeType.RECTANGLE: 'R',
        ShapeType.TRIANGLE: 'T',
    }

    @classmethod
    def encode_label(cls, label: Label) -> str:
        """
        Serialize a label to a complete ZPL document.

        Raises:
            ImageDecodeError: An image element could not be decoded
        """
        body = cls.encode_elements(label.elements)
        logger.debug(f"Encoded label with {len(label.elements)} element(s)")
        return f'{cls.START}{body}{cls.END}'

    @classmethod
    def encode_elements(cls, elements: Iterable[Element]) -> str:
        """Serialize elements without the ^XA / ^XZ envelope."""
        # Built fully before returning, a failing image leaves no partial output
        return ''.join(cls.encode_element(element) for element in elements)

    @classmethod
    def encode_element(cls, element: Element) -> str:
        """Serialize a single element to its command block."""
        encoder = getattr(cls, f'_{element.kind}', None) if element.kind else None
        if encoder is None:
            raise TypeError(f'Cannot encode {type(element).__name__} as ZPL')
        return encoder(element)

    # =========================================================================
    # Settings
    # =========================================================================

    @staticmethod
    def _label_dimensions(element: LabelDimensions) -> str:
        density = DEFAULT_DENSITY if element.density is None else element.density
        width = element.width * density
        length = element.height * density
        return f'^PW{width}^LL{length}^LH0,0\n'

    @staticmethod
    def _font_size(element: FontSize) -> str:
        # Empty font parameter keeps the current face
        return f'^CF,{element.size}\n'

    @staticmethod
    def _font_name(element: FontName) -> str:
        font = Font(element.font).value
        return f'^CF{font}\n'

    # =========================================================================
    # Components
    # =========================================================================

    @staticmethod
    def _text(element: Text) -> str:
        return f'^FO{element.x},{element.y}^FD{element.text}^FS\n'

    @classmethod
    def _barcode(cls, element: Barcode) -> str:
        code = cls.BARCODE_CODES[BarcodeType(element.barcode_type)]
        return (
            f'^FO{element.x},{element.y}^BY{BARCODE_MODULE_WIDTH}'
            f'^B{code}^FD{element.data}^FS\n'
        )

    @staticmethod
    def _icon(element: Icon) -> str:
        # Same glyph for every icon type
        return f'^FO{element.x},{element.y}^GRI,,Y,N^FS\n'

    @classmethod
    def _shape(cls, element: Shape) -> str:
        # ^GB draws from the width only, height is not emitted
        code = cls.SHAPE_CODES[ShapeType(element.shape_type)]
        return f'^FO{element.x},{element.y}^GB{code},{element.width}^FS\n'

    @staticmethod
    def _image(element: Image) -> str:
        return f'^FO{element.x},{element.y}{image_to_zpl(element.source)}^FS\n'

