"""
Label Builder
=============

Fluent construction of labels.

Usage:
    from zpl_label import LabelBuilder, BarcodeType

    label = (
        LabelBuilder(50, 25)
        .add_text(10, 10, 'Hello World')
        .add_barcode(10, 30, BarcodeType.CODE128, '12345')
        .build()
    )
    print(label.to_zpl())
"""

from typing import List, Optional

from .models import (
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
    IconType,
    ShapeType,
    Font,
)
from .models.elements import ImageSource


class LabelBuilder:
    """Accumulates elements in call order and builds an immutable Label."""

    def __init__(self, width: Optional[int] = None, height: Optional[int] = None,
                 density: Optional[int] = None):
        """
        Initialize builder.

        Args:
            width: Label width in mm (optional)
            height: Label height in mm (optional)
            density: Print density in dots/mm (default 8)

        When both width and height are given the label starts with a
        LabelDimensions setting.
        """
        self._elements: List[Element] = []
        if width is not None and height is not None:
            self._elements.append(LabelDimensions(width=width, height=height, density=density))

    def add(self, element: Element) -> 'LabelBuilder':
        """Append any element."""
        self._elements.append(element)
        return self

    # =========================================================================
    # Settings
    # =========================================================================

    def font_size(self, size: int) -> 'LabelBuilder':
        """Set the font height for text added after this call."""
        return self.add(FontSize(size=size))

    def font_name(self, font: Font) -> 'LabelBuilder':
        """Set the font face for text added after this call."""
        return self.add(FontName(font=font))

    # =========================================================================
    # Components
    # =========================================================================

    def add_text(self, x: int, y: int, text: str) -> 'LabelBuilder':
        return self.add(Text(x=x, y=y, text=text))

    def add_barcode(self, x: int, y: int, barcode_type: BarcodeType, data: str) -> 'LabelBuilder':
        return self.add(Barcode(x=x, y=y, barcode_type=barcode_type, data=data))

    def add_image(self, x: int, y: int, source: ImageSource) -> 'LabelBuilder':
        """
        Add an image.

        Args:
            x: X position in dots
            y: Y position in dots
            source: File path, encoded image bytes, or a PIL image

        The image is decoded when the label is serialized.
        """
        return self.add(Image(x=x, y=y, source=source))

    def add_icon(self, x: int, y: int, icon_type: IconType) -> 'LabelBuilder':
        return self.add(Icon(x=x, y=y, icon_type=icon_type))

    def add_shape(self, x: int, y: int, shape_type: ShapeType,
                  width: int, height: int) -> 'LabelBuilder':
        return self.add(Shape(x=x, y=y, shape_type=shape_type, width=width, height=height))

    def build(self) -> Label:
        """Snapshot the accumulated elements into a Label."""
        return Label(elements=tuple(self._elements))
