"""
Label Elements
==============

Settings and positioned components that make up a label.

Settings change printer state for everything emitted after them; components
are drawn at an (x, y) position given in printer dots. Values are stored as
given: coordinates, payloads and sizes are not validated.
"""

import base64
import os
from enum import Enum
from dataclasses import dataclass, fields, MISSING
from io import BytesIO
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Optional, Union

if TYPE_CHECKING:
    from PIL import Image as PILImage


class BarcodeType(str, Enum):
    """Barcode symbologies."""
    CODE39 = 'code39'
    CODE128 = 'code128'
    AZTEC = 'aztec'
    DATA_MATRIX = 'data_matrix'
    EAN13 = 'ean13'
    EAN8 = 'ean8'
    GS1_DATABAR = 'gs1_databar'
    QR_CODE = 'qr_code'


class IconType(str, Enum):
    ARROW = 'arrow'
    CHECKMARK = 'checkmark'
    CROSS = 'cross'
    ELLIPSE = 'ellipse'
    RECTANGLE = 'rectangle'
    TRIANGLE = 'triangle'


class ShapeType(str, Enum):
    ELLIPSE = 'ellipse'
    RECTANGLE = 'rectangle'
    TRIANGLE = 'triangle'


class Font(str, Enum):
    """Resident printer fonts, valued by their ZPL identifier."""
    ZEBRA_0 = '0'
    A = 'A'
    B = 'B'
    C = 'C'
    D = 'D'
    E = 'E'
    F = 'F'
    G = 'G'
    H = 'H'


# str / PathLike = file path, bytes = encoded image file, or a PIL image
ImageSource = Union[str, os.PathLike, bytes, 'PILImage.Image']


@dataclass(frozen=True)
class Element:
    """Base class for everything placed on a label."""

    kind: ClassVar[str] = ''
    _enums: ClassVar[Dict[str, type]] = {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: Dict[str, Any] = {'type': self.kind}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = value.value if isinstance(value, Enum) else value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Element':
        """Create from dictionary (the 'type' key is ignored)."""
        kwargs = {}
        for f in fields(cls):
            if f.name not in data:
                if f.default is MISSING:
                    raise ValueError(f"{cls.kind}: missing field '{f.name}'")
                continue
            value = data[f.name]
            enum_type = cls._enums.get(f.name)
            if enum_type is not None:
                try:
                    value = enum_type(value)
                except ValueError:
                    valid = [m.value for m in enum_type]
                    raise ValueError(
                        f"{cls.kind}: invalid {f.name} {value!r}. Valid: {valid}"
                    ) from None
            kwargs[f.name] = value
        return cls(**kwargs)


# =============================================================================
# Settings
# =============================================================================

@dataclass(frozen=True)
class Setting(Element):
    """Page level directive, affects elements emitted after it."""


@dataclass(frozen=True)
class LabelDimensions(Setting):
    """Label size in millimetres, density in dots per mm."""

    kind: ClassVar[str] = 'label_dimensions'

    width: int
    height: int
    density: Optional[int] = None


@dataclass(frozen=True)
class FontSize(Setting):
    kind: ClassVar[str] = 'font_size'

    size: int


@dataclass(frozen=True)
class FontName(Setting):
    kind: ClassVar[str] = 'font_name'
    _enums: ClassVar[Dict[str, type]] = {'font': Font}

    font: Font


# =============================================================================
# Components
# =============================================================================

@dataclass(frozen=True)
class Component(Element):
    """Element drawn at a position given in dots."""

    x: int
    y: int


@dataclass(frozen=True)
class Text(Component):
    kind: ClassVar[str] = 'text'

    text: str


@dataclass(frozen=True)
class Barcode(Component):
    kind: ClassVar[str] = 'barcode'
    _enums: ClassVar[Dict[str, type]] = {'barcode_type': BarcodeType}

    barcode_type: BarcodeType
    data: str


@dataclass(frozen=True)
class Icon(Component):
    kind: ClassVar[str] = 'icon'
    _enums: ClassVar[Dict[str, type]] = {'icon_type': IconType}

    icon_type: IconType


@dataclass(frozen=True)
class Shape(Component):
    kind: ClassVar[str] = 'shape'
    _enums: ClassVar[Dict[str, type]] = {'shape_type': ShapeType}

    shape_type: ShapeType
    width: int
    height: int


@dataclass(frozen=True)
class Image(Component):
    """
    Raster image embedded as a graphic field.

    The source is only read when the label is serialized.
    """

    kind: ClassVar[str] = 'image'

    source: ImageSource

    @property
    def is_path(self) -> bool:
        return isinstance(self.source, (str, os.PathLike))

    def to_dict(self) -> Dict[str, Any]:
        """Paths are kept as-is, in-memory images are embedded as base64."""
        data: Dict[str, Any] = {'type': self.kind, 'x': self.x, 'y': self.y}

        if self.is_path:
            data['path'] = os.fspath(self.source)
            return data

        if isinstance(self.source, (bytes, bytearray)):
            raw = bytes(self.source)
        else:
            buffer = BytesIO()
            self.source.save(buffer, format='PNG')
            raw = buffer.getvalue()

        data['image_data'] = base64.b64encode(raw).decode('ascii')
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Image':
        for key in ('x', 'y'):
            if key not in data:
                raise ValueError(f"image: missing field '{key}'")

        if data.get('path'):
            source = data['path']
        elif data.get('image_data'):
            try:
                source = base64.b64decode(data['image_data'], validate=True)
            except (TypeError, ValueError) as e:
                raise ValueError(f'image: invalid base64 image_data ({e})') from None
        else:
            raise ValueError("image: 'path' or 'image_data' required")

        return cls(x=data['x'], y=data['y'], source=source)


# =============================================================================
# Registry
# =============================================================================

ELEMENT_TYPES: Dict[str, type] = {
    cls.kind: cls
    for cls in (LabelDimensions, FontSize, FontName, Text, Barcode, Icon, Shape, Image)
}


def element_from_dict(data: Dict[str, Any]) -> Element:
    """Create any element from its dictionary form."""
    if not isinstance(data, dict):
        raise ValueError(f'Element must be an object, got {type(data).__name__}')

    kind = data.get('type')
    element_type = ELEMENT_TYPES.get(kind) if isinstance(kind, str) else None
    if element_type is None:
        raise ValueError(
            f"Invalid element type {kind!r}. Valid: {list(ELEMENT_TYPES.keys())}"
        )
    return element_type.from_dict(data)
