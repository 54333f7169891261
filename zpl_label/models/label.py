"""
Label Model
===========

An immutable, ordered sequence of elements.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Tuple

from .elements import Element, element_from_dict


@dataclass(frozen=True)
class Label:
    """Built label. Element order is emission order and draw order."""

    elements: Tuple[Element, ...] = ()

    def __post_init__(self):
        # Accept any iterable but always store a tuple
        object.__setattr__(self, 'elements', tuple(self.elements))

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def to_zpl(self) -> str:
        """Serialize to a complete ZPL document (^XA ... ^XZ)."""
        from ..encoders import ZPLEncoder

        return ZPLEncoder.encode_label(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {'elements': [element.to_dict() for element in self.elements]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Label':
        """Create from dictionary."""
        if not isinstance(data, dict):
            raise ValueError('Label must be an object')

        elements = data.get('elements', [])
        if not isinstance(elements, list):
            raise ValueError("'elements' must be a list")

        return cls(elements=tuple(element_from_dict(item) for item in elements))
