"""
ZPL Label Client
================

Python SDK for the ZPL Label render service.

Usage:
    from zpl_label import LabelBuilder, BarcodeType
    from zpl_label.client import LabelClient

    client = LabelClient('http://localhost:5100', api_key='your-key')

    label = (
        LabelBuilder()
        .add_text(10, 10, 'Hello World')
        .add_barcode(10, 30, BarcodeType.CODE128, '12345')
        .build()
    )

    zpl = client.render_zpl(label)
"""

import requests
from typing import Dict, Any, Optional

from .models import Label


class LabelClient:
    """Client for the ZPL Label render service."""

    def __init__(self, base_url: str = 'http://localhost:5100', api_key: str = None):
        """
        Initialize client.

        Args:
            base_url: Base URL of the render service
            api_key: API key for authentication
        """
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key

    def _headers(self) -> Dict[str, str]:
        """Get request headers."""
        headers = {'Content-Type': 'application/json'}
        if self.api_key:
            headers['Authorization'] = f'Bearer {self.api_key}'
        return headers

    def _request(self, method: str, endpoint: str, data: Dict = None) -> Dict[str, Any]:
        """Make API request."""
        url = f'{self.base_url}{endpoint}'

        try:
            if method == 'POST':
                response = requests.post(url, json=data, headers=self._headers(), timeout=60)
            else:
                response = requests.get(url, headers=self._headers(), timeout=30)
            return response.json()

        except requests.exceptions.Timeout:
            return {'success': False, 'error': 'Request timeout'}
        except requests.exceptions.ConnectionError:
            return {'success': False, 'error': f'Cannot connect to {self.base_url}'}
        except ValueError as e:
            return {'success': False, 'error': str(e)}

    # =========================================================================
    # Health
    # =========================================================================

    def health(self) -> Dict[str, Any]:
        """Check service health."""
        return self._request('GET', '/health')

    def is_online(self) -> bool:
        """Check if service is online."""
        result = self.health()
        return result.get('status') == 'online'

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, label: Label, format_name: str = 'zpl') -> Dict[str, Any]:
        """
        Render a label on the service.

        Args:
            label: Built label
            format_name: Markup format

        Returns:
            Response dict with 'zpl' on success
        """
        data = label.to_dict()
        data['format'] = format_name
        return self._request('POST', '/api/labels/render', data)

    def render_zpl(self, label: Label) -> Optional[str]:
        """Render a label and return the ZPL text (None on failure)."""
        result = self.render(label)
        return result.get('zpl') if result.get('success') else None
