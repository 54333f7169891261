import requests

from zpl_label import LabelBuilder, BarcodeType
from zpl_label.client import LabelClient


class FakeResponse:
    def __init__(self, payload):
        self._payload = payload

    def json(self):
        return self._payload


def test_render_posts_label(monkeypatch):
    calls = []

    def fake_post(url, json=None, headers=None, timeout=None):
        calls.append((url, json, headers))
        return FakeResponse({'success': True, 'zpl': '^XA\n^XZ\n'})

    monkeypatch.setattr(requests, 'post', fake_post)
    label = LabelBuilder().add_barcode(10, 30, BarcodeType.CODE128, '12345').build()

    client = LabelClient('http://labels.local/', api_key='secret')
    result = client.render(label)

    assert result['success'] is True
    url, body, headers = calls[0]
    assert url == 'http://labels.local/api/labels/render'
    assert body['format'] == 'zpl'
    assert body['elements'] == label.to_dict()['elements']
    assert headers['Authorization'] == 'Bearer secret'


def test_render_zpl(monkeypatch):
    monkeypatch.setattr(
        requests, 'post',
        lambda *args, **kwargs: FakeResponse({'success': True, 'zpl': '^XA\n^XZ\n'}),
    )
    assert LabelClient().render_zpl(LabelBuilder().build()) == '^XA\n^XZ\n'


def test_render_zpl_failure(monkeypatch):
    monkeypatch.setattr(
        requests, 'post',
        lambda *args, **kwargs: FakeResponse({'success': False, 'error': 'bad'}),
    )
    assert LabelClient().render_zpl(LabelBuilder().build()) is None


def test_connection_error_is_reported(monkeypatch):
    def fake_get(*args, **kwargs):
        raise requests.exceptions.ConnectionError()

    monkeypatch.setattr(requests, 'get', fake_get)
    client = LabelClient('http://nowhere:1')

    assert client.health() == {'success': False, 'error': 'Cannot connect to http://nowhere:1'}
    assert client.is_online() is False


def test_is_online(monkeypatch):
    monkeypatch.setattr(requests, 'get', lambda *args, **kwargs: FakeResponse({'status': 'online'}))
    assert LabelClient().is_online() is True


def test_get_used_for_non_post(monkeypatch):
    calls = []

    def fake_get(url, headers=None, timeout=None):
        calls.append(url)
        return FakeResponse({'status': 'online'})

    monkeypatch.setattr(requests, 'get', fake_get)

    assert LabelClient('http://labels.local').health() == {'status': 'online'}
    assert calls == ['http://labels.local/health']
