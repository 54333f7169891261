import base64

import pytest

from zpl_label import LabelBuilder, BarcodeType
from zpl_label import app as app_module


@pytest.fixture
def client():
    app_module.app.config['TESTING'] = True
    with app_module.app.test_client() as client:
        yield client


def _hello_label():
    return (
        LabelBuilder()
        .add_text(10, 10, 'Hello World')
        .add_barcode(10, 30, BarcodeType.CODE128, '12345')
        .build()
    )


def test_health(client):
    resp = client.get('/health')
    assert resp.status_code == 200
    assert resp.get_json()['status'] == 'online'


def test_api_info(client):
    payload = client.get('/api').get_json()
    assert payload['formats'] == ['zpl']
    assert payload['endpoints']['render'] == '/api/labels/render'


def test_render_returns_same_zpl_as_label(client):
    label = _hello_label()

    resp = client.post('/api/labels/render', json=label.to_dict())

    assert resp.status_code == 200
    payload = resp.get_json()
    assert payload['success'] is True
    assert payload['zpl'] == label.to_zpl()
    assert payload['elements'] == 2


def test_render_raw(client):
    label = _hello_label()

    resp = client.post('/api/labels/render?raw=true', json=label.to_dict())

    assert resp.status_code == 200
    assert resp.mimetype == 'text/plain'
    assert resp.get_data(as_text=True) == label.to_zpl()


def test_render_embedded_image(client, png_bytes):
    body = {'elements': [{
        'type': 'image', 'x': 0, 'y': 0,
        'image_data': base64.b64encode(png_bytes).decode('ascii'),
    }]}

    resp = client.post('/api/labels/render', json=body)

    assert resp.status_code == 200
    assert resp.get_json()['zpl'] == '^XA\n^FO0,0^GFA,2,2,1,FFFF^FS\n^XZ\n'


def test_render_requires_body(client):
    resp = client.post('/api/labels/render')
    assert resp.status_code == 400
    assert resp.get_json()['success'] is False


def test_render_rejects_unknown_format(client):
    resp = client.post('/api/labels/render', json={'elements': [], 'format': 'epl'})
    assert resp.status_code == 400


def test_render_rejects_malformed_element(client):
    resp = client.post('/api/labels/render', json={'elements': [{'type': 'circle'}]})
    assert resp.status_code == 400
    assert 'circle' in resp.get_json()['error']


def test_render_rejects_paths_by_default(client, logo_path, monkeypatch):
    monkeypatch.setattr(app_module, 'ALLOW_IMAGE_PATHS', False)
    body = {'elements': [{'type': 'image', 'x': 0, 'y': 0, 'path': str(logo_path)}]}

    resp = client.post('/api/labels/render', json=body)

    assert resp.status_code == 400


def test_render_allows_paths_when_enabled(client, logo_path, monkeypatch):
    monkeypatch.setattr(app_module, 'ALLOW_IMAGE_PATHS', True)
    body = {'elements': [{'type': 'image', 'x': 0, 'y': 0, 'path': str(logo_path)}]}

    resp = client.post('/api/labels/render', json=body)

    assert resp.status_code == 200
    assert '^GFA,4,4,2,F800F800' in resp.get_json()['zpl']


def test_render_undecodable_image(client):
    body = {'elements': [
        {'type': 'text', 'x': 0, 'y': 0, 'text': 'before'},
        {'type': 'image', 'x': 0, 'y': 0,
         'image_data': base64.b64encode(b'not an image').decode('ascii')},
    ]}

    resp = client.post('/api/labels/render', json=body)

    assert resp.status_code == 422
    payload = resp.get_json()
    assert payload['success'] is False
    assert 'zpl' not in payload


def test_api_key_required_when_configured(client, monkeypatch):
    monkeypatch.setattr(app_module, 'API_KEY', 'secret')
    body = _hello_label().to_dict()

    assert client.post('/api/labels/render', json=body).status_code == 401

    resp = client.post('/api/labels/render', json=body,
                       headers={'Authorization': 'Bearer secret'})
    assert resp.status_code == 200

    resp = client.post('/api/labels/render', json={**body, 'api_key': 'secret'})
    assert resp.status_code == 200


def test_render_rejects_list_body(client):
    resp = client.post('/api/labels/render', json=[{'type': 'text'}])

    assert resp.status_code == 400
    assert resp.get_json()['success'] is False


def test_api_key_check_with_list_body(client, monkeypatch):
    monkeypatch.setattr(app_module, 'API_KEY', 'secret')

    assert client.post('/api/labels/render', json=[{'type': 'text'}]).status_code == 401

    resp = client.post('/api/labels/render', json=[{'type': 'text'}],
                       headers={'Authorization': 'Bearer secret'})
    assert resp.status_code == 400


def test_render_rejects_non_string_format(client):
    resp = client.post('/api/labels/render', json={'elements': [], 'format': ['zpl']})
    assert resp.status_code == 400


def test_render_rejects_non_string_element_type(client):
    resp = client.post('/api/labels/render', json={'elements': [{'type': ['text']}]})
    assert resp.status_code == 400
