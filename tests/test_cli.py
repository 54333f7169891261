import io
import json

from zpl_label import LabelBuilder
from zpl_label.__main__ import main, demo_label


def test_demo(capsys):
    assert main(['demo']) == 0

    out = capsys.readouterr().out
    assert out == demo_label().to_zpl()
    assert '^FO10,10^FDHello World^FS' in out


def test_render_file(tmp_path, capsys):
    label = LabelBuilder().add_text(1, 2, 'from file').build()
    path = tmp_path / 'label.json'
    path.write_text(json.dumps(label.to_dict()), encoding='utf-8')

    assert main(['render', str(path)]) == 0
    assert capsys.readouterr().out == label.to_zpl()


def test_render_stdin(monkeypatch, capsys):
    label = LabelBuilder().add_text(1, 2, 'from stdin').build()
    monkeypatch.setattr('sys.stdin', io.StringIO(json.dumps(label.to_dict())))

    assert main(['render', '-']) == 0
    assert capsys.readouterr().out == label.to_zpl()


def test_render_missing_file(tmp_path, capsys):
    assert main(['render', str(tmp_path / 'missing.json')]) == 1
    assert capsys.readouterr().out == ''


def test_render_bad_image(tmp_path, capsys):
    path = tmp_path / 'label.json'
    path.write_text(json.dumps({'elements': [
        {'type': 'text', 'x': 0, 'y': 0, 'text': 'x'},
        {'type': 'image', 'x': 0, 'y': 0, 'path': str(tmp_path / 'nope.png')},
    ]}), encoding='utf-8')

    assert main(['render', str(path)]) == 1
    assert capsys.readouterr().out == ''
