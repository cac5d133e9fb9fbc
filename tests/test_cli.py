# tests/test_cli.py
import json

import pysubs2

from jpsubs.cli import default_output_path, main


def _write_ass(path, rows):
    subs = pysubs2.SSAFile()
    for text, start, end in rows:
        subs.append(pysubs2.SSAEvent(start=start, end=end, text=text))
    subs.save(str(path))
    return path


def test_default_output_path(tmp_path):
    assert default_output_path(tmp_path / 'ep01.ass', '.normalized') == tmp_path / 'ep01.normalized.ass'


def test_round_trip_through_ass_file(tmp_path, capsys):
    src = _write_ass(tmp_path / 'ep01.ass', [
        ('（Ａ）ｶﾞｲﾄﾞ', 0, 1000),
        ('（Ｂ）ｶﾞｲﾄﾞ', 1000, 2000),
    ])

    assert main([str(src)]) == 0

    out = pysubs2.load(str(tmp_path / 'ep01.normalized.ass'))
    assert [(e.text, e.start, e.end, e.style) for e in out] == [('ガイド', 0, 2000, 'Dial-JPN')]
    assert 'Processed 1 line(s)' in capsys.readouterr().out


def test_output_and_style_options(tmp_path):
    src = _write_ass(tmp_path / 'ep01.ass', [('テスト', 0, 1000)])
    dst = tmp_path / 'out' / 'clean.srt'
    dst.parent.mkdir()

    assert main([str(src), '-o', str(dst), '--style', 'Main']) == 0

    out = pysubs2.load(str(dst))
    assert [e.text for e in out] == ['テスト']


def test_settings_file_is_honoured(tmp_path):
    settings = tmp_path / 'settings.json'
    settings.write_text(json.dumps({'default_style': 'Sign', 'output_suffix': '.clean'}), encoding='utf-8')
    src = _write_ass(tmp_path / 'ep02.ass', [('テスト', 0, 1000)])

    before = settings.read_bytes()

    assert main([str(src), '--settings', str(settings)]) == 0

    out = pysubs2.load(str(tmp_path / 'ep02.clean.ass'))
    assert out[0].style == 'Sign'
    assert settings.read_bytes() == before


def test_malformed_settings_file_exits_2_and_is_left_alone(tmp_path, capsys):
    settings = tmp_path / 'settings.json'
    settings.write_text('{"default_style": "Sign", "output_suffix": ".clean",}', encoding='utf-8')
    before = settings.read_bytes()
    src = _write_ass(tmp_path / 'ep02.ass', [('テスト', 0, 1000)])

    assert main([str(src), '--settings', str(settings)]) == 2

    assert settings.read_bytes() == before
    assert 'Could not read settings' in capsys.readouterr().err
    assert not (tmp_path / 'ep02.normalized.ass').exists()
    assert not (tmp_path / 'ep02.clean.ass').exists()


def test_missing_input_exits_2(tmp_path, capsys):
    assert main([str(tmp_path / 'missing.ass')]) == 2
    assert 'Could not read' in capsys.readouterr().err


def test_empty_input_exits_1(tmp_path):
    src = _write_ass(tmp_path / 'empty.ass', [])

    assert main([str(src)]) == 1
    assert not (tmp_path / 'empty.normalized.ass').exists()


def test_bad_rules_dir_exits_1(tmp_path, capsys):
    rules = tmp_path / 'rules'
    rules.mkdir()
    (rules / 'symbols.json').write_text(
        '{"version": 1, "rules": [{"pattern": "[", "replacement": ""}]}', encoding='utf-8'
    )
    src = _write_ass(tmp_path / 'ep01.ass', [('テスト', 0, 1000)])

    assert main([str(src), '--rules-dir', str(rules)]) == 1
    assert 'Invalid rule pattern' in capsys.readouterr().err


def test_log_dir_gets_per_file_log(tmp_path):
    src = _write_ass(tmp_path / 'ep03.ass', [('ﾃｽﾄ', 0, 1000)])
    log_dir = tmp_path / 'logs'

    assert main([str(src), '--log-dir', str(log_dir)]) == 0

    content = (log_dir / 'ep03.log').read_text(encoding='utf-8')
    assert content.splitlines()[0] == f'Input: {src}'
    assert 'Processed 1 line(s)' in content
    assert '--- Pass Summary ---' in content
    assert 'character_width' in content
    assert f"Output: {tmp_path / 'ep03.normalized.ass'}" in content


def test_log_dir_records_unprocessed_input(tmp_path):
    src = _write_ass(tmp_path / 'empty.ass', [])
    log_dir = tmp_path / 'logs'

    assert main([str(src), '--log-dir', str(log_dir)]) == 1

    content = (log_dir / 'empty.log').read_text(encoding='utf-8')
    assert 'Not processed:' in content
    assert 'Output:' not in content
