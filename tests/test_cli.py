import json

import pytest

from duplicate_classes.cli import main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ('DUPLICATE_CLASSES_INCLUDE_SCOPE', 'DUPLICATE_CLASSES_EXCLUDE_SCOPE',
                 'DUPLICATE_CLASSES_LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)


def test_text_report(make_jar, tmp_path, capsys):
    make_jar('lib/a.jar', 'com.x.Foo', 'com.x.Bar')
    make_jar('lib/b.jar', 'com.x.Foo', 'com.y.Baz')
    make_jar('lib/c.jar', 'com.z.Qux')
    assert main([str(tmp_path / 'lib')]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ['', '', 'com.x.Foo', '', ' a.jar', ' b.jar']


def test_no_overlaps(make_jar, tmp_path, capsys):
    make_jar('lib/a.jar', 'com.x.Foo')
    make_jar('lib/b.jar', 'com.y.Bar')
    assert main([str(tmp_path / 'lib')]) == 0
    assert capsys.readouterr().out.strip() == 'No archives with overlapping classes were detected.'


def test_verbose_logs_each_pair_once(make_jar, tmp_path, capsys):
    make_jar('lib/a.jar', 'com.x.Foo', 'com.x.Bar')
    make_jar('lib/b.jar', 'com.x.Foo')
    assert main(['-v', str(tmp_path / 'lib')]) == 0
    captured = capsys.readouterr()
    line = 'a.jar fully contains b.jar class entries'
    assert line not in captured.out
    assert captured.err.splitlines().count(line) == 1


def test_json_report(make_jar, tmp_path, capsys):
    make_jar('lib/a.jar', *[f'p.C{i}' for i in range(12)])
    make_jar('lib/b.jar', *[f'p.C{i}' for i in range(12)])
    assert main(['--format', 'json', '--limit', '3', str(tmp_path / 'lib')]) == 0
    data = json.loads(capsys.readouterr().out)
    assert len(data['groups'][0]['classes']) == 12
    assert data['groups'][0]['archives'] == ['a.jar', 'b.jar']


def test_manifest_and_scope(make_jar, tmp_path, capsys):
    make_jar('a.jar', 'com.x.Foo')
    make_jar('b.jar', 'com.x.Foo')
    manifest = tmp_path / 'deps.txt'
    manifest.write_text('g:a:1 a.jar compile app\ng:b:1 b.jar test app g:b:1\n')
    assert main(['--manifest', str(manifest)]) == 0
    assert 'No archives' in capsys.readouterr().out
    assert main(['--manifest', str(manifest), '--include-scope', 'compile,test']) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-2:] == [' g:a:1 [app]', ' g:b:1 [app, g:b:1]']


def test_scope_from_environment(make_jar, tmp_path, capsys, monkeypatch):
    make_jar('a.jar', 'com.x.Foo')
    make_jar('b.jar', 'com.x.Foo')
    monkeypatch.setenv('DUPLICATE_CLASSES_EXCLUDE_SCOPE', 'compile')
    assert main([str(tmp_path)]) == 0
    assert 'No archives' in capsys.readouterr().out


def test_configuration_error_exit_status(tmp_path):
    manifest = tmp_path / 'deps.txt'
    manifest.write_text('broken-line\n')
    assert main(['--manifest', str(manifest)]) == 1


def test_bad_limit():
    with pytest.raises(SystemExit) as info:
        main(['--limit', '0'])
    assert info.value.code == 2


def test_manifest_and_paths_keep_every_archive(make_jar, tmp_path, capsys):
    make_jar('other/a.jar', 'com.y.Bar')
    make_jar('lib/a.jar', 'com.x.Foo')
    make_jar('lib2/c.jar', 'com.y.Bar')
    manifest = tmp_path / 'deps.txt'
    manifest.write_text('a.jar other/a.jar\n')
    assert main(['--format', 'json', '--manifest', str(manifest),
                 str(tmp_path / 'lib'), str(tmp_path / 'lib2')]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data['groups'] == [{'classes': ['com.y.Bar'], 'archives': ['a.jar', 'c.jar']}]
    assert len(data['archives']) == 3


def test_module_info_counted_unless_skipped(make_jar, tmp_path, capsys):
    make_jar('lib/a.jar', 'a.A', extra=['module-info.class'])
    make_jar('lib/b.jar', 'b.B', extra=['module-info.class'])
    assert main([str(tmp_path / 'lib')]) == 0
    assert 'module-info' in capsys.readouterr().out.splitlines()
    assert main(['--skip-module-info', str(tmp_path / 'lib')]) == 0
    assert 'No archives' in capsys.readouterr().out
