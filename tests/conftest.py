"""Shared fixtures: build small JAR files on the fly."""
import zipfile

import pytest


def write_jar(path, entries):
    with zipfile.ZipFile(path, 'w') as jar:
        for name in entries:
            jar.writestr(name, b'' if name.endswith('/') else b'\xca\xfe\xba\xbe')
    return path


def class_entries(*names):
    return [n.replace('.', '/') + '.class' for n in names]


@pytest.fixture
def make_jar(tmp_path):
    def make(name, *classes, extra=()):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        return write_jar(path, class_entries(*classes) + list(extra))
    return make
