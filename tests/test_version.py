import importlib.util
import os

import pytest


def load_version_module():
    path = os.path.join(
        os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
        "version.py")
    spec = importlib.util.spec_from_file_location("version", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_from_description():
    version = load_version_module()

    assert version.from_description("v0.2.1") == "0.2.1"
    assert version.from_description("0.2.1") == "0.2.1"
    assert version.from_description("v0.2.1-3-gabcdef0") \
        == "0.2.1.post3+gabcdef0"

    with pytest.raises(RuntimeError):
        version.from_description("v0.2.1-x-gabcdef0")
    with pytest.raises(RuntimeError):
        version.from_description("v0.2.1-3")


def test_store(tmp_path):
    version = load_version_module()

    target = tmp_path / "version.py"
    target.write_text('# header\nversion = "0.0.1"\nother = 1\n')
    version.store("1.2.3", str(target))
    assert target.read_text() == '# header\nversion = "1.2.3"\nother = 1\n'
