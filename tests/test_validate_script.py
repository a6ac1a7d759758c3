import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).parent.parent / "scripts" / "validate_metadata.py"


@pytest.fixture
def validate():
    module_spec = importlib.util.spec_from_file_location("validate_metadata", SCRIPT)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module.validate


def test_no_arguments(validate, capsys):
    assert validate([]) == 2
    assert "Usage" in capsys.readouterr().out


def test_valid_descriptor(validate, tmp_path, nft_tutorial_view, capsys):
    path = tmp_path / "metadata.json"
    path.write_text(json.dumps(nft_tutorial_view))

    assert validate([str(path)]) == 0
    assert "3 standards" in capsys.readouterr().out


def test_invalid_descriptor(validate, tmp_path, capsys):
    good = tmp_path / "good.json"
    good.write_text("{}")
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"standards": [{"standard": "nep171"}]}))

    assert validate([str(good), str(bad)]) == 1
    out = capsys.readouterr().out
    assert "not declared" in out
    assert "failed validation" in out
