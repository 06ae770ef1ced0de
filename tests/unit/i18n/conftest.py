"""Feature-level fixtures for i18n system tests."""

import io

import pytest

from i18nkit.i18n import Translator, load_yaml
from tests.factories.i18n import DA_DK_YAML, EN_US_YAML, RecordingLog


@pytest.fixture
def recording_log():
    """Diagnostic sink that records every call."""
    return RecordingLog()


@pytest.fixture
def en_language():
    """en-us language loaded from YAML."""
    return load_yaml(io.BytesIO(EN_US_YAML.encode("utf-8")), "en-us")


@pytest.fixture
def da_language():
    """da-dk language loaded from YAML."""
    return load_yaml(io.BytesIO(DA_DK_YAML.encode("utf-8")), "da-dk")


@pytest.fixture
def translator(en_language, da_language, recording_log):
    """Translator with en-us and da-dk and a recording sink."""
    translator = Translator(en_language, da_language)
    translator.set_log(recording_log)
    return translator


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - app.en-us.yml
    - fruit.en-us.yml
    - da-dk.yml
    """
    (tmp_path / "app.en-us.yml").write_text(
        "title:\n  one: One world\n  other: Other world\n", encoding="utf-8"
    )
    (tmp_path / "fruit.en-us.yml").write_text(
        'apple.count:\n  one: 1 apple\n  few: "{{.Count}} apples"\n'
        "title:\n  one: Overridden world\n",
        encoding="utf-8",
    )
    (tmp_path / "da-dk.yml").write_text(
        "title:\n  one: En verden\n", encoding="utf-8"
    )
    return tmp_path
