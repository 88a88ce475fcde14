import json

import pytest

from imagesig.settings import (
    PubKeys,
    SettingsDeserializationError,
    load_settings_file,
    parse_settings_text,
    read_settings_file,
)


SETTINGS_YAML = """
signatures:
  - image: registry.testing.lan/busybox:1.0.0
    pubKeys:
      - |
        -----BEGIN PUBLIC KEY-----
        abc
        -----END PUBLIC KEY-----
    annotations:
      env: prod
modifyImagesWithDigest: false
"""


class TestParseSettingsText:
    def test_yaml(self):
        raw = parse_settings_text(SETTINGS_YAML, suffix=".yaml")
        assert raw["modifyImagesWithDigest"] is False
        assert raw["signatures"][0]["annotations"] == {"env": "prod"}

    def test_json(self):
        raw = parse_settings_text('{"signatures": []}', suffix=".json")
        assert raw == {"signatures": []}

    def test_json_content_without_suffix(self):
        assert parse_settings_text('{"signatures": []}') == {"signatures": []}

    @pytest.mark.parametrize("suffix", [".json", ".yml", None])
    def test_empty_document(self, suffix):
        assert parse_settings_text("", suffix=suffix) == {}

    def test_top_level_must_be_mapping(self):
        with pytest.raises(SettingsDeserializationError):
            parse_settings_text("- a\n- b\n")

    def test_malformed_json(self):
        with pytest.raises(SettingsDeserializationError):
            parse_settings_text("{not json", suffix=".json")

    def test_malformed_yaml(self):
        with pytest.raises(SettingsDeserializationError):
            parse_settings_text("signatures: [unclosed", suffix=".yaml")


class TestLoadSettingsFile:
    def test_yaml_file(self, tmp_path):
        path = tmp_path / "settings.yml"
        path.write_text(SETTINGS_YAML, encoding="utf-8")
        settings = load_settings_file(path)
        assert isinstance(settings.signatures[0], PubKeys)
        assert settings.signatures[0].pub_keys[0].startswith("-----BEGIN PUBLIC KEY-----")
        assert settings.modify_images_with_digest is False

    def test_json_file(self, tmp_path, keyless_payload):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps(keyless_payload), encoding="utf-8")
        settings = load_settings_file(str(path))
        assert settings.signatures[0].image == "reg/img:1.0"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings_file(tmp_path / "nope.yml")

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "settings.yml"
        path.write_bytes(b"signatures:\n  - image: \xff\xfe\n")
        with pytest.raises(SettingsDeserializationError) as exc:
            load_settings_file(path)
        assert "UTF-8" in str(exc.value)


class TestReadSettingsFile:
    def test_returns_raw_mapping(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("signatures: []\n", encoding="utf-8")
        assert read_settings_file(path) == {"signatures": []}

    def test_does_not_build_settings(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text('{"signatures": [{"image": "img"}]}', encoding="utf-8")
        assert read_settings_file(path) == {"signatures": [{"image": "img"}]}
