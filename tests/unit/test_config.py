import unittest
from unittest import mock

import pytest

from scrap2md.core.config import ConfigManager
from scrap2md.core.errors import ConfigError



def test_defaults_when_nothing_is_set(clean_env):
    cfg = ConfigManager(env_files=[]).load_all()
    assert cfg.zenn.blob_url("abc") == "https://zenn.dev/api/scraps/abc/blob.json"
    assert cfg.zenn.signin_url == "https://zenn.dev/enter"
    assert cfg.zenn.session_cookie_name == "_zenn_session"
    assert cfg.selenium.webdriver_url == "http://localhost:9515"
    assert cfg.selenium.settle_seconds == 2.0
    assert cfg.export.style == "flat"
    assert cfg.export.skip_header is False
    assert cfg.export.interactive_login is True
    assert cfg.cookie_from_env() is None


def test_env_file_is_loaded(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("ZENN_COOKIE=_zenn_session=fromfile\nRENDER_STYLE=quote\nSKIP_HEADER=yes\n")
    cfg = ConfigManager(env_files=[tmp_path / "missing.env", env_file]).load_all()
    assert cfg.loaded_env_file == env_file
    assert cfg.cookie_from_env() == "_zenn_session=fromfile"
    assert cfg.export.style == "quote"
    assert cfg.export.skip_header is True


def test_real_environment_beats_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("ZENN_COOKIE=fromfile\n")
    clean_env.setenv("ZENN_COOKIE", "fromenv")
    cfg = ConfigManager(env_files=[env_file]).load_all()
    assert cfg.cookie_from_env() == "fromenv"


def test_cookie_env_name_override(clean_env):
    clean_env.setenv("MY_COOKIE", "_zenn_session=custom")
    clean_env.setenv("ZENN_COOKIE", "_zenn_session=default")
    cfg = ConfigManager(env_files=[]).load_all()
    assert cfg.cookie_from_env("MY_COOKIE") == "_zenn_session=custom"
    clean_env.setenv("ZENN_COOKIE_ENV", "MY_COOKIE")
    assert ConfigManager(env_files=[]).load_all().cookie_from_env() == "_zenn_session=custom"


@pytest.mark.parametrize(
    "key,value",
    [("RENDER_STYLE", "tree"), ("HTTP_TIMEOUT", "soon"), ("LOGIN_SETTLE_SECONDS", "-1")],
)
def test_invalid_values_raise_config_error(clean_env, key, value):
    clean_env.setenv(key, value)
    with pytest.raises(ConfigError):
        ConfigManager(env_files=[]).load_all()


class ConfigManagerTests(unittest.TestCase):
    def test_blank_cookie_env_counts_as_absent(self):
        with mock.patch.dict("os.environ", {"ZENN_COOKIE": "   "}):
            cfg = ConfigManager(env_files=[])
            self.assertIsNone(cfg.cookie_from_env())


if __name__ == "__main__":
    unittest.main()
