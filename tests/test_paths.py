import os
import unittest
from unittest.mock import patch

from hexx.core import paths


class TestPaths(unittest.TestCase):
    def test_xdg_config_home(self):
        with patch("hexx.core.paths.os.name", "posix"):
            with patch.dict(os.environ, {"XDG_CONFIG_HOME": "/tmp/xdg"}):
                self.assertEqual(
                    paths.config_path(),
                    os.path.join("/tmp/xdg", "hexx", "config.json"),
                )

    def test_default_config_home(self):
        env = {key: value for key, value in os.environ.items() if key != "XDG_CONFIG_HOME"}
        with patch("hexx.core.paths.os.name", "posix"):
            with patch.dict(os.environ, env, clear=True):
                self.assertEqual(
                    paths.config_dir(),
                    os.path.join(os.path.expanduser("~"), ".config", "hexx"),
                )

    def test_windows_appdata(self):
        with patch("hexx.core.paths.os.name", "nt"):
            with patch.dict(os.environ, {"APPDATA": "C:/Users/me/AppData/Roaming"}):
                self.assertEqual(
                    paths.config_dir(),
                    os.path.join("C:/Users/me/AppData/Roaming", "hexx"),
                )


if __name__ == "__main__":
    unittest.main()
