"""
Settings tests (explicit env mappings; .env loading not involved).
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from menutext.config import Settings


class TestSettings:

    def test_defaults(self):
        s = Settings.from_env({})
        assert s.site_url == "http://www.weswings.com"
        assert s.doc_dir == "ww"
        assert s.download and s.email and not s.clear
        assert not s.track_breakfast
        assert s.smtp_port == 587
        assert s.tesseract_config == "--oem 1 --psm 6"

    def test_overrides(self):
        s = Settings.from_env({
            "MENU_SITE_URL": "http://menus.example.com/",
            "MENU_DOWNLOAD": "0",
            "MENU_TRACK_BREAKFAST": "yes",
            "MENU_WORKERS": "4",
            "SMTP_PORT": "2525",
            "LOG_LEVEL": "debug",
        })
        assert s.site_url == "http://menus.example.com"
        assert s.download is False
        assert s.track_breakfast is True
        assert s.workers == 4
        assert s.smtp_port == 2525
        assert s.log_level == "DEBUG"

    def test_workers_floor(self):
        assert Settings.from_env({"MENU_WORKERS": "0"}).workers == 1

    def test_bad_integer(self):
        with pytest.raises(ValueError, match="SMTP_PORT"):
            Settings.from_env({"SMTP_PORT": "abc"})
