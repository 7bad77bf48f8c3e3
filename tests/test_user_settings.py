"""
<Program Name>
  test_user_settings.py

<Started>
  Oct 6, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Test gpgbridge/user_settings.py

"""
import os
import unittest
import gpgbridge.settings
import gpgbridge.user_settings

from tests.common import TmpDirMixin

RC_FILE = """\
[gpgbridge settings]
GPG_HOMEDIR = r/c/file
gpg_version = v1
NEW_RC_SETTING = new rc setting
"""


class TestUserSettings(unittest.TestCase, TmpDirMixin):
  @classmethod
  def setUpClass(cls):
    # Backup settings to restore them in `tearDownClass`
    cls.settings_backup = {}
    for key in dir(gpgbridge.settings):
      cls.settings_backup[key] = getattr(gpgbridge.settings, key)

    # Change into a test dir with an `.gpgbridgerc`, which is loaded (from
    # CWD) in `user_settings.set_settings` related tests
    cls.set_up_test_dir()
    with open(".gpgbridgerc", "w") as rc_file:
      rc_file.write(RC_FILE)

    os.environ["GPGBRIDGE_GPG_VERSION"] = "v2"
    os.environ["GPGBRIDGE_GPG_HOMEDIR"] = "e/n/v"
    os.environ["GPGBRIDGE_NOT_WHITELISTED"] = "parsed"
    os.environ["NOT_PARSED"] = "ignored"


  @classmethod
  def tearDownClass(cls):
    cls.tear_down_test_dir()

    # Other unittests might depend on defaults:
    # Restore monkey patched settings ...
    for key, val in cls.settings_backup.items():
      setattr(gpgbridge.settings, key, val)

    # ... and delete test environment variables
    del os.environ["GPGBRIDGE_GPG_VERSION"]
    del os.environ["GPGBRIDGE_GPG_HOMEDIR"]
    del os.environ["GPGBRIDGE_NOT_WHITELISTED"]
    del os.environ["NOT_PARSED"]


  def test_get_rc(self):
    """ Test rcfile parsing in CWD. """
    rc_dict = gpgbridge.user_settings.get_rc()

    # Parsed and used by `set_settings` to monkeypatch settings
    self.assertEqual(rc_dict["GPG_HOMEDIR"], "r/c/file")

    # Parsed but ignored in `set_settings` (not in case sensitive whitelist)
    self.assertEqual(rc_dict["gpg_version"], "v1")
    self.assertEqual(rc_dict["NEW_RC_SETTING"], "new rc setting")


  def test_get_env(self):
    """ Test environment variables parsing and prefix stripping. """
    env_dict = gpgbridge.user_settings.get_env()

    # Parsed and used by `set_settings` to monkeypatch settings
    self.assertEqual(env_dict["GPG_VERSION"], "v2")
    self.assertEqual(env_dict["GPG_HOMEDIR"], "e/n/v")

    # Parsed but ignored in `set_settings` (not in whitelist)
    self.assertEqual(env_dict["NOT_WHITELISTED"], "parsed")

    # Not parsed because of missing prefix
    self.assertFalse("NOT_PARSED" in env_dict)


  def test_set_settings(self):
    """ Test precedence of rc over env and whitelisting. """
    gpgbridge.user_settings.set_settings()

    # From envvar GPGBRIDGE_GPG_VERSION (the rcfile key has the wrong case)
    self.assertEqual(gpgbridge.settings.GPG_VERSION, "v2")

    # From RCfile setting (has precedence over envvar setting)
    self.assertEqual(gpgbridge.settings.GPG_HOMEDIR, "r/c/file")

    # Not whitelisted rcfile settings are ignored by `set_settings`
    self.assertTrue("NEW_RC_SETTING" not in dir(gpgbridge.settings))

    # Not whitelisted envvars are ignored by `set_settings`
    self.assertTrue("NOT_WHITELISTED" not in dir(gpgbridge.settings))


if __name__ == "__main__":
  unittest.main()
