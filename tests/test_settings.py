"""
<Program Name>
  test_settings.py

<Started>
  Oct 6, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Test gpgbridge/settings.py

"""
import unittest
import gpgbridge.settings


class TestSettings(unittest.TestCase):
  def test_debug_not_true(self):
    """gpgbridge.settings.DEBUG should not be commited with True. """
    self.assertFalse(gpgbridge.settings.DEBUG)

  def test_gpg_defaults(self):
    """The gpg version is guessed and gpg's own homedir used per default. """
    self.assertIsNone(gpgbridge.settings.GPG_VERSION)
    self.assertIsNone(gpgbridge.settings.GPG_HOMEDIR)

if __name__ == "__main__":
  unittest.main()
