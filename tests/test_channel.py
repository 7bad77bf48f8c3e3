#!/usr/bin/env python
"""
<Program Name>
  test_channel.py

<Started>
  Oct 6, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Test the secret channel used to hand passphrases to gpg.

"""
import os
import logging
import unittest

from securesystemslib.exceptions import FormatError

import gpgbridge.log
from gpgbridge.gpg.channel import SecretChannel


def _read_all(fd):
  chunks = []
  while True:
    chunk = os.read(fd, 4096)
    if not chunk:
      break
    chunks.append(chunk)
  return b"".join(chunks)


def _is_open(fd):
  try:
    os.fstat(fd)
  except OSError:
    return False
  return True


class TestSecretChannel(unittest.TestCase):
  """Test SecretChannel. """

  def test_write_and_read(self):
    """Test the reader gets the secret unmodified followed by EOF. """
    with SecretChannel() as channel:
      channel.write(b"correct horse battery staple")
      self.assertEqual(_read_all(channel.read_fd),
          b"correct horse battery staple")


  def test_write_str(self):
    """Test str secrets are UTF-8 encoded. """
    with SecretChannel() as channel:
      channel.write(u"pässphrase")
      self.assertEqual(_read_all(channel.read_fd),
          u"pässphrase".encode("utf-8"))


  def test_write_once(self):
    """Test a channel can only be written once. """
    with SecretChannel() as channel:
      channel.write(b"first")
      with self.assertRaises(ValueError):
        channel.write(b"second")


  def test_write_after_close(self):
    """Test a closed channel cannot be written. """
    channel = SecretChannel()
    channel.close()
    with self.assertRaises(ValueError):
      channel.write(b"secret")


  def test_write_bad_type(self):
    """Test secrets must be bytes or str, without leaking the value. """
    with SecretChannel() as channel:
      with self.assertRaises(FormatError) as ctx:
        channel.write(123456789)

    self.assertNotIn("123456789", str(ctx.exception))


  def test_close_closes_both_ends(self):
    """Test closing releases both descriptors, also if never written. """
    channel = SecretChannel()
    read_fd = channel.read_fd
    write_fd = channel._write_fd # pylint: disable=protected-access
    self.assertTrue(_is_open(read_fd))
    self.assertTrue(_is_open(write_fd))

    channel.close()
    self.assertFalse(_is_open(read_fd))
    self.assertFalse(_is_open(write_fd))

    # Closing again is a no-op
    channel.close()


  def test_close_on_error(self):
    """Test the with block closes the channel if an error is raised. """
    with self.assertRaises(RuntimeError):
      with SecretChannel() as channel:
        read_fd = channel.read_fd
        channel.write(b"secret")
        raise RuntimeError("failed")

    self.assertFalse(_is_open(read_fd))


  def test_secret_redacted_until_closed(self):
    """Test the secret is redacted from log messages while in transit. """
    records = []
    handler = logging.Handler()
    handler.emit = records.append
    handler.addFilter(gpgbridge.log.SECRETS)
    logger = logging.getLogger("gpgbridge.test_channel")
    logger.addHandler(handler)
    try:
      with SecretChannel() as channel:
        channel.write(u"pässphrase")
        logger.warning("gpg said: %s", u"wrong pässphrase")
        self.assertEqual(records[-1].getMessage(), "gpg said: wrong ***")

      logger.warning("gpg said: %s", u"wrong pässphrase")
      self.assertEqual(records[-1].getMessage(), u"gpg said: wrong pässphrase")

    finally:
      logger.removeHandler(handler)


  def test_close_unread_large_secret(self):
    """Test closing does not block on a secret that fills the pipe but is
    never read. """
    channel = SecretChannel()
    channel.write(b"x" * (4 * 1024 * 1024))
    channel.close()
    self.assertIsNone(channel._write_fd) # pylint: disable=protected-access



if __name__ == "__main__":
  unittest.main()
