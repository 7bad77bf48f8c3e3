"""
<Module Name>
  channel.py

<Started>
  Oct 6, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  A private, one-way, single-use pipe to hand a secret (e.g. a passphrase) to
  a child process without putting it into the child's arguments, environment
  or standard streams.

  The read end is passed to the child as an additional inherited file
  descriptor, whose number is given to gpg via `--passphrase-fd`. The secret
  is written by a background thread, because a write to a pipe may block
  until the child starts reading.

  Usage:

  ```
  with SecretChannel() as channel:
    channel.write(passphrase)
    gpgbridge.process.run_get_output(
        ["gpg2", "--passphrase-fd", str(channel.read_fd), ...],
        pass_fds=[channel.read_fd])
  ```
"""
import os
import logging
import threading

import gpgbridge.formats
import gpgbridge.log

# Inherits from gpgbridge base logger (c.f. gpgbridge.log)
log = logging.getLogger(__name__)


class SecretChannel(object):
  """Owns both ends of a pipe, which are closed on `close` or when leaving
  the `with` block, regardless of how it is left.

  Attributes:
    read_fd: The descriptor to be inherited by the child process.

  """
  def __init__(self):
    self.read_fd, self._write_fd = os.pipe()
    self._lock = threading.Lock()
    self._writer = None
    self._closed = False
    self._registered = None

  def __enter__(self):
    return self

  def __exit__(self, exc_type, exc_value, traceback):
    self.close()

  def _close_write_end(self):
    with self._lock:
      if self._write_fd is not None:
        os.close(self._write_fd)
        self._write_fd = None

  def _write(self, data):
    try:
      view = memoryview(data)
      while view:
        written = os.write(self._write_fd, view)
        view = view[written:]

    except BrokenPipeError:
      # The reader is gone, e.g. the child failed before reading. The
      # child's exit status is what the caller gets to see.
      log.debug("Secret channel closed by reader before all data was written")

    finally:
      self._close_write_end()

  def write(self, secret):
    """
    <Purpose>
      Start a background thread that writes the passed secret to the pipe
      and then closes the write end, so that the reader sees EOF.

      The secret is written as is, i.e. no newline is appended. Until the
      channel is closed, the secret is redacted from gpgbridge log messages
      (see gpgbridge.log.SECRETS).

    <Arguments>
      secret:
              The secret to transfer. A str is encoded as UTF-8.
              (bytes or str)

    <Exceptions>
      securesystemslib.exceptions.FormatError:
              If secret is neither bytes nor str.

      ValueError:
              If the channel was written to or closed before.

    <Returns>
      None.

    """
    gpgbridge.formats.check_secret(secret)
    if self._writer is not None or self._closed:
      raise ValueError("secret channel can only be written once")

    if isinstance(secret, str):
      secret = secret.encode("utf-8")

    # Redacted from log messages until the channel is closed
    gpgbridge.log.SECRETS.add(secret)
    self._registered = secret

    self._writer = threading.Thread(target=self._write, args=(secret,))
    self._writer.daemon = True
    self._writer.start()

  def close(self):
    """Close the parent's read end, wait for the writer and close the write
    end, if the writer has not done so. Can be called more than once. """
    if self._closed:
      return

    self._closed = True
    # Close the read end first, so that a writer blocked on a full pipe,
    # which nobody reads from anymore, fails instead of blocking forever.
    os.close(self.read_fd)
    if self._writer is not None:
      self._writer.join()

    self._close_write_end()

    if self._registered is not None:
      gpgbridge.log.SECRETS.discard(self._registered)
      self._registered = None
