"""
<Program Name>
  log.py

<Started>
  Oct 6, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Configures the "gpgbridge" base logger, which library modules inherit from
  by creating loggers with `logging.getLogger(__name__)`, and which command
  line interfaces fetch by name to adjust its level.

  The base logger writes to 'sys.stderr'. Its level is 'logging.WARNING',
  or 'logging.DEBUG' with the gpg command lines and a verbose format if
  'gpgbridge.settings.DEBUG' is 'True'. Only in DEBUG level does `error`
  attach a stacktrace.

  Secrets in transit to gpg are registered with `SECRETS`, a filter on the
  base logger's handler, and replaced by REDACTED in every message that
  passes through it, regardless of which gpgbridge logger emitted it, e.g.:

  ```
  gpgbridge.log.SECRETS.add(passphrase)
  try:
    ... # a gpg error echoing the passphrase is logged as '***'
  finally:
    gpgbridge.log.SECRETS.discard(passphrase)
  ```

"""
import sys
import logging
import threading
import collections

import gpgbridge.settings

FORMAT_MESSAGE = "%(message)s"
FORMAT_DEBUG = "%(name)s:%(lineno)d:%(levelname)s:%(message)s"

REDACTED = "***"

_LOGGER_CLASS = logging.getLoggerClass()


class GPGBridgeLogger(_LOGGER_CLASS):
  """Base logger with a stacktrace policy for `error` and a convenience
  method for command line verbosity flags. """

  QUIET = logging.CRITICAL + 1

  def error(self, msg, *args, **kwargs):
    """Show stacktrace depending on its availability and the logger's log
    level, i.e. only show stacktrace in DEBUG level. """
    show_stacktrace = (self.level == logging.DEBUG and
        sys.exc_info() != (None, None, None))
    kwargs.setdefault("exc_info", show_stacktrace)
    return super(GPGBridgeLogger, self).error(msg, *args, **kwargs)

  # Allow non snake_case function name for consistency with logging library
  def setLevelVerboseOrQuiet(self, verbose, quiet): # pylint: disable=invalid-name
    """INFO if verbose, above CRITICAL if quiet, unchanged otherwise. """
    if verbose:
      self.setLevel(logging.INFO)

    elif quiet:
      self.setLevel(self.QUIET)


class SecretFilter(logging.Filter):
  """
  <Purpose>
    A logging filter that replaces registered secrets with REDACTED in the
    message of each record it sees. Records are never dropped.

    Secrets are reference counted, so that the same secret can be in use by
    several channels at once. Empty secrets, and bytes that are not UTF-8,
    which cannot appear verbatim in a log message, are ignored.

  """
  def __init__(self):
    super(SecretFilter, self).__init__()
    self._lock = threading.Lock()
    self._secrets = collections.Counter()

  @staticmethod
  def _as_text(secret):
    if isinstance(secret, bytes):
      try:
        secret = secret.decode("utf-8")
      except UnicodeDecodeError:
        return None
    return secret or None

  def add(self, secret):
    text = self._as_text(secret)
    if text is not None:
      with self._lock:
        self._secrets[text] += 1

  def discard(self, secret):
    text = self._as_text(secret)
    with self._lock:
      if self._secrets.get(text, 0) > 1:
        self._secrets[text] -= 1
      else:
        self._secrets.pop(text, None)

  def filter(self, record):
    with self._lock:
      # Longest first, so that a secret containing another is fully redacted
      secrets = sorted(self._secrets, key=len, reverse=True)

    if secrets:
      message = record.getMessage()
      redacted = message
      for secret in secrets:
        redacted = redacted.replace(secret, REDACTED)

      if redacted != message:
        record.msg = redacted
        record.args = ()

    return True


# Temporarily change logger default class to instantiate the base logger
logging.setLoggerClass(GPGBridgeLogger)
LOGGER = logging.getLogger("gpgbridge")
logging.setLoggerClass(_LOGGER_CLASS)

SECRETS = SecretFilter()

if gpgbridge.settings.DEBUG: # pragma: no cover
  LEVEL = logging.DEBUG
  FORMAT_STRING = FORMAT_DEBUG

else:
  LEVEL = logging.WARNING
  FORMAT_STRING = FORMAT_MESSAGE

HANDLER = logging.StreamHandler()
HANDLER.setFormatter(logging.Formatter(FORMAT_STRING))
HANDLER.addFilter(SECRETS)
LOGGER.addHandler(HANDLER)
LOGGER.setLevel(LEVEL)
