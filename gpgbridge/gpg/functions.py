"""
<Module Name>
  functions.py

<Started>
  Oct 6, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  publicly-usable functions for creating a gpg client for a requested or the
  installed gpg dialect.
"""
import logging

from gpgbridge.exceptions import ConfigurationError
from gpgbridge.gpg.client import ClientConfig, GPGClient
from gpgbridge.gpg.constants import Dialect, SUPPORTED_DIALECTS
from gpgbridge.gpg.version import guess_gpg_version

# Inherits from gpgbridge base logger (c.f. gpgbridge.log)
log = logging.getLogger(__name__)


def parse_dialect(gpg_version):
  """Return the Dialect for the passed selector, i.e. "v1", "v2" or a
  supported Dialect, or None if the selector is absent or not recognized. """
  if gpg_version in SUPPORTED_DIALECTS:
    return gpg_version

  for dialect in SUPPORTED_DIALECTS:
    if gpg_version == dialect.value:
      return dialect

  if gpg_version:
    log.info("Unrecognized GPG version '{}', guessing installed version"
        .format(gpg_version))

  return None


class ClientFactory(object):
  """
  <Purpose>
    Creates GPGClients for a requested dialect, or for the installed one, if
    no dialect is requested.

    The installed dialect is found by calling `probe`. Per default the
    probe runs on every request, because the installed binaries may change
    while the process runs. With `cache_probe` set, the first determined
    dialect is stored on the factory until `invalidate` is called.

  <Arguments>
    probe: (optional)
            A callable without arguments returning a Dialect. Default is
            gpgbridge.gpg.version.guess_gpg_version.

    cache_probe: (optional)
            Keep the probed dialect for subsequent requests. Default is False.

  """
  def __init__(self, probe=None, cache_probe=False):
    self._probe = probe or guess_gpg_version
    self._cache_probe = cache_probe
    self._cached_dialect = None

  def invalidate(self):
    """Forget a cached probe result. """
    self._cached_dialect = None

  def _detect(self):
    if self._cached_dialect is not None:
      return self._cached_dialect

    dialect = self._probe()
    if self._cache_probe and dialect in SUPPORTED_DIALECTS:
      self._cached_dialect = dialect

    return dialect

  def create(self, gpg_version=None, homedir=""):
    """
    <Purpose>
      Create a client for the requested dialect. The probe is only used if
      gpg_version is absent or not recognized.

    <Arguments>
      gpg_version: (optional)
              "v1", "v2", Dialect.V1 or Dialect.V2.

      homedir: (optional)
              Path to the gpg home directory. The empty string (default)
              means gpg's default.

    <Exceptions>
      gpgbridge.exceptions.ConfigurationError:
              If no dialect was requested and none could be determined.

    <Returns>
      A gpgbridge.gpg.client.GPGClient.

    """
    dialect = parse_dialect(gpg_version)
    if dialect is None:
      dialect = self._detect()

    if dialect == Dialect.UNDETERMINED:
      raise ConfigurationError("unable to determine GPG version")

    return GPGClient(dialect, ClientConfig(homedir=homedir))


def new_gpg_client(gpg_version=None, homedir=""):
  """
  <Purpose>
    Create a gpg client for the requested dialect or, if gpg_version is absent
    or not recognized, for the installed one (see
    gpgbridge.gpg.version.guess_gpg_version).

  <Arguments>
    gpg_version: (optional)
            "v1" or "v2"

    homedir: (optional)
            Path to the gpg home directory. The empty string (default) means
            gpg's default.

  <Exceptions>
    gpgbridge.exceptions.ConfigurationError:
            If the gpg version is unspecified and could not be determined.

  <Returns>
    A gpgbridge.gpg.client.GPGClient.

  """
  return ClientFactory().create(gpg_version, homedir)
