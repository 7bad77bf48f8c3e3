"""
<Module Name>
  client.py

<Started>
  Oct 6, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  A gpg client that exports keys and looks up key details using the command
  line dialect of the installed gpg.

  Every operation is a fresh gpg invocation. A client holds no process
  handles or other state between calls, apart from its immutable dialect and
  configuration.
"""
import os
import logging

import attr

import gpgbridge.formats
import gpgbridge.process
import gpgbridge.gpg.util
from gpgbridge.exceptions import ConfigurationError, LaunchError, ProcessError
from gpgbridge.gpg.channel import SecretChannel
from gpgbridge.gpg.constants import (SUPPORTED_DIALECTS, GPG_COMMANDS,
    GPG_HOMEDIR_ARG, GPG_EXPORT_PUBRING_ARGS, GPG_PASSPHRASE_FD_ARG,
    GPG_EXPORT_SECRET_KEY_ARG, GPG_LIST_KEYS_ARG, GPG_LIST_SECRET_KEYS_ARG,
    GPG_SECRET_KEY_EXPORT_ARGS, GPG_ENV_OVERRIDES)

# Inherits from gpgbridge base logger (c.f. gpgbridge.log)
log = logging.getLogger(__name__)


def _homedir_converter(homedir):
  # An empty homedir means the gpg default
  return homedir or None


@attr.s(frozen=True)
class ClientConfig(object):
  """Read-only configuration of a GPGClient.

  Attributes:
    homedir: Path to the gpg home directory, passed as `--homedir` to every
        gpg call if set. If None gpg uses its default.

  """
  homedir = attr.ib(default=None, converter=_homedir_converter)


class GPGClient(object):
  """
  <Purpose>
    Runs gpg with the argument syntax of one dialect, i.e. `gpg2` for
    Dialect.V2 and `gpg` for Dialect.V1. The dialect is fixed on creation.

    Clients are usually created with gpgbridge.gpg.functions.new_gpg_client,
    which can also detect the installed dialect.

  <Attributes>
    dialect:
            Dialect.V1 or Dialect.V2

    config:
            A ClientConfig

  """
  def __init__(self, dialect, config=None):
    if dialect not in SUPPORTED_DIALECTS:
      raise ConfigurationError("unsupported GPG version: {}".format(dialect))

    self._dialect = dialect
    self._config = config if config is not None else ClientConfig()

  @property
  def dialect(self):
    return self._dialect

  @property
  def config(self):
    return self._config

  @property
  def command(self):
    """Name of the gpg executable for the client's dialect. """
    return GPG_COMMANDS[self._dialect]

  def __repr__(self):
    return "{}(dialect={}, homedir={!r})".format(type(self).__name__,
        self._dialect.value, self._config.homedir)

  def _base_args(self):
    if self._config.homedir:
      return [GPG_HOMEDIR_ARG, self._config.homedir]

    return []

  def build_pubring_args(self):
    """Return the gpg arguments to export the public keyring. """
    return self._base_args() + GPG_EXPORT_PUBRING_ARGS

  def build_private_key_args(self, keyid, passphrase_fd):
    """Return the gpg arguments to export the secret key `keyid` (int),
    reading the passphrase from the descriptor `passphrase_fd` (int). """
    return (self._base_args() + GPG_SECRET_KEY_EXPORT_ARGS[self._dialect] +
        [GPG_PASSPHRASE_FD_ARG, str(passphrase_fd),
        GPG_EXPORT_SECRET_KEY_ARG, gpgbridge.gpg.util.format_keyid(keyid)])

  def build_key_details_args(self, keyid, secret=False):
    """Return the gpg arguments to list the public key `keyid` (int), or the
    secret key if `secret` is True. """
    list_arg = GPG_LIST_SECRET_KEYS_ARG if secret else GPG_LIST_KEYS_ARG
    return self._base_args() + ["--batch", list_arg,
        gpgbridge.gpg.util.format_keyid(keyid)]

  def _run(self, args, pass_fds=()):
    # gpg runs in the C locale, key lookups rely on its untranslated errors
    env = dict(os.environ, **GPG_ENV_OVERRIDES)
    return gpgbridge.process.run_get_output([self.command] + args,
        pass_fds=pass_fds, env=env)

  def read_pubring(self):
    """
    <Purpose>
      Export all public keys of the keyring.

    <Exceptions>
      gpgbridge.exceptions.LaunchError:
              If gpg cannot be started.

      gpgbridge.exceptions.ProcessError:
              If gpg exits with non-zero return value.

    <Returns>
      The exported keyring, as printed by gpg. (bytes)

    """
    return self._run(self.build_pubring_args())

  def get_private_key(self, keyid, passphrase):
    """
    <Purpose>
      Export the secret key identified by keyid, unlocking it with the passed
      passphrase.

      The passphrase is transferred through a SecretChannel, whose read end
      is inherited by gpg and referenced by `--passphrase-fd`. It never
      appears in the arguments of the gpg process.

    <Arguments>
      keyid:
              The 64-bit gpg key id. (int)

      passphrase:
              The passphrase of the secret key. (bytes or str)

    <Exceptions>
      securesystemslib.exceptions.FormatError:
              If keyid or passphrase have the wrong format.

      gpgbridge.exceptions.LaunchError:
              If gpg cannot be started.

      gpgbridge.exceptions.ProcessError:
              If gpg exits with non-zero return value, e.g. because of a wrong
              passphrase or an unknown key.

    <Side Effects>
      Creates and closes a pipe and starts a writer thread.

    <Returns>
      The exported secret key, as printed by gpg. (bytes)

    """
    gpgbridge.formats.check_secret(passphrase)
    with SecretChannel() as channel:
      args = self.build_private_key_args(keyid, channel.read_fd)
      channel.write(passphrase)
      return self._run(args, pass_fds=[channel.read_fd])

  def _get_key_details(self, keyid, secret):
    try:
      return self._run(self.build_key_details_args(keyid, secret)), True

    except ProcessError as e:
      if gpgbridge.gpg.util.is_key_not_found(e.stderr):
        log.debug("Key {} not found".format(
            gpgbridge.gpg.util.format_keyid(keyid)))
        return b"", False

      raise

  def get_secret_key_details(self, keyid):
    """
    <Purpose>
      List the secret key identified by keyid.

    <Arguments>
      keyid:
              The 64-bit gpg key id. (int)

    <Exceptions>
      gpgbridge.exceptions.LaunchError:
              If gpg cannot be started.

      gpgbridge.exceptions.ProcessError:
              If gpg fails for another reason than a missing key.

    <Returns>
      A tuple of the key listing (bytes) and True, or of b"" and False if
      there is no such secret key.

    """
    return self._get_key_details(keyid, secret=True)

  def get_key_details(self, keyid):
    """Same as get_secret_key_details for public keys. """
    return self._get_key_details(keyid, secret=False)

  def resolve_recipients(self, recipients):
    """
    <Purpose>
      Replace recipients that are gpg key ids with the email address of the
      key, for use as encryption recipients.

      Resolution is best effort: entries that are not key ids, whose key is
      not found, whose key has no email address, or whose lookup fails are
      kept unchanged. Failed lookups are logged.

    <Arguments>
      recipients:
              Names, email addresses or key ids, e.g. "0x1234abcd".
              (list of str)

    <Exceptions>
      None.

    <Returns>
      A list of str of the same length and order as recipients.

    """
    resolved = []
    for recipient in recipients:
      keyid = gpgbridge.gpg.util.parse_keyid(recipient)
      if keyid is None:
        resolved.append(recipient)
        continue

      try:
        details, found = self.get_key_details(keyid)

      except (LaunchError, ProcessError) as e:
        log.warning("Could not resolve recipient '{}': {}".format(
            recipient, e))
        resolved.append(recipient)
        continue

      email = gpgbridge.gpg.util.extract_email(details) if found else None
      resolved.append(email or recipient)

    return resolved
