"""
<Module Name>
  version.py

<Started>
  Oct 6, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Determine which gpg dialect is installed by asking each candidate binary for
  its version.

  Only `--version` is ever invoked here, which neither creates nor modifies
  keys. Results are not cached, the installed binaries may change during the
  lifetime of a long-running process (see gpgbridge.gpg.functions.ClientFactory
  for opt-in caching).
"""
import re
import logging

import gpgbridge.process
from gpgbridge.exceptions import LaunchError, ProcessError
from gpgbridge.gpg.constants import (Dialect, SUPPORTED_DIALECTS,
    GPG_COMMANDS, GPG_VERSION_ARGS)

# Inherits from gpgbridge base logger (c.f. gpgbridge.log)
log = logging.getLogger(__name__)

VERSION_PATTERN = re.compile(r"(\d+\.\d+\.\d+)")


def _get_version_command(dialect):
  return [GPG_COMMANDS[dialect]] + GPG_VERSION_ARGS


def is_available(dialect):
  """Return True if the binary of the passed dialect can be started and
  exits successfully on `--version`, False otherwise. """
  command = _get_version_command(dialect)
  try:
    gpgbridge.process.run_get_output(command)

  except (LaunchError, ProcessError) as e:
    log.debug("'{}' not usable: {}".format(" ".join(command), e))
    return False

  return True


def guess_gpg_version():
  """
  <Purpose>
    Probe for an installed gpg, preferring `gpg2` over `gpg`.

  <Exceptions>
    None. A missing binary is an expected outcome and reported as
    Dialect.UNDETERMINED.

  <Side Effects>
    Runs `gpg2 --version` and, if that fails, `gpg --version`.

  <Returns>
    Dialect.V2, Dialect.V1 or Dialect.UNDETERMINED.

  """
  for dialect in SUPPORTED_DIALECTS:
    if is_available(dialect):
      log.debug("Using gpg dialect '{}'".format(dialect.value))
      return dialect

  return Dialect.UNDETERMINED


def get_version(dialect):
  """
  <Purpose>
    Uses `<gpg binary> --version` to get the version info of the gpg binary of
    the passed dialect and extracts and returns the version number.

  <Arguments>
    dialect:
            Dialect.V1 or Dialect.V2

  <Exceptions>
    gpgbridge.exceptions.LaunchError:
            If the binary cannot be started.

    gpgbridge.exceptions.ProcessError:
            If the binary exits with non-zero return value.

    ValueError:
            If the output does not contain a version number.

  <Returns>
    Version number string, e.g. "2.2.27"

  """
  output = gpgbridge.process.run_get_output(_get_version_command(dialect))
  full_version_info = output.decode("utf-8", "replace")

  match = VERSION_PATTERN.search(full_version_info)
  if not match:
    raise ValueError("no version number in output of '{}': {}".format(
        GPG_COMMANDS[dialect], full_version_info))

  return match.group(1)
