"""
<Program Name>
  exceptions.py

<Started>
  Oct 6, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Define the errors raised by gpgbridge. Like the errors of
  securesystemslib, which they derive from, their names end in 'Error'.

"""
import shutil

from securesystemslib.exceptions import Error


class ConfigurationError(Error):
  """Indicates that the gpg dialect could not be determined or is invalid. """


class LaunchError(Error):
  """Indicates that an external command could not be started, e.g. because
  the executable is missing or not executable. """

  def __init__(self, executable, cause):
    super(LaunchError, self).__init__()
    self.executable = executable
    self.cause = cause

  def __str__(self):
    return "could not start '{}': {}".format(self.executable, self.cause)


class ProcessError(Error):
  """Indicates that an external command exited with non-zero return value.
  Carries the captured standard error of the command. """

  def __init__(self, executable, stderr, returncode=None):
    super(ProcessError, self).__init__()
    self.executable = shutil.which(executable) or executable
    self.stderr = stderr
    self.returncode = returncode

  def __str__(self):
    return "error from {}: {}".format(self.executable, self.stderr)
