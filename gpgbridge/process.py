"""
<Program Name>
  process.py

<Started>
  Oct 6, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Provide a common interface for Python's subprocess module to:

  - gpgbridge namespace subprocess constants (DEVNULL, PIPE),
  - provide a `run` function that drains standard output and standard error
    of a child process concurrently and
  - provide a `run_get_output` function that turns a failed command into a
    diagnosable error.

"""
import logging
import subprocess
import threading

import attr

import gpgbridge.formats as formats
from gpgbridge.exceptions import LaunchError, ProcessError


DEVNULL = subprocess.DEVNULL
PIPE = subprocess.PIPE

# Number of bytes read at once from a child's standard stream
READ_CHUNK_SIZE = 8192


# Inherits from gpgbridge base logger (c.f. gpgbridge.log)
log = logging.getLogger(__name__)


@attr.s(frozen=True)
class InvocationResult(object):
  """Exit code and captured standard streams (bytes) of a finished command.
  """
  cmd = attr.ib()
  returncode = attr.ib()
  stdout = attr.ib()
  stderr = attr.ib()


def _drain(stream, chunks):
  """Read from `stream` until EOF, appending to the `chunks` list, and close
  the stream. """
  with stream:
    for chunk in iter(lambda: stream.read(READ_CHUNK_SIZE), b""):
      chunks.append(chunk)


def _start_drain_thread(stream, chunks):
  reader = threading.Thread(target=_drain, args=(stream, chunks))
  reader.daemon = True
  reader.start()
  return reader


def run(cmd, pass_fds=(), env=None):
  """
  <Purpose>
    Execute a command in a subprocess and return its exit code and the
    contents of what it printed to its standard streams upon termination.

    Standard output and standard error are each drained by a separate thread
    while the command runs, so that a command printing more than fits into a
    pipe buffer on either stream does not stall. Standard input is
    connected to the null device.

    There is no timeout. Commands that may prompt interactively must be
    told not to (e.g. `gpg --batch`).

  <Arguments>
    cmd:
            The executable and its arguments. (list of str)

    pass_fds: (optional)
            Additional file descriptors to keep open in the child, at the same
            descriptor numbers as in the parent. (iterable of int)

    env: (optional)
            The environment of the child. Default is None, i.e. the
            environment of the parent is inherited. (dict)

  <Exceptions>
    securesystemslib.exceptions.FormatError:
            If `cmd` is not a non-empty list of str.

    gpgbridge.exceptions.LaunchError:
            If the command could not be started, e.g. because the executable
            is not present or not executable.

  <Side Effects>
    The side effects of executing the given command in this environment.

  <Returns>
    A gpgbridge.process.InvocationResult.

  """
  formats.check_command(cmd)
  log.debug("Running command '{}'".format(" ".join(cmd)))

  try:
    proc = subprocess.Popen(list(cmd), stdin=DEVNULL, stdout=PIPE,
        stderr=PIPE, pass_fds=tuple(pass_fds), env=env)

  except OSError as e:
    raise LaunchError(cmd[0], e) from e

  stdout_chunks = []
  stderr_chunks = []
  readers = [
    _start_drain_thread(proc.stdout, stdout_chunks),
    _start_drain_thread(proc.stderr, stderr_chunks),
  ]
  for reader in readers:
    reader.join()

  returncode = proc.wait()
  log.debug("Command '{}' exited with {}".format(cmd[0], returncode))

  return InvocationResult(cmd=list(cmd), returncode=returncode,
      stdout=b"".join(stdout_chunks), stderr=b"".join(stderr_chunks))


def run_get_output(cmd, pass_fds=(), env=None):
  """
  <Purpose>
    Execute a command (see `run`) and return what it printed to standard
    output, if it exited successfully.

    Output to standard error of a successful command is not treated as an
    error, it is only logged.

  <Arguments>
    cmd:
            The executable and its arguments. (list of str)

    pass_fds: (optional)
            Additional file descriptors to keep open in the child.

    env: (optional)
            The environment of the child, see `run`.

  <Exceptions>
    securesystemslib.exceptions.FormatError:
            If `cmd` is not a non-empty list of str.

    gpgbridge.exceptions.LaunchError:
            If the command could not be started.

    gpgbridge.exceptions.ProcessError:
            If the command exited with a non-zero return value. The error
            carries the captured standard error, standard output is
            discarded.

  <Side Effects>
    The side effects of executing the given command in this environment.

  <Returns>
    The captured standard output. (bytes)

  """
  result = run(cmd, pass_fds=pass_fds, env=env)
  stderr = result.stderr.decode("utf-8", "replace")

  if result.returncode != 0:
    raise ProcessError(cmd[0], stderr, result.returncode)

  if stderr:
    log.debug("Command '{}' printed to stderr: {}".format(cmd[0], stderr))

  return result.stdout
