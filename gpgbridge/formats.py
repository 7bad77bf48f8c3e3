"""
<Program Name>
  formats.py

<Started>
  Oct 6, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Helpers to validate API inputs, i.e. commands passed to the process runner
  and gpg key ids.

  All checks raise securesystemslib.exceptions.FormatError if the passed
  argument does not have the expected format and return None otherwise.

"""
from securesystemslib.exceptions import FormatError

# GPG key ids are 64-bit unsigned integers (see RFC4880 3.3. Key IDs)
KEYID_MAX = 2**64 - 1


def _err(arg, expected):
  return FormatError("expected {}, got '{} ({})'".format(
      expected, arg, type(arg)))


def check_str(arg):
  if not isinstance(arg, str):
    raise _err(arg, "str")


def check_str_list(arg):
  if not isinstance(arg, (list, tuple)):
    raise _err(arg, "list")
  for e in arg:
    check_str(e)


def check_command(arg):
  """Check that `arg` is a non-empty list of str, i.e. an executable name
  followed by its arguments. """
  check_str_list(arg)
  if not arg:
    raise _err(arg, "non-empty command")


def check_keyid(arg):
  """Check that `arg` is an int in the range of a 64-bit gpg key id. Note
  that bool is rejected even though it is a subclass of int. """
  if isinstance(arg, bool) or not isinstance(arg, int):
    raise _err(arg, "int")
  if arg < 0 or arg > KEYID_MAX:
    raise _err(arg, "64-bit unsigned int")


def check_secret(arg):
  if not isinstance(arg, (bytes, str)):
    # Do not include the passed value in the error message, it might be a
    # secret of the wrong type
    raise FormatError("expected bytes or str, got '{}'".format(type(arg)))
