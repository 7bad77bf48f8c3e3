"""
<Module Name>
  util.py

<Started>
  Oct 6, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  general-purpose utilities for gpg key ids and gpg text output
"""
import re

import gpgbridge.formats
from gpgbridge.gpg.constants import KEY_NOT_FOUND_MESSAGES

# Matches the uid line of a key listing, e.g.
#   uid           [ultimate] Alice <alice@example.com>
# GnuPG 1.x does not print the validity in brackets.
EMAIL_PATTERN = re.compile(
    r"uid\s+(?:\[.*\]\s)?.*\s<(?P<email>.+)>")

# Key ids as accepted by `parse_keyid`, i.e. hex with "0x" prefix or decimal
# without leading zeros, which would be ambiguous with octal. No sign.
KEYID_HEX_PATTERN = re.compile(r"0[xX][0-9a-fA-F]+")
KEYID_DEC_PATTERN = re.compile(r"0|[1-9][0-9]*")


def format_keyid(keyid):
  """Return the 64-bit int `keyid` as lowercase hex string with '0x' prefix,
  as expected by gpg, e.g. 0xdeadbeef. """
  gpgbridge.formats.check_keyid(keyid)
  return "0x{:x}".format(keyid)


def parse_keyid(value):
  """
  <Purpose>
    Parse a key id from a string. Accepted are hex strings with "0x" or "0X"
    prefix, e.g. "0x8a8ddc5b4a30a5ad", and decimal strings without leading
    zeros, e.g. "305441741". Surrounding whitespace is ignored. Signs, other
    bases and digit separators are not accepted.

  <Arguments>
    value:
            A string that might be a key id, e.g. a recipient identifier.

  <Exceptions>
    None.

  <Returns>
    The key id as int, or None if `value` is not a key id in one of the
    formats above, that fits into 64 bits.

  """
  value = value.strip()
  if KEYID_HEX_PATTERN.fullmatch(value):
    keyid = int(value, 16)

  elif KEYID_DEC_PATTERN.fullmatch(value):
    keyid = int(value, 10)

  else:
    return None

  if keyid > gpgbridge.formats.KEYID_MAX:
    return None

  return keyid


def extract_email(details):
  """Return the email address of the first uid in the passed key listing
  (bytes), or None if there is no uid with email address. """
  text = details.decode("utf-8", "replace")
  match = EMAIL_PATTERN.search(text)
  if not match:
    return None

  return match.group("email")


def is_key_not_found(stderr):
  """Return True if the passed stderr (str) of a failed gpg key listing
  reports that the key does not exist. """
  return any(message in stderr for message in KEY_NOT_FOUND_MESSAGES)
