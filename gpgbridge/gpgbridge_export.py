#!/usr/bin/env python
"""
<Program Name>
  gpgbridge_export.py

<Started>
  Oct 6, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  A CLI tool to export the public keyring, or a single secret key, from the
  installed gpg, using the command line dialect of either `gpg2` or `gpg`.

  The passphrase of a secret key is prompted for and handed to gpg through a
  pipe, it never appears on the gpg command line.

<Return Codes>
  2 if an exception occurred during argument parsing
  1 if an exception occurred
  0 if no exception occurred

"""
import sys
import argparse
import getpass
import logging

import gpgbridge.settings
import gpgbridge.user_settings
from gpgbridge import __version__
from gpgbridge.common_args import (add_gpg_client_args,
    title_case_action_groups)
from gpgbridge.gpg.functions import new_gpg_client
from gpgbridge.gpg.util import parse_keyid

# Command line interfaces should use gpgbridge base logger (c.f. gpgbridge.log)
LOG = logging.getLogger("gpgbridge")


def _keyid(value):
  keyid = parse_keyid(value)
  if keyid is None:
    raise argparse.ArgumentTypeError(
        "invalid key id '{}', expected e.g. '0x1234abcd'".format(value))

  return keyid


def create_parser():
  """Create and return configured ArgumentParser instance. """
  parser = argparse.ArgumentParser(
      formatter_class=argparse.RawDescriptionHelpFormatter,
      description="gpgbridge-export writes the public keyring, or a single"
                  " secret key, exported by the installed gpg.")

  parser.epilog = """EXAMPLE USAGE

Write the public keyring from the GPG home directory '~/.gnupg-work' to the
file 'pubring.gpg', using 'gpg2'.

  gpgbridge-export --gpg-version v2 --gpg-home ~/.gnupg-work -o pubring.gpg


Prompt for the passphrase of the secret key '0x8a8ddc5b4a30a5ad' and write it
to 'secret.gpg', using whichever gpg is installed.

  gpgbridge-export --keyid 0x8a8ddc5b4a30a5ad -o secret.gpg


"""

  parser.add_argument("-k", "--keyid", type=_keyid, metavar="<id>",
      help="64-bit id of a secret key to export, e.g. '0x8a8ddc5b4a30a5ad'."
      " The passphrase of the key is prompted for. If '--keyid' is not"
      " passed, the public keyring is exported.")

  parser.add_argument("-o", "--output", type=str, metavar="<path>",
      help="path of the file to write the export to. If '--output' is not"
      " passed, the export is written to standard output.")

  add_gpg_client_args(parser)

  parser.add_argument('--version', action='version',
                      version='{} {}'.format(parser.prog, __version__))

  title_case_action_groups(parser)

  return parser


def main():
  """Parse arguments, create a gpg client and write the requested export. """
  parser = create_parser()
  args = parser.parse_args()

  LOG.setLevelVerboseOrQuiet(args.verbose, args.quiet)

  # Override defaults in settings.py with environment variables and RCfiles
  gpgbridge.user_settings.set_settings()

  try:
    client = new_gpg_client(
        gpg_version=args.gpg_version or gpgbridge.settings.GPG_VERSION,
        homedir=args.gpg_home or gpgbridge.settings.GPG_HOMEDIR or "")
    LOG.info("Using {}".format(client))

    if args.keyid is not None:
      passphrase = getpass.getpass(
          "Enter passphrase for key 0x{:x}: ".format(args.keyid))
      data = client.get_private_key(args.keyid, passphrase)

    else:
      data = client.read_pubring()

    if args.output:
      with open(args.output, "wb") as output_file:
        output_file.write(data)
      LOG.info("Wrote {} bytes to '{}'".format(len(data), args.output))

    else:
      sys.stdout.buffer.write(data)
      sys.stdout.flush()

    sys.exit(0)

  except Exception as e:
    LOG.error("(gpgbridge-export) {0}: {1}".format(type(e).__name__, e))
    sys.exit(1)


if __name__ == "__main__":
  main()
