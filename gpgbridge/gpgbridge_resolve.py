#!/usr/bin/env python
"""
<Program Name>
  gpgbridge_resolve.py

<Started>
  Oct 6, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  A CLI tool to resolve encryption recipients. Recipients that are gpg key ids
  are replaced by the email address of the key, all others are printed
  unchanged, one per line and in the order they were passed.

<Return Codes>
  2 if an exception occurred during argument parsing
  1 if an exception occurred
  0 if no exception occurred

"""
import sys
import argparse
import logging

import gpgbridge.settings
import gpgbridge.user_settings
from gpgbridge import __version__
from gpgbridge.common_args import (add_gpg_client_args,
    title_case_action_groups)
from gpgbridge.gpg.functions import new_gpg_client

# Command line interfaces should use gpgbridge base logger (c.f. gpgbridge.log)
LOG = logging.getLogger("gpgbridge")


def create_parser():
  """Create and return configured ArgumentParser instance. """
  parser = argparse.ArgumentParser(
      formatter_class=argparse.RawDescriptionHelpFormatter,
      description="gpgbridge-resolve replaces recipients given as gpg key ids"
                  " with the email address of the key.")

  parser.epilog = """EXAMPLE USAGE

Resolve a key id and pass through an email address.

  gpgbridge-resolve 0x8a8ddc5b4a30a5ad bob@example.com


"""

  parser.add_argument("recipients", nargs="+", metavar="<recipient>",
      help="names, email addresses or key ids, e.g. '0x8a8ddc5b4a30a5ad'")

  add_gpg_client_args(parser)

  parser.add_argument('--version', action='version',
                      version='{} {}'.format(parser.prog, __version__))

  title_case_action_groups(parser)

  return parser


def main():
  """Parse arguments, create a gpg client and print resolved recipients. """
  parser = create_parser()
  args = parser.parse_args()

  LOG.setLevelVerboseOrQuiet(args.verbose, args.quiet)

  # Override defaults in settings.py with environment variables and RCfiles
  gpgbridge.user_settings.set_settings()

  try:
    client = new_gpg_client(
        gpg_version=args.gpg_version or gpgbridge.settings.GPG_VERSION,
        homedir=args.gpg_home or gpgbridge.settings.GPG_HOMEDIR or "")

    for recipient in client.resolve_recipients(args.recipients):
      print(recipient)

    sys.exit(0)

  except Exception as e:
    LOG.error("(gpgbridge-resolve) {0}: {1}".format(type(e).__name__, e))
    sys.exit(1)


if __name__ == "__main__":
  main()
