"""
<Program Name>
  settings.py

<Started>
  Oct 6, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  A central place to define default settings that can be used throughout the
  package.

  Defaults can be changed,
   - here (hardcoded),
   - programmatically, e.g.
     ```
     import gpgbridge.settings
     gpgbridge.settings.GPG_HOMEDIR = "/home/user/.gnupg-work"
     ```
  - or, when using gpgbridge via command line tooling, with environment
    variables or RCfiles, see the `gpgbridge.user_settings` module

"""
# The debug setting is used to set the gpgbridge base logger to logging.DEBUG
DEBUG = False

# GPG dialect selector used by the command line tools, one of "v1" or "v2".
# If not set the installed version is guessed (see gpgbridge.gpg.version)
GPG_VERSION = None

# Path to the gpg home directory, passed as `--homedir` to every gpg call.
# If not set gpg uses its own default, i.e. `$GNUPGHOME` or `~/.gnupg`
GPG_HOMEDIR = None
