"""
<Module Name>
  constants.py

<Started>
  Oct 6, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  aggregates the gpg dialects and the per-dialect command line vocabulary
"""
import enum


class Dialect(enum.Enum):
  """Command line dialect of the installed gpg. The values are the selector
  strings accepted by gpgbridge.gpg.functions.new_gpg_client. """
  V2 = "v2"
  V1 = "v1"
  UNDETERMINED = "undetermined"


# Dialects a client can be created for, in the order they are probed
SUPPORTED_DIALECTS = (Dialect.V2, Dialect.V1)

# Executables are looked up on PATH
GPG_COMMANDS = {
  Dialect.V2: "gpg2",
  Dialect.V1: "gpg",
}

GPG_VERSION_ARGS = ["--version"]
GPG_HOMEDIR_ARG = "--homedir"
GPG_EXPORT_PUBRING_ARGS = ["--batch", "--export"]
GPG_PASSPHRASE_FD_ARG = "--passphrase-fd"
GPG_EXPORT_SECRET_KEY_ARG = "--export-secret-key"
GPG_LIST_KEYS_ARG = "-k"
GPG_LIST_SECRET_KEYS_ARG = "-K"

# Arguments preceding `--passphrase-fd` when exporting a secret key. GnuPG
# 2.1+ only reads the passphrase from a descriptor if pinentry is bypassed via
# loopback mode. GnuPG 1.x has no pinentry modes and reads it in batch mode.
GPG_SECRET_KEY_EXPORT_ARGS = {
  Dialect.V2: ["--pinentry-mode", "loopback", "--batch"],
  Dialect.V1: ["--batch"],
}

# Phrases in stderr of a failed key listing which mean that the key is
# absent. GnuPG 2.x uses the first two, GnuPG 1.x the others.
KEY_NOT_FOUND_MESSAGES = [
  "No public key",
  "No secret key",
  "public key not found",
  "secret key not available",
]

# Set in the environment of every gpg invocation, so that gpg prints the
# untranslated messages above regardless of the caller's locale.
GPG_ENV_OVERRIDES = {
  "LC_ALL": "C",
  "LANGUAGE": "C",
}
