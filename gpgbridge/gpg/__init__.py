"""
<Module Name>
  gpg

<Started>
  Oct 6, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Broker access to an installed gpg binary, i.e. `gpg2` (GnuPG 2.x) or `gpg`
  (GnuPG 1.x), whose command line dialects differ. No cryptography is done
  here. Keys are exported by gpg and passed on as opaque bytes.

  We use a Popen-based python-only construction instead of the
  gpgme python bindings, because gpgme is often shipped separately, while
  users of gpg-managed keys are almost guaranteed to have gpg installed.

  Usage:

  ```
  from gpgbridge.gpg.functions import new_gpg_client

  client = new_gpg_client(gpg_version="v2", homedir="/tmp/ring")
  pubring = client.read_pubring()
  ```
"""
