"""
<Program Name>
  user_settings.py

<Started>
  Oct 6, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Provides methods to parse environment variables (`get_env`) and RCfiles
  (`get_rc`) and to override default settings (`set_settings`) defined in the
  `gpgbridge.settings` module.

  Check out the respective docstrings to learn about the requirements for
  environment variables and RCfiles (includes examples).

"""
import os
import logging
import configparser

import gpgbridge.settings

# Inherits from gpgbridge base logger (c.f. gpgbridge.log)
LOG = logging.getLogger(__name__)


USER_PATH = os.path.expanduser("~")

# Prefix required by environment variables to be considered as gpgbridge
# settings
ENV_PREFIX = "GPGBRIDGE_"

# List of considered rcfile paths in the order they get parsed and overridden,
# i.e. the same setting in `/etc/gpgbridge/config` and `.gpgbridgerc` (cwd)
# uses the latter
RC_PATHS = [
  os.path.join("/etc", "gpgbridge", "config"),
  os.path.join("/etc", "gpgbridgerc"),
  os.path.join(USER_PATH, ".config", "gpgbridge", "config"),
  os.path.join(USER_PATH, ".config", "gpgbridge"),
  os.path.join(USER_PATH, ".gpgbridge", "config"),
  os.path.join(USER_PATH, ".gpgbridgerc"),
  ".gpgbridgerc"
]

# List of settings, for which defaults exist in `settings.py`
GPGBRIDGE_SETTINGS = [
  "GPG_VERSION", "GPG_HOMEDIR"
]


def get_env():
  """
  <Purpose>
    Parse environment for variables with prefix `ENV_PREFIX` and return
    a dict of key-value pairs.

    The prefix `ENV_PREFIX` is stripped from the keys in the returned dict.

    Example:

    ```
    # Exporting variables in e.g. bash
    export GPGBRIDGE_GPG_VERSION='v2'
    export GPGBRIDGE_GPG_HOMEDIR='/home/user/.gnupg-work'
    ```

    produces

    ```
    {
      "GPG_VERSION": "v2",
      "GPG_HOMEDIR": "/home/user/.gnupg-work"
    }
    ```

  <Exceptions>
    None.

  <Side Effects>
    None.

  <Returns>
    A dictionary containing the parsed key-value pairs.

  """
  env_dict = {}

  for name, value in os.environ.items():
    if (name.startswith(ENV_PREFIX) and
        len(name) > len(ENV_PREFIX)):
      stripped_name = name[len(ENV_PREFIX):]

      env_dict[stripped_name] = value

  return env_dict


def get_rc():
  """
  <Purpose>
    Reads RCfiles from the paths defined in `RC_PATHS` and returns
    a dictionary with all parsed key-value pairs.

    The RCfile format is as expected by Python's builtin `ConfigParser`.
    Section titles in RCfiles are ignored when parsing the key-value pairs.
    However, there has to be at least one section defined.

    The paths in `RC_PATHS` are ordered in reverse precedence, i.e. each file's
    settings override a previous file's settings, e.g. a setting defined
    in `.gpgbridgerc` (in the current working dir) overrides the same
    setting defined in `~/.gpgbridgerc` (in the user's home dir) and so on ...

    Example:

    ```
    # E.g. file `.gpgbridgerc` in current working directory
    [gpgbridge settings]
    GPG_VERSION = v1
    GPG_HOMEDIR = /home/user/.gnupg-legacy
    ```

    produces

    ```
    {
      "GPG_VERSION": "v1",
      "GPG_HOMEDIR": "/home/user/.gnupg-legacy"
    }
    ```

  <Exceptions>
    None.

  <Side Effects>
    Calls function to read files from disk.

  <Returns>
    A dictionary containing the parsed key-value pairs.

  """
  rc_dict = {}

  config = configparser.ConfigParser()
  # Reset `optionxform`'s default case conversion to enable case-sensitivity
  config.optionxform = str
  config.read(RC_PATHS)

  for section in config.sections():
    for name, value in config.items(section):
      rc_dict[name] = value

  return rc_dict


def set_settings():
  """
  <Purpose>
    Calls functions that read gpgbridge related environment variables and
    RCfiles and overrides variables in `settings.py` with the retrieved values,
    if they are whitelisted in `GPGBRIDGE_SETTINGS`.

    Settings defined in RCfiles take precedence over settings defined in
    environment variables.

  <Exceptions>
    None.

  <Side Effects>
    Calls functions that read environment variables and files from disk.

  <Returns>
    None.

  """
  user_settings = get_env()
  user_settings.update(get_rc())

  # If the user has specified one of the settings whitelisted in
  # GPGBRIDGE_SETTINGS per envvar or rcfile, override the item in
  # `settings.py`
  for setting in GPGBRIDGE_SETTINGS:
    user_setting = user_settings.get(setting)
    if user_setting:
      LOG.info("Setting (user): {0}={1}".format(
          setting, user_setting))
      setattr(gpgbridge.settings, setting, user_setting)

    else:
      default_setting = getattr(gpgbridge.settings, setting)
      LOG.info("Setting (default): {0}={1}".format(
          setting, default_setting))
