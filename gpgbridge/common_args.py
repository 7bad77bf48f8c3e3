"""
<Program Name>
  common_args.py

<Started>
  Oct 6, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Provides a collection of constants that can be used as `*args` or `**kwargs`
  to argparse.ArgumentParser.add_argument() for cli tools with common
  command line arguments.

  Example Usage:

  ```
  from gpgbridge.common_args import GPG_HOME_ARGS, GPG_HOME_KWARGS
  parser = argparse.ArgumentParser()
  parser.add_argument(*GPG_HOME_ARGS, **GPG_HOME_KWARGS)
  ```

"""
GPG_VERSION_ARGS = ["--gpg-version"]
GPG_VERSION_KWARGS = {
  "dest": "gpg_version",
  "type": str,
  "choices": ["v1", "v2"],
  "help": ("command line dialect of the gpg to use, 'v2' runs 'gpg2' and"
           " 'v1' runs 'gpg'. If '--gpg-version' is not passed, the version"
           " from environment variables or config files is used, or, if there"
           " is none, the installed version is guessed.")
}

GPG_HOME_ARGS = ["--gpg-home"]
GPG_HOME_KWARGS = {
  "dest": "gpg_home",
  "type": str,
  "metavar": "<path>",
  "help": ("path to a GPG home directory. If '--gpg-home' is not passed, the"
           " directory from environment variables or config files is used,"
           " or, if there is none, the default GPG home directory.")
}

VERBOSE_ARGS = ["-v", "--verbose"]
VERBOSE_KWARGS = {
  "dest": "verbose",
  "action": "store_true",
  "help": "show more output"
}

QUIET_ARGS = ["-q", "--quiet"]
QUIET_KWARGS = {
  "dest": "quiet",
  "action": "store_true",
  "help": "suppress all output"
}


def add_gpg_client_args(parser):
  """Add the options shared by all cli tools that create a gpg client. """
  parser.add_argument(*GPG_VERSION_ARGS, **GPG_VERSION_KWARGS)
  parser.add_argument(*GPG_HOME_ARGS, **GPG_HOME_KWARGS)

  verbosity_args = parser.add_mutually_exclusive_group(required=False)
  verbosity_args.add_argument(*VERBOSE_ARGS, **VERBOSE_KWARGS)
  verbosity_args.add_argument(*QUIET_ARGS, **QUIET_KWARGS)


def title_case_action_groups(parser):
  """Capitalize the first character of all words in the title of each action
  group of the passed parser.

  This is useful for consistency when using the sphinx argparse extension,
  which title-cases default action groups only.

  """
  for action_group in parser._action_groups: # pylint: disable=protected-access
    action_group.title = action_group.title.title()
