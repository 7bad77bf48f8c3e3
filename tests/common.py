#!/usr/bin/env python
"""
<Program Name>
  common.py

<Started>
  Oct 6, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Common code for gpgbridge unittests, import like so:
  `import tests.common`

  Tests importing this module, should be run from the project root, e.g.:
  `python -m unittest tests.test_process`
  or using the aggregator script (preferred way):
  `python tests/runtests.py`.

"""
import os
import sys
import json
import inspect
import shutil
import tempfile
import textwrap
import unittest

from unittest.mock import patch


class TmpDirMixin():
  """Mixin with classmethods to create and change into a temporary directory,
  and to change back to the original CWD and remove the temporary directory.

  """
  @classmethod
  def set_up_test_dir(cls):
    """Back up CWD, and create and change into temporary directory. """
    cls.original_cwd = os.getcwd()
    cls.test_dir = os.path.realpath(tempfile.mkdtemp())
    os.chdir(cls.test_dir)

  @classmethod
  def tear_down_test_dir(cls):
    """Change back to original CWD and remove temporary directory. """
    os.chdir(cls.original_cwd)
    shutil.rmtree(cls.test_dir)


# Prepended to the body of every stub, records the arguments of each call
STUB_HEADER = """\
#!{python}
import json
import os
import sys

with open({args_path!r}, "w") as args_file:
  json.dump(sys.argv[1:], args_file)

"""


class StubGPGMixin():
  """Mixin to replace PATH with a temporary directory, into which stub
  executables, e.g. a fake `gpg2`, can be written. The stubs are Python
  scripts run by the current interpreter.

  Without any stub written, neither `gpg` nor `gpg2` can be found.

  """
  @classmethod
  def set_up_stub_dir(cls):
    cls.stub_dir = os.path.realpath(tempfile.mkdtemp())
    cls.path_patcher = patch.dict(os.environ, {"PATH": cls.stub_dir})
    cls.path_patcher.start()

  @classmethod
  def tear_down_stub_dir(cls):
    cls.path_patcher.stop()
    shutil.rmtree(cls.stub_dir)

  def _args_path(self, name):
    return os.path.join(self.stub_dir, name + ".args.json")

  def write_stub(self, name, body):
    """Write an executable stub called `name`, which runs the passed Python
    code (dedented) after recording its arguments. """
    path = os.path.join(self.stub_dir, name)
    header = STUB_HEADER.format(python=sys.executable,
        args_path=self._args_path(name))
    with open(path, "w") as stub:
      stub.write(header + textwrap.dedent(body))

    os.chmod(path, 0o755)
    return path

  def read_stub_args(self, name):
    """Return the arguments of the last call of stub `name`. """
    with open(self._args_path(name)) as args_file:
      return json.load(args_file)

  def remove_stubs(self):
    """Remove all stubs and recorded arguments from the stub directory. """
    for name in os.listdir(self.stub_dir):
      os.remove(os.path.join(self.stub_dir, name))


class CliTestCase(unittest.TestCase):
  """TestCase subclass providing a test helper that patches sys.argv with
  passed arguments and asserts a SystemExit with a return code equal
  to the passed status argument.

  Subclasses of CliTestCase require a class variable that stores the main
  function of the cli tool to test as staticmethod, e.g.:

  ```
  import tests.common
  from gpgbridge.gpgbridge_export import main as gpgbridge_export_main

  class TestGPGBridgeExportTool(tests.common.CliTestCase):
    cli_main_func = staticmethod(gpgbridge_export_main)
    ...

  ```
  """
  cli_main_func = None

  def __init__(self, *args, **kwargs):
    """Constructor that checks for the presence of a callable cli_main_func
    class variable. And stores the filename of the module containing that
    function, to be used as first argument when patching sys.argv in
    self.assert_cli_sys_exit.
    """
    if not callable(self.cli_main_func):
      raise Exception("Subclasses of `CliTestCase` need to assign the main"
          " function of the cli tool to test using `staticmethod()`: {}"
          .format(self.__class__.__name__))

    file_path = inspect.getmodule(self.cli_main_func).__file__
    self.file_name = os.path.basename(file_path)

    super(CliTestCase, self).__init__(*args, **kwargs)


  def assert_cli_sys_exit(self, cli_args, status):
    """Test helper to mock command line call and assert return value.
    The passed args does not need to contain the command line tool's name.
    This is assessed from  `self.cli_main_func`
    """
    with patch.object(sys, "argv", [self.file_name]
        + cli_args), self.assertRaises(SystemExit) as raise_ctx:
      self.cli_main_func() # pylint: disable=not-callable

    self.assertEqual(raise_ctx.exception.code, status)
