import configargparse
import os
import contextlib
import shutil
import tempfile
import unittest.mock
import memotools.apptools
import memotools.configutils

# The abbreviation "uth" is often used for this "unittesthelper"


def reset():
    delete_existing_parsers()
    memotools.apptools.resetcallbacks()


def delete_existing_parsers():
    """The singleton parsers supplied by configargparse
    don't play well with the unittest framework.
    This function will delete them so you are
    starting with a clean slate
    """
    configargparse._parsers = {}


def create_temp_config(tempdir, filename=memotools.configutils.CONFIG_FILENAME, extralines=()):
    """ User is responsible for removing the config file when
        they are finished
    """
    path = os.path.join(tempdir, filename)
    with open(path, "w") as ff:
        for line in extralines:
            ff.write(line + "\n")
    return path


class TempDirectoryContext:
    """Context manager for temporary directories with optional directory changing."""

    def __init__(self, change_dir=True, prefix=None, suffix=None, dir=None):
        self.change_dir = change_dir
        self.prefix = prefix
        self.suffix = suffix
        self.dir = dir
        self._tmpdir = None
        self._origdir = None

    def __enter__(self):
        if self.change_dir:
            self._origdir = os.getcwd()

        self._tmpdir = tempfile.mkdtemp(prefix=self.prefix, suffix=self.suffix, dir=self.dir)

        if self.change_dir:
            os.chdir(self._tmpdir)

        return self._tmpdir

    def __exit__(self, exc_type, exc_value, traceback):
        if self.change_dir and self._origdir:
            os.chdir(self._origdir)
        if self._tmpdir:
            shutil.rmtree(self._tmpdir, ignore_errors=True)


@contextlib.contextmanager
def EnvironmentContext(env_vars):
    """Context manager for temporarily setting environment variables.

    Args:
        env_vars: Dictionary of environment variables to set
    """
    original_values = {key: os.environ.get(key) for key in env_vars}
    os.environ.update(env_vars)
    try:
        yield
    finally:
        for key, value in original_values.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value


@contextlib.contextmanager
def ParserContext():
    """Context manager for temporarily resetting configargparse state."""
    saved_parsers = configargparse._parsers.copy()
    reset()
    try:
        yield
    finally:
        configargparse._parsers = saved_parsers
        memotools.apptools.resetcallbacks()


@contextlib.contextmanager
def IsolatedConfigContext():
    """ Run in a fresh temp directory with fresh parsers and with the
        user and system config directories pointed at empty locations
        so that the developer's own memotools.conf can't leak in.
    """
    with ParserContext(), TempDirectoryContext(change_dir=True) as tmpdir:
        emptydir = os.path.join(tmpdir, "empty")
        with unittest.mock.patch("appdirs.user_config_dir", return_value=emptydir), \
                unittest.mock.patch("appdirs.site_config_dir", return_value=emptydir):
            yield tmpdir
