import argparse
import os
from io import StringIO

import pytest
import rich.console

import memotools.apptools
import memotools.configutils
import memotools.unittesthelper as uth
from memotools.version import __version__


class TestParseArgs:

    @pytest.fixture(autouse=True)
    def isolated(self):
        with uth.IsolatedConfigContext() as tmpdir:
            self.tmpdir = tmpdir
            yield

    def test_quiet_decrements_verbose(self):
        cap = memotools.apptools.create_parser("unit test")
        args = memotools.apptools.parseargs(cap, ["-vv", "-q"])
        assert args.verbose == 1

    def test_registered_callback_is_applied(self):
        def double_verbose(args):
            args.verbose *= 2

        memotools.apptools.registercallback(double_verbose)
        cap = memotools.apptools.create_parser("unit test")
        args = memotools.apptools.parseargs(cap, ["-v"])
        assert args.verbose == 2

    def test_resetcallbacks(self):
        memotools.apptools.registercallback(lambda args: setattr(args, "verbose", 99))
        memotools.apptools.resetcallbacks()
        cap = memotools.apptools.create_parser("unit test")
        args = memotools.apptools.parseargs(cap, [])
        assert args.verbose == 0

    def test_version(self, capsys):
        cap = memotools.apptools.create_parser("unit test")
        with pytest.raises(SystemExit):
            memotools.apptools.parseargs(cap, ["--version"])
        assert __version__ in capsys.readouterr().out

    def test_verbose_prints_args(self, capsys):
        cap = memotools.apptools.create_parser("unit test")
        cap.add("--flavour", default="vanilla")
        memotools.apptools.parseargs(cap, ["-vv"])
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "flavour" in captured.err
        assert "vanilla" in captured.err


class TestVerbosePrintArgs:
    def test_two_columns(self):
        args = argparse.Namespace(alpha="a value", beta=None, gamma=3)
        output = StringIO()
        console = rich.console.Console(file=output, width=120)
        memotools.apptools.verbose_print_args(args, console=console)
        text = output.getvalue()
        # The title is not wrapped even though the columns are narrow
        assert "Final aggregated arguments" in text
        assert "alpha" in text
        assert "a value" in text
        assert text.index("alpha") < text.index("beta") < text.index("gamma")


class TestConfigutils:
    def test_directories_lowest_priority_first(self):
        with uth.TempDirectoryContext(change_dir=True):
            dirs = memotools.configutils.default_config_directories(
                user_config_dir="/user/cfg", system_config_dir="/system/cfg"
            )
            assert dirs == ["/system/cfg", "/user/cfg", os.getcwd()]

    def test_duplicate_directories_are_dropped(self):
        dirs = memotools.configutils.default_config_directories(
            user_config_dir="/same", system_config_dir="/same"
        )
        assert dirs.count("/same") == 1

    def test_config_files(self):
        files = memotools.configutils.default_config_files(
            user_config_dir="/user/cfg", system_config_dir="/system/cfg"
        )
        assert files[0] == os.path.join("/system/cfg", "memotools.conf")
        assert files[1] == os.path.join("/user/cfg", "memotools.conf")
        assert all(ff.endswith("memotools.conf") for ff in files)

    def test_appdirs_defaults(self):
        with uth.IsolatedConfigContext() as tmpdir:
            files = memotools.configutils.default_config_files()
            assert files == [
                os.path.join(tmpdir, "empty", "memotools.conf"),
                os.path.join(os.getcwd(), "memotools.conf"),
            ]

    def test_very_verbose_lists_existing_configs(self, capsys):
        with uth.TempDirectoryContext(change_dir=True):
            uth.create_temp_config(os.getcwd(), extralines=["repeat = 2"])
            memotools.configutils.default_config_files(
                user_config_dir="/nonexistent", system_config_dir="/nonexistent", verbose=9
            )
            out = capsys.readouterr().out
            assert "Default config directories" in out
            assert os.path.join(os.getcwd(), "memotools.conf") in out
