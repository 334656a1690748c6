import os
import sys

import appdirs

APPNAME = "memotools"
CONFIG_FILENAME = "memotools.conf"


def default_config_directories(user_config_dir=None, system_config_dir=None, verbose=0):
    """ Directories searched for memotools.conf, lowest priority first.
        1) system config (XDG compliant.  /etc/xdg/memotools)
        2) user config   (XDG compliant.  ~/.config/memotools)
        3) current working directory
        Environment variables and the command line override all of these.
    """
    # These variables are settable to assist writing tests
    if system_config_dir is None:
        system_config_dir = appdirs.site_config_dir(appname=APPNAME)
    if user_config_dir is None:
        user_config_dir = appdirs.user_config_dir(appname=APPNAME)

    results = []
    for directory in (system_config_dir, user_config_dir, os.getcwd()):
        if directory not in results:
            results.append(directory)

    if verbose >= 9:
        print(" ".join(["Default config directories"] + results))
    return results


def default_config_files(user_config_dir=None, system_config_dir=None, verbose=0):
    """ The memotools.conf candidates handed to configargparse.
        configargparse silently skips the ones that don't exist
        and lets later files override earlier ones.
    """
    configs = [
        os.path.join(directory, CONFIG_FILENAME)
        for directory in default_config_directories(
            user_config_dir=user_config_dir,
            system_config_dir=system_config_dir,
            verbose=verbose,
        )
    ]
    if verbose >= 8:
        existing = [cfg for cfg in configs if os.path.isfile(cfg)]
        sys.stdout.write(" ".join(["Default configs are"] + existing) + "\n")
    return configs
