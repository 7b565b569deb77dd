"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details

Configuration settings for elliptic.
"""

import argparse
import os

from appdirs import AppDirs

from elliptic.util import helpers


# Set the data directory in a OS-appropriate location.
_ad = AppDirs("Elliptic", False)
DATA_DIR = _ad.user_data_dir

# The master configuration file name.
CONFIG_NAME = "elliptic.conf"
CONFIG_PATH = os.path.join(DATA_DIR, CONFIG_NAME)

# The default curve database file name, inside DATA_DIR.
CURVE_DB_NAME = "curves.txt"

DEFAULT_LOG_LEVEL = "INFO"

log = helpers.getLogger("CONFIG")


class EllipticConfig:
    """
    EllipticConfig is configuration settings. The configuration file is JSON
    formatted. Command-line options override the file for the current process
    but are not saved.
    """

    def __init__(self, path=None, args=None):
        """
        Args:
            path (str): Optional. The settings file path. Defaults to
                CONFIG_PATH, creating DATA_DIR if needed.
            args (list(str)): Optional. The command-line arguments. If None,
                sys.argv is parsed.
        """
        if path is None:
            helpers.mkdir(DATA_DIR)
            path = CONFIG_PATH
        self.path = path
        self.file = helpers.fetchSettingsFile(path)
        parser = argparse.ArgumentParser()
        parser.add_argument("--loglevel", help="logging level, name or number")
        parser.add_argument("--curvedb", help="path to the curve database")
        parsed, unknown = parser.parse_known_args(args)
        if unknown:
            log.warning(f"ignoring unknown arguments: {unknown!r}")
        self.overrides = {}
        if parsed.loglevel is not None:
            self.overrides["logLevel"] = parsed.loglevel
        if parsed.curvedb is not None:
            self.overrides["curveDB"] = parsed.curvedb
        self.normalize()

    def set(self, k, v):
        """
        Set the configuration option. The configuration is not saved, so `save`
        should be called separately.

        Args:
            k (str): The setting key.
            v (JSON-encodable): The value.
        """
        self.file[k] = v
        self.overrides.pop(k, None)

    def get(self, *keys):
        """
        Retrieve the setting at the provided key path. Multiple keys can be
        provided, with each successive key being retrieved from the previous
        key's value. A command-line override wins for a top-level key.

        Args:
            *keys (str): Recursive key list.

        Returns:
            mixed: The configuration value.
        """
        if len(keys) == 1 and keys[0] in self.overrides:
            return self.overrides[keys[0]]
        d = self.file
        rVal = None
        for k in keys:
            if not isinstance(d, dict) or k not in d:
                return None
            rVal = d[k]
            d = rVal
        return rVal

    def normalize(self):
        """
        Fill in defaults for missing settings.
        """
        file = self.file
        if "logLevel" not in file:
            file["logLevel"] = DEFAULT_LOG_LEVEL
        if "curveDB" not in file:
            file["curveDB"] = os.path.join(DATA_DIR, CURVE_DB_NAME)

    def logLevel(self):
        """
        The numeric logging level.
        """
        return helpers.getLogLevel(self.get("logLevel"))

    def save(self):
        """
        Save the file.
        """
        helpers.saveJSON(self.path, self.file, indent=4, sort_keys=True)


ellipticConfig = None


def load(path=None, args=None):
    """
    Load and return the current configuration.

    The configuration is only loaded once. Successive calls to the modular `load`
    function will return the same instance.

    Returns:
        EllipticConfig: The current configuration.
    """
    global ellipticConfig
    if not ellipticConfig:
        ellipticConfig = EllipticConfig(path, args)
    return ellipticConfig
