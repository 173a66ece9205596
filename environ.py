#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import logging
import os.path
import subprocess


production: bool = int(os.environ.get('PRODUCTION', '0')) != 0


def _log_level(value:str) -> int:
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if isinstance(level, int):
        return level
    return logging.INFO


log_level: int = _log_level(os.environ.get('LOG_LEVEL', 'INFO'))


def configure_logging(level:int|None=None) -> None:
    logging.basicConfig(
        level=log_level if level is None else level,
        format='%(asctime)s %(name)s %(levelname)s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        force=True,
    )


# Installed copies are not git working trees
def get_version() -> str:
    try:
        version = subprocess.check_output([
            'git',
                '-C', os.path.dirname(os.path.abspath(__file__)),
            'show',
                '-s',
                '--date=format:%Y-%m-%d',
                '--format=%h (%cd)',
                'HEAD',
        ], text=True, stderr=subprocess.DEVNULL)
    except (FileNotFoundError, subprocess.CalledProcessError):
        version = 'unknown'
    else:
        version = version.rstrip()
    return version
