import ntpath
import os
import subprocess

from AppLauncher.runtime.errors import LaunchError


def expand_target(target):
    """Expand %VAR% / $VAR placeholders and a leading ~ in a launch target."""
    text = str(target or "")
    if "%" in text:
        text = ntpath.expandvars(text)
    return os.path.expanduser(os.path.expandvars(text))


def spawn_process(target):
    """
    Start the target with no arguments and return without waiting for it.
    :param target: path or command name found on PATH
    :return: Popen handle (exposes pid)
    """
    try:
        return subprocess.Popen([target])
    except OSError as e:
        raise LaunchError("spawn_failed", f"{target}: {e.strerror or e}") from e


class ProcessLauncher:
    def spawn(self, target):
        return spawn_process(target)
