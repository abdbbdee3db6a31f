import subprocess

from AppLauncher.registry import MACOS, WINDOWS, current_platform, normalize_platform
from AppLauncher.runtime.errors import LaunchError


def looks_like_url(text):
    t = (text or "").strip().lower()
    return t.startswith("http://") or t.startswith("https://")


def opener_command(url, platform=None):
    name = normalize_platform(platform) if platform else current_platform()
    if name == WINDOWS:
        # Empty title argument so `start` does not treat the URL as a window title.
        return ["cmd", "/c", "start", "", url]
    if name == MACOS:
        return ["open", url]
    return ["xdg-open", url]


class UrlOpener:
    """Hands a URL to the platform default opener and returns immediately."""

    def __init__(self, platform=None):
        self.platform = platform

    def open(self, url):
        url = (url or "").strip()
        if not looks_like_url(url):
            raise LaunchError("invalid_url", url)
        cmd = opener_command(url, platform=self.platform)
        try:
            return subprocess.Popen(cmd, shell=False)
        except OSError as e:
            raise LaunchError("open_failed", f"{cmd[0]}: {e.strerror or e}") from e
