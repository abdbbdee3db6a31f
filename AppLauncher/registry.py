"""
Application registry: short app keys mapped to per-platform launch targets.

The table below is the only place targets live. Add a key to every platform
block and the dispatcher picks it up; URL targets are opened in the browser.
"""
import sys
import types
from dataclasses import dataclass

CHATWORK_URL = "https://www.chatwork.com/"

WINDOWS = "windows"
MACOS = "macos"
LINUX = "linux"

APP_LABELS = {
    "docker-desktop": "Docker Desktop",
    "slack": "Slack",
    "chatwork": "Chatwork in browser",
    "chrome": "Google Chrome",
}

APP_TABLE = {
    WINDOWS: {
        "docker-desktop": r"C:\Program Files\Docker\Docker\Docker Desktop.exe",
        "slack": r"C:\Users\%USERNAME%\AppData\Local\slack\slack.exe",
        "chatwork": CHATWORK_URL,
        "chrome": r"C:\Program Files\Google\Chrome\Application\chrome.exe",
    },
    MACOS: {
        "docker-desktop": "/Applications/Docker.app/Contents/MacOS/Docker Desktop",
        "slack": "/Applications/Slack.app/Contents/MacOS/Slack",
        "chatwork": CHATWORK_URL,
        "chrome": "/Applications/Google Chrome.app/Contents/MacOS/Google Chrome",
    },
    # Bare names are resolved through PATH (package-manager installs).
    LINUX: {
        "docker-desktop": "docker-desktop",
        "slack": "/usr/bin/slack",
        "chatwork": CHATWORK_URL,
        "chrome": "google-chrome",
    },
}

_PLATFORM_ALIASES = {
    "win32": WINDOWS,
    "cygwin": WINDOWS,
    "msys": WINDOWS,
    "windows": WINDOWS,
    "darwin": MACOS,
    "macos": MACOS,
    "mac": MACOS,
    "osx": MACOS,
    "linux": LINUX,
    "linux2": LINUX,
}


@dataclass(frozen=True)
class ApplicationEntry:
    key: str
    target: str
    label: str


def normalize_platform(name):
    t = str(name or "").strip().lower()
    if t in _PLATFORM_ALIASES:
        return _PLATFORM_ALIASES[t]
    # BSDs and other POSIX systems share the linux table (xdg-open, PATH lookup).
    return LINUX


def current_platform():
    return normalize_platform(sys.platform)


def requires_path_check(platform):
    return normalize_platform(platform) in (WINDOWS, MACOS)


def build_registry(platform=None):
    """
    Build the read-only key -> target mapping for a platform.
    :param platform: any sys.platform style name; defaults to the running OS
    :return: mappingproxy in table order
    """
    name = normalize_platform(platform) if platform else current_platform()
    return types.MappingProxyType(dict(APP_TABLE[name]))


def app_label(key):
    return APP_LABELS.get(key, key)


def app_entries(platform=None, registry=None):
    if registry is None:
        registry = build_registry(platform)
    return [ApplicationEntry(key=k, target=v, label=app_label(k)) for k, v in registry.items()]
