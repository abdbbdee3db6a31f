import os

from AppLauncher.features.launch_app import ProcessLauncher, expand_target
from AppLauncher.features.website_open import UrlOpener, looks_like_url
from AppLauncher.registry import (
    CHATWORK_URL,
    app_label,
    build_registry,
    current_platform,
    normalize_platform,
    requires_path_check,
)
from AppLauncher.runtime import LaunchError, log_event

# Launch failures; these exit non-zero.
_FAILURE_CODES = ("spawn_failed", "open_failed", "invalid_url")


def _result(ok, app, message, error_code="", **extra):
    out = {"ok": bool(ok), "app": app, "message": message, "error_code": error_code}
    out.update(extra)
    return out


def exit_code(result):
    if not result or result.get("ok"):
        return 0
    return 1 if result.get("error_code") in _FAILURE_CODES else 0


class LaunchDispatcher:
    """
    Resolve an app key against the registry and launch it, once.

    All OS touching collaborators can be swapped out:
      - launcher: object with spawn(target) -> handle with .pid
      - opener: object with open(url) -> handle or None
      - path_exists: callable(path) -> bool
      - out: callable used for user facing lines (print by default)
    """

    def __init__(self, registry=None, platform=None, launcher=None, opener=None, path_exists=None, out=print):
        self.platform = normalize_platform(platform) if platform else current_platform()
        self.registry = registry if registry is not None else build_registry(self.platform)
        self.launcher = launcher or ProcessLauncher()
        self.opener = opener or UrlOpener(platform=self.platform)
        self.path_exists = path_exists or os.path.exists
        self.out = out
        # Spawned children are never awaited; holding the handles keeps Popen from
        # warning that they are still running.
        self.children = []

    def list_apps(self):
        keys = list(self.registry.keys())
        self.out("Available applications:")
        for key in keys:
            self.out(f"- {key}")
        return keys

    def run(self, app_name):
        name = str(app_name or "")
        if name == "chatwork":
            url = self.registry.get("chatwork") or CHATWORK_URL
            return self._open_url(name, url, "Opened Chatwork in default browser")

        target = self.registry.get(name)
        if target is None:
            message = f"Unknown application: {name}"
            self.out(message)
            log_event("app_unknown", app=name)
            return _result(False, name, message, "unknown_application")

        if looks_like_url(target):
            return self._open_url(name, target, f"Opened {app_label(name)} in default browser")

        path = expand_target(target)
        if requires_path_check(self.platform) and not self.path_exists(path):
            message = f"Application path not found: {path}"
            self.out(message)
            log_event("app_path_missing", app=name, target=path)
            return _result(False, name, message, "target_not_found", target=path)

        return self._spawn(name, path)

    def _spawn(self, name, path):
        try:
            handle = self.launcher.spawn(path)
        except LaunchError as e:
            return self._failed(name, path, e)
        self.children.append(handle)
        pid = getattr(handle, "pid", None)
        message = f"Launched {name} (PID: {pid})"
        self.out(message)
        log_event("app_launch", app=name, target=path, pid=pid, platform=self.platform)
        return _result(True, name, message, target=path, pid=pid)

    def _open_url(self, name, url, success_message):
        try:
            handle = self.opener.open(url)
        except LaunchError as e:
            return self._failed(name, url, e)
        if handle is not None:
            self.children.append(handle)
        self.out(success_message)
        log_event("url_open", app=name, target=url, platform=self.platform)
        return _result(True, name, success_message, target=url)

    def _failed(self, name, target, error):
        message = f"Failed to launch {name}: {error}"
        self.out(message)
        log_event("app_launch_failed", app=name, target=target, error_code=error.error_code, details=error.details)
        return _result(False, name, message, error.error_code, target=target)
