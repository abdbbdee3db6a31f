_MAP = {
    "unknown_command": "Unknown command.",
    "missing_argument": "Please specify an application to run.",
    "unknown_application": "Unknown application.",
    "target_not_found": "Application path not found.",
    "spawn_failed": "The application could not be started.",
    "open_failed": "The default browser could not be opened.",
    "invalid_url": "The target is not a web address.",
}


def humanize(error_code, details=""):
    code = str(error_code or "").strip()
    msg = _MAP.get(code, "An unexpected error occurred.")
    if details:
        return f"{msg} ({details})"
    return msg


class LaunchError(Exception):
    """Raised by the launch capabilities when the OS refuses a spawn or URL open."""

    def __init__(self, error_code, details=""):
        self.error_code = str(error_code or "")
        self.details = str(details or "")
        super().__init__(humanize(self.error_code, self.details))
