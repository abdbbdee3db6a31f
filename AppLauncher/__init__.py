from .dispatcher import LaunchDispatcher, exit_code
from .registry import ApplicationEntry, app_entries, build_registry, current_platform
