from .structured_log import set_run_id, get_run_id, log_event
from .errors import LaunchError, humanize
