import sys

from AppLauncher import LaunchDispatcher, app_entries, exit_code
from AppLauncher.command_utils import split_args, usage_lines
from AppLauncher.runtime import log_event, set_run_id


def print_usage(registry=None, out=print):
    for line in usage_lines(app_entries(registry=registry)):
        out(line)


def main(argv=None, dispatcher=None):
    """
    Entry point for `app-launcher list` and `app-launcher run <app-name>`.
    :return: process exit code
    """
    args = sys.argv[1:] if argv is None else list(argv)
    set_run_id()
    command, app_name = split_args(args)
    dispatcher = dispatcher or LaunchDispatcher()
    out = dispatcher.out
    log_event("cli_command", command=command, app=app_name, platform=dispatcher.platform)

    if not args:
        print_usage(dispatcher.registry, out=out)
        return 0

    if command == "list":
        dispatcher.list_apps()
        return 0

    if command == "run":
        if not app_name:
            out("Please specify an application to run")
            log_event("cli_usage_error", error_code="missing_argument")
            return 0
        return exit_code(dispatcher.run(app_name))

    out(f"Unknown command: {command}")
    log_event("cli_usage_error", error_code="unknown_command", command=command)
    print_usage(dispatcher.registry, out=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
