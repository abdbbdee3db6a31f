PROGRAM_NAME = "app-launcher"


def split_args(argv):
    """Return (command, app_name) from argv without the program name; missing parts are ""."""
    args = [str(a) for a in (argv or [])]
    command = args[0] if args else ""
    app_name = args[1] if len(args) > 1 else ""
    return command, app_name


def usage_lines(entries):
    lines = [
        "Usage:",
        f"  {PROGRAM_NAME} list              - List available applications",
        f"  {PROGRAM_NAME} run <app-name>    - Launch specified application",
        "",
        "Available applications:",
    ]
    for entry in entries or []:
        lines.append(f"  - {entry.key:<16} ({entry.label})")
    return lines
