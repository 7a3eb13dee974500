"""CLI output utilities and formatting."""

from datetime import datetime
from typing import List

from colorama import Fore, Style

from minigit.commands.response import Response, ResponseKind

_color = True


def set_color(enabled: bool) -> None:
    """Turn ANSI colors on or off for the helpers below."""
    global _color
    _color = enabled


def _paint(color: str, text: str) -> str:
    if not _color:
        return text
    return f"{color}{text}{Style.RESET_ALL}"


def banner() -> str:
    """Boxed title shown above the help text."""
    edge = "═" * 38
    side = _paint(Fore.YELLOW, "║")
    title = _paint(Fore.CYAN + Style.BRIGHT, "mini-git")
    tagline = _paint(Fore.WHITE, "A tiny version control engine")
    return "\n".join([
        "",
        _paint(Fore.YELLOW, f"╔{edge}╗"),
        f"{side}   {title}{' ' * 27}{side}",
        f"{side}   {tagline}{' ' * 6}{side}",
        _paint(Fore.YELLOW, f"╚{edge}╝"),
        "",
    ])


def success(message: str) -> str:
    """Format success message in green."""
    return _paint(Fore.GREEN, f"✓ {message}")


def info(message: str) -> str:
    """Format info message in cyan."""
    return _paint(Fore.CYAN, f"→ {message}")


def warning(message: str) -> str:
    """Format warning message in yellow."""
    return _paint(Fore.YELLOW, f"⚠ {message}")


def error(message: str) -> str:
    """Format error message in red."""
    return _paint(Fore.RED, f"✗ {message}")


def format_timestamp(timestamp: int) -> str:
    """Format Unix timestamp to readable date."""
    return datetime.fromtimestamp(timestamp).strftime("%a %b %d %H:%M:%S %Y")


def _status_lines(payload: dict) -> List[str]:
    lines = [f"On branch {_paint(Fore.CYAN, payload['branch'])}", ""]

    sections = [
        ("Staged files:", payload['staged'], Fore.GREEN),
        ("Removed files:", payload['removed'], Fore.GREEN),
        ("Modifications not staged for commit:", payload['modified'], Fore.YELLOW),
        ("Deleted, not staged for removal:", payload['deleted'], Fore.YELLOW),
        ("Untracked files:", payload['untracked'], Fore.RED),
    ]
    for title, paths, color in sections:
        if not paths:
            continue
        lines.append(title)
        lines.extend(f"  {_paint(color, path)}" for path in paths)
        lines.append("")

    if not any(paths for _, paths, _ in sections):
        lines.append("nothing to commit, working tree clean")
    return lines


def _log_lines(payload: dict) -> List[str]:
    if not payload['commits']:
        return [warning("No commits yet")]

    lines = []
    for commit in payload['commits']:
        lines.append(_paint(Fore.YELLOW, f"commit {commit['id']}"))
        if commit['parent_id']:
            lines.append(f"Parent:    {commit['parent_id']}")
        lines.append(f"Date:      {format_timestamp(commit['timestamp'])}")
        lines.append("")
        lines.extend(f"    {line}" for line in commit['message'].split('\n'))
        lines.append("")
    return lines


def _branch_lines(payload: dict) -> List[str]:
    lines = []
    for name, commit_id in payload['branches']:
        short = commit_id[:7] if commit_id else '(no commits)'
        if name == payload['current']:
            lines.append(f"* {_paint(Fore.GREEN, name)} {short}")
        else:
            lines.append(f"  {name} {short}")
    return lines


def describe(response: Response) -> List[str]:
    """
    Turn a response into the lines shown to the user.

    Args:
        response: Result of a command

    Returns:
        Lines of formatted text, possibly empty
    """
    kind = response.kind
    p = response.payload

    if kind == ResponseKind.NONE_MESSAGE:
        return []
    if kind == ResponseKind.UNKNOWN_COMMAND:
        return [error(f"Unknown command: {p.get('command', '')}")]
    if kind == ResponseKind.NOT_INIT:
        return [error("Not a mini-git repository"),
                info("Run 'init' to create one")]
    if kind == ResponseKind.ALREADY_INIT:
        return [error(f"Repository already exists at {p['path']}")]
    if kind == ResponseKind.MISSING_ARGUMENT:
        return [error(f"'{p['command']}' requires a {p['argument']}")]
    if kind == ResponseKind.INIT_SUCCESS:
        return [success(f"Initialized empty mini-git repository in {p['path']}"),
                info(f"On branch {p['branch']}")]
    if kind == ResponseKind.ADD_SUCCESS:
        return [success(f"Added {p['filename']} to staging area")]
    if kind == ResponseKind.FILE_NOT_FOUND:
        return [error(f"File not found: {p['path']}")]
    if kind == ResponseKind.INVALID_PATH:
        return [error(f"Path is outside the working tree: {p['path']}")]
    if kind == ResponseKind.COMMIT_SUCCESS:
        lines = [success(f"Created commit {p['commit_id'][:7]} on {p['branch']}"),
                 info(f"Message: {p['message']}")]
        if p['parent_id']:
            lines.append(info(f"Parent: {p['parent_id'][:7]}"))
        else:
            lines.append(info("(root commit)"))
        lines.append(info(f"Files: {p['files']}"))
        return lines
    if kind == ResponseKind.NOTHING_TO_COMMIT:
        return [error("Nothing to commit (staging area is empty)"),
                info("Use 'add <file>' to stage changes")]
    if kind == ResponseKind.STATUS:
        return _status_lines(p)
    if kind == ResponseKind.RM_SUCCESS:
        if p['untracked_only']:
            return [success(f"Unstaged {p['filename']}")]
        return [success(f"Removed {p['filename']}")]
    if kind == ResponseKind.NO_REASON_TO_REMOVE:
        return [error(f"No reason to remove {p['filename']}: not staged or tracked")]
    if kind == ResponseKind.LOG:
        return _log_lines(p)
    if kind == ResponseKind.BRANCH_CREATED:
        return [success(f"Created branch '{p['branch']}' at {p['commit_id'][:7]}")]
    if kind == ResponseKind.BRANCH_EXISTS:
        return [error(f"A branch named '{p['branch']}' already exists")]
    if kind == ResponseKind.BRANCH_LIST:
        return _branch_lines(p)
    if kind == ResponseKind.INVALID_BRANCH_NAME:
        return [error(f"Invalid branch name: '{p['branch']}'")]
    if kind == ResponseKind.NO_COMMITS:
        return [error(f"Branch '{p['branch']}' has no commits yet")]
    if kind == ResponseKind.NOT_SUPPORTED:
        return [warning(f"'{p['command']}' is not supported")]

    return [error(f"Unhandled response: {kind.value}")]
