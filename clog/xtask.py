"""Repository maintenance tasks: installing git hooks and developer tools."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from pathlib import Path

COMMANDS = ("install-hooks", "install-tools")
COVERAGE_TOOL = "cargo-llvm-cov"


class XtaskError(Exception):
    """A maintenance task could not be completed."""


def project_root(start: str | os.PathLike[str] | None = None) -> Path:
    """Return the nearest directory at or above ``start`` holding a Cargo.toml."""
    directory = Path.cwd() if start is None else Path(start).absolute()
    for candidate in (directory, *directory.parents):
        if (candidate / "Cargo.toml").exists():
            return candidate
    raise XtaskError("Cannot find Cargo.toml in parent directories")


def install_hooks(root: str | os.PathLike[str] | None = None) -> list[Path]:
    """Link every hook in ``.workspace/hooks`` into ``.git/hooks``.

    On platforms without symlink support the hooks are copied instead.
    Returns the installed hook paths.
    """
    repo_root = project_root() if root is None else Path(root)
    hooks_dir = repo_root / ".workspace" / "hooks"
    git_hooks_dir = repo_root / ".git" / "hooks"

    print("Installing git hooks...")
    installed = []
    for src in sorted(hooks_dir.iterdir()):
        dest = git_hooks_dir / src.name
        if os.name == "nt":
            shutil.copy(src, dest)
        else:
            dest.unlink(missing_ok=True)
            dest.symlink_to(src)
        print(f'Installed "{src.name}"')
        installed.append(dest)
    return installed


def is_tool_installed(tool_name: str) -> bool:
    """Tell whether ``cargo install --list`` mentions ``tool_name``."""
    try:
        result = subprocess.run(
            ["cargo", "install", "--list"], capture_output=True, check=False
        )
    except OSError as exc:
        raise XtaskError("failed to list installed cargo tools") from exc
    stdout = result.stdout.decode("utf-8", errors="replace")
    return tool_name in stdout


def install_tools() -> None:
    """Install the coverage tool with cargo unless it is already present."""
    if is_tool_installed(COVERAGE_TOOL):
        print(f"{COVERAGE_TOOL} already installed")
        return
    print(f"Installing {COVERAGE_TOOL}...")
    try:
        result = subprocess.run(["cargo", "install", COVERAGE_TOOL], check=False)
    except OSError as exc:
        raise XtaskError(
            f"failed to execute cargo install {COVERAGE_TOOL}"
        ) from exc
    if result.returncode != 0:
        raise XtaskError(f"Failed to install {COVERAGE_TOOL}")


def main(argv: list[str] | None = None) -> int:
    """Run the maintenance command named in ``argv``; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print(
            f"No xtask command given. Available: {', '.join(COMMANDS)}",
            file=sys.stderr,
        )
        return 1

    command = argv[0]
    tasks = {"install-hooks": install_hooks, "install-tools": install_tools}
    task = tasks.get(command)
    if task is None:
        print(f"Unknown xtask command: {command}", file=sys.stderr)
        return 1

    try:
        task()
    except (XtaskError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())