"""Cross-platform build automation script for lstree.

Produces a single-file ``lstree`` executable with PyInstaller.

Supports:
  - macOS (arm64 / x86_64)
  - Linux
  - Windows 10 / 11
"""

from __future__ import annotations

import platform
import shutil
import subprocess
import sys
from pathlib import Path

APP_NAME = "lstree"


def _ensure_dependencies() -> None:
    """Install PyInstaller if missing."""
    try:
        __import__("PyInstaller")
    except ImportError:
        print("Installing pyinstaller ...")
        subprocess.check_call(
            [sys.executable, "-m", "pip", "install", "pyinstaller"],
            stdout=subprocess.DEVNULL,
        )


def _remove_pathlib_backport() -> None:
    """Remove the obsolete 'pathlib' backport that breaks PyInstaller."""
    import importlib.metadata as md

    try:
        md.distribution("pathlib")
    except md.PackageNotFoundError:
        return
    print("Removing obsolete 'pathlib' backport ...")
    subprocess.check_call(
        [sys.executable, "-m", "pip", "uninstall", "pathlib", "-y"],
        stdout=subprocess.DEVNULL,
    )


def main() -> None:
    project_root = Path(__file__).resolve().parent
    entry_script = project_root / "run.py"

    if not entry_script.exists():
        print(f"Error: {entry_script} not found.")
        sys.exit(1)

    os_name = platform.system()    # Darwin / Windows / Linux
    arch = platform.machine()      # arm64 / x86_64 / AMD64
    print(f"=== {APP_NAME} build ===")
    print(f"OS:       {os_name}")
    print(f"Arch:     {arch}")
    print(f"Python:   {sys.version}")
    print()

    # ---- Pre-build checks ----
    _ensure_dependencies()
    _remove_pathlib_backport()

    # ---- Clean previous build ----
    for d in ("build", "dist"):
        target = project_root / d
        if target.exists():
            print(f"Cleaning {target} ...")
            shutil.rmtree(target)

    # ---- Run PyInstaller ----
    cmd = [
        sys.executable,
        "-m",
        "PyInstaller",
        str(entry_script),
        "--name",
        APP_NAME,
        "--onefile",
        "--console",
        "--paths",
        str(project_root / "src"),
        "--clean",
        "--noconfirm",
    ]

    print(f"Running: {' '.join(cmd)}")
    print()

    result = subprocess.run(cmd, cwd=str(project_root))

    if result.returncode != 0:
        print()
        print("=== Build FAILED ===")
        sys.exit(result.returncode)

    # ---- Report ----
    exe_name = f"{APP_NAME}.exe" if os_name == "Windows" else APP_NAME
    exe_path = project_root / "dist" / exe_name
    size_mb = exe_path.stat().st_size / (1024 * 1024)

    print()
    print("=== Build successful! ===")
    print(f"Binary:   {exe_path}")
    print(f"Size:     {size_mb:.1f} MB")
    print()
    if os_name == "Windows":
        print(f'Run:  "{exe_path}" --help')
    else:
        print(f"Run:  {exe_path} --help")


if __name__ == "__main__":
    main()
