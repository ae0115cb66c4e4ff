"""PyInstaller entry point for the lstree command line."""

import sys
from pathlib import Path


def main() -> int:
    # Ensure the src directory is on the path
    src_dir = Path(__file__).resolve().parent / "src"
    if src_dir.exists() and str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

    # When running from a PyInstaller bundle, _MEIPASS points to the temp dir
    if getattr(sys, "_MEIPASS", None):
        src_in_bundle = Path(sys._MEIPASS) / "src"
        if src_in_bundle.exists() and str(src_in_bundle) not in sys.path:
            sys.path.insert(0, str(src_in_bundle))

    from lstree.cli import main as cli_main

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
