"""
Launcher for the Live URL Editor.

For local development:
    panel serve code/app.py --dev --show

For a shared deployment:
    python code/run_capsule.py --port 7860
"""

import argparse
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

APP_PATH = Path(__file__).parent / "app.py"


def build_command(
    address: str = "0.0.0.0",
    port: int = 7860,
    dev: bool = False,
    allowed_origin: str = "*",
) -> List[str]:
    """
    Build the ``panel serve`` command line for the editor.

    Args:
        address: Interface to bind
        port: Port to listen on
        dev: Reload on source changes
        allowed_origin: Value for --allow-websocket-origin

    Returns:
        Argument list for subprocess
    """
    cmd = [
        sys.executable, "-m", "panel", "serve",
        str(APP_PATH),
        "--address", address,
        "--port", str(port),
        f"--allow-websocket-origin={allowed_origin}",
    ]
    if dev:
        cmd.append("--dev")
    return cmd


def run(argv: Optional[List[str]] = None) -> int:
    """Start the Panel server."""
    parser = argparse.ArgumentParser(description="Serve the Live URL Editor")
    parser.add_argument("--address", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=7860)
    parser.add_argument("--dev", action="store_true", help="Reload on source changes")
    args = parser.parse_args(argv)
    return subprocess.run(build_command(args.address, args.port, args.dev)).returncode


if __name__ == "__main__":
    sys.exit(run())
