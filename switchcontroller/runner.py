"""Demo runner: opens a device and sends a short command sequence.

Usage:
    python -m switchcontroller <serial-port> [baud-rate]
"""
from __future__ import annotations

import logging
import sys
from typing import List, Optional

from .buttons import Button, Stick
from .controller import SwitchController
from .errors import SwitchControllerError
from .transport import DEFAULT_BAUDRATE

logger = logging.getLogger(__name__)

USAGE = (
    "Usage: switchcontroller <serial-port> [baud-rate]\n"
    "  e.g. switchcontroller /dev/ttyACM0 115200"
)


def parse_baud_rate(text: Optional[str]) -> int:
    """Parse a baud rate argument, falling back to the default."""
    if text is None:
        return DEFAULT_BAUDRATE
    try:
        baud = int(text)
    except ValueError:
        baud = 0

    if baud <= 0:
        logger.warning(f"Invalid baud rate {text!r}, using {DEFAULT_BAUDRATE}")
        return DEFAULT_BAUDRATE
    return baud


def run_demo(ctrl: SwitchController) -> None:
    """Press A, wait a second on the device, press Y, then center both sticks."""
    ctrl.press([Button.A])
    ctrl.sleep(1.0)
    ctrl.press([Button.Y])
    ctrl.stick(Stick.LEFT, 0.0, 0.0)
    ctrl.stick(Stick.RIGHT, 0.0, 0.0)


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(USAGE, file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    port = args[0]
    baud = parse_baud_rate(args[1] if len(args) > 1 else None)

    try:
        with SwitchController.open(port, baud) as ctrl:
            run_demo(ctrl)
    except SwitchControllerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
