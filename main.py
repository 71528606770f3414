"""
Launches the Rotary digit display using the GUI components in rotary/gui/.
"""

import sys

from rotary.gui.app import main

if __name__ == "__main__":
    sys.exit(main())
