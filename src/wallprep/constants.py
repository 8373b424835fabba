from pathlib import Path

# Opaque black, used for the margin band and any uncovered canvas area
DEFAULT_BACKGROUND: tuple[int, int, int, int] = (0, 0, 0, 255)

# Where generated wallpapers are written when no output path is given
DEFAULT_OUTPUT_DIR = Path("~/.local/share/wallpaper").expanduser()
OUTPUT_NAME_TEMPLATE = "wallpaper-{timestamp}.png"

# Environment variable pointing at a config file
CONFIG_ENV_VAR = "WALLPREP_CONFIG"

# Number of straight segments used to approximate each quarter-circle arc
ARC_STEPS = 16
