"""Central place for sortreel default settings."""

# Canvas geometry (pixels)
DEFAULT_BAR_WIDTH: int = 8
DEFAULT_CHART_HEIGHT: int = 512
DEFAULT_MARGIN: int = 24  # Left/right
DEFAULT_MARGIN_TOP: int = 32  # Top/bottom
DEFAULT_SPACING: int = 2

# Colors (packed 0xRRGGBB)
DEFAULT_BACKGROUND: int = 0x1F1F1F
DEFAULT_PALETTE: str = "Classic"

# Highlight intensities
OPERATION_HIGHLIGHT: float = 0.2  # Indices touched by swap/compare
PIVOT_HIGHLIGHT: float = 0.5
SCAN_HIGHLIGHT: float = 0.3

# Frame pipeline
DEFAULT_CONCURRENCY: int = 8  # Simultaneous render+encode+write tasks
DEFAULT_RUN_NAME: str = "sort"
FRAME_EXTENSION: str = ".png"

# CLI input
DEFAULT_ARRAY_SIZE: int = 19
DEFAULT_ALGORITHM: str = "bubble"
