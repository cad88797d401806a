from __future__ import annotations

# Base tones
LIGHT_COLOUR: str = "#f4f6ff"  # Powdered Sugar
DARK_COLOUR: str = "#07031a"  # Midnight Blue

# Mnemonic palette for option-string colour tokens
PALETTE: dict[str, str] = {
    "PK": "#ef7ba8",  # pink
    "PU": "#8c52c7",  # purple
    "BK": "#000000",  # black
    "GY": "#8a8d99",  # grey
    "BN": "#7a4e2d",  # brown
    "W": "#ffffff",  # white
    "K": "#07031a",  # near-black
    "E": "#4a4e5a",  # dark grey
    "A": "#36c2c9",  # aqua
    "R": "#d62d3a",  # red
    "G": "#3aa655",  # green
    "B": "#2f6fd6",  # blue
    "Y": "#f2c53d",  # yellow
    "P": "#d94fcf",  # magenta
    "C": "#6ad9f2",  # cyan
    "N": "#a36a3f",  # tan
    "O": "#f28c28",  # orange
    "I": "#4b3aa6",  # indigo
}
