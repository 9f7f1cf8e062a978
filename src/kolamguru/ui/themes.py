"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Warm palette after rice flour, turmeric, vermilion and marigold
KOLAM_DUSK = Theme(
    name="kolam-dusk",
    primary="#f4a259",      # Marigold - main accent
    secondary="#e07a5f",    # Vermilion - assistant messages
    accent="#f2cc8f",       # Turmeric - highlights
    foreground="#f4f1de",   # Rice flour - text
    background="#1b1420",   # Night courtyard
    success="#81b29a",      # Mango leaf - user messages
    warning="#f2cc8f",
    error="#d62828",
    surface="#2a1f2d",
    panel="#221a26",
    dark=True,
    variables={
        "block-cursor-foreground": "#1b1420",
        "block-cursor-background": "#f2cc8f",
        "block-cursor-text-style": "bold",
        "block-hover-background": "#3d2f40 20%",

        "input-cursor-background": "#f4f1de",
        "input-cursor-foreground": "#1b1420",
        "input-selection-background": "#f4a259 30%",

        "border": "#4a3b4e",
        "border-blurred": "#3d2f40",

        "scrollbar": "#3d2f40",
        "scrollbar-hover": "#4a3b4e",
        "scrollbar-active": "#f4a259",
        "scrollbar-background": "#221a26",
        "scrollbar-corner-color": "#221a26",

        "footer-foreground": "#e9e3c9",
        "footer-background": "#1b1420",
        "footer-key-foreground": "#f2cc8f",
        "footer-key-background": "#3d2f40",
        "footer-description-foreground": "#c9c1a3",

        "text-muted": "#9c8f9f",
        "text-disabled": "#4a3b4e",

        "button-foreground": "#f4f1de",
        "button-color-foreground": "#1b1420",
        "button-focus-text-style": "bold reverse",
    },
)
