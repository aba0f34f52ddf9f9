"""Seeds, identifiers, inventory, crafting, alchemy, hotbar and diagnostics rules for a survival crafting game."""

__version__ = "0.1.0"