"""Payment intention creation core."""
