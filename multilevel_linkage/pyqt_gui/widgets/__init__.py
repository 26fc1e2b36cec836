"""PyQt6 widgets and adapters for linkage groups."""
