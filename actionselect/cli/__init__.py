"""Command-line surface for actionselect."""
