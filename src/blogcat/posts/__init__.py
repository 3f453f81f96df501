"""Post browsing commands."""
