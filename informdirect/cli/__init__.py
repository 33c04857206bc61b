"""Command-line interface for the Inform Direct client."""
