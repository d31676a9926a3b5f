"""CLI subcommands for calbump."""
