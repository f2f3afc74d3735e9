"""Sweet Shop CLI subcommands."""
