"""User-facing adapters built on top of the parser."""
