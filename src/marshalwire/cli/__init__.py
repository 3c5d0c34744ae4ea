"""Command-line interface for marshalwire."""
