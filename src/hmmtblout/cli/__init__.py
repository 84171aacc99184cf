"""Command-line interface for hmmtblout."""
