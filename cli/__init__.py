"""reflection-weekly command line interface."""
