"""Command line surface for cargo-switch."""
