"""Resource store implementations."""
