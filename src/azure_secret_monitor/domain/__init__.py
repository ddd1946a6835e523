"""Domain layer - credential expiry rules with no I/O."""
