"""Feature packages: batch editing engine and tag I/O."""
