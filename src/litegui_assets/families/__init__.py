"""Draw routines and descriptors for each generated asset family."""
