"""Tour log backend."""
