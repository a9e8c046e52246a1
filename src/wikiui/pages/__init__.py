"""Screen models built on the wait and element layers."""
