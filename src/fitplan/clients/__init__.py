"""Input clients for fitplan."""
