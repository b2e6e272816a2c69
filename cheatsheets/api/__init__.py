"""HTTP API for the cheatsheet catalog."""
