"""Version 1 of the Concert Lab API."""
