"""Player-facing input and rendering."""
