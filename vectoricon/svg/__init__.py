"""SVG path-data interpreter and document loader."""
