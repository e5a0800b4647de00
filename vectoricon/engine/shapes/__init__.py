"""Shape handlers. Each module registers one SVG element type via @handler."""
