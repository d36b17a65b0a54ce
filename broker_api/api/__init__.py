"""HTTP layer: Flask blueprints and error handlers."""
