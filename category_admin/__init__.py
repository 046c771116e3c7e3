"""Category admin dashboard backend."""
