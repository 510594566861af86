"""Services that drive and describe games."""
