"""API middleware: guard chain, rate limiting and request logging."""
