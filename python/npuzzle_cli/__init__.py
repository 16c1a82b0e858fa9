"""Console frontends for the sliding puzzle solver."""
