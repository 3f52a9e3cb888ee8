"""Reader for flow source text."""
