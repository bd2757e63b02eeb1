"""Network helpers: resilient JSON fetch and error summaries."""
