"""Reference data, parsing utilities and pipeline stages."""
