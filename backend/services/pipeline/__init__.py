"""Three-stage watch-history pipeline: enrichment, features, recommendations."""
