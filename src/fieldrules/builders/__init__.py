"""Rule builders: per-field token lists and their aggregation."""
