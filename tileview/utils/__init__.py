"""Pure helpers: projection math, list diffs and text formatting."""
