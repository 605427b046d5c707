"""artifact-locator — find build artifacts in a project and rank them by recency."""
