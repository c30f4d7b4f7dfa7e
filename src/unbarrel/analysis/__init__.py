"""Import resolution analysis."""
