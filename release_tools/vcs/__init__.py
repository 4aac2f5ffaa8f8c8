"""Local version control operations."""
