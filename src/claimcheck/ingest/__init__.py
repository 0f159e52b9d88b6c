"""File ingestion: admissibility checks and format-specific text extraction."""
