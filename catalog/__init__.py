"""File metadata catalog service."""
