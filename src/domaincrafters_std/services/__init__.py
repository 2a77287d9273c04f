"""Service layer — operations returning ServiceResult for the CLI."""
