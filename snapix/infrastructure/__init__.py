"""Infrastructure layer - adapters over the database, disk, broker and JWT."""
