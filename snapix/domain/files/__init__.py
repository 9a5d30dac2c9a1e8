"""Files bounded context: stored images and their records."""
