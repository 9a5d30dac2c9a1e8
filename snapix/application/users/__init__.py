"""Users use cases: profile, avatar and registration statistics."""
