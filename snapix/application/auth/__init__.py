"""Auth use cases: registration, confirmation, password recovery and tokens."""
