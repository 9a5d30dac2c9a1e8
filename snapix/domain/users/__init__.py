"""Users bounded context: accounts and profiles."""
