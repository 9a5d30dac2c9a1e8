"""HTTP API: routers, schemas, dependencies and error translation."""
