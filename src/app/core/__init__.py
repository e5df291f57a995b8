# Framework-independent logic lives here:
# - Identifier generation (UUIDv7 primary keys)
# Nothing in this package may import from routers, services or repositories.
