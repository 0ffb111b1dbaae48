"""Feature modules used by the API routers."""
