"""Places guide: catalog site, places data client and mock data service."""
