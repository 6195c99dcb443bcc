"""
Persistence adapters.

Both backends (CSV file and SQL database) implement ``PersonRepository`` so
routers/services never know which storage is active. ``PersonRepositoryFactory``
binds the configured data source to one of them.
"""
