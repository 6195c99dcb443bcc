"""Person record service with interchangeable CSV and SQL storage."""
