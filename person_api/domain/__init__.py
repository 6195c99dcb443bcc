"""Domain types: the Person record, the color code table and data source selection."""
