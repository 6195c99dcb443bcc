"""
Use cases that orchestrate repositories.

Currently only the CSV -> database import lives here; request handling
stays in the routers and talks to ``PersonRepository`` directly.
"""
