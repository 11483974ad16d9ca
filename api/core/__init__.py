"""
Shared building blocks for the resource packages.

Database handle, generic table repository, settings, logging and the common
request models live here. SQL column lists and business rules stay in the
resource package they belong to (e.g. `skills/`).
"""
