"""User accounts: domain model, password hashing and the users repository."""
