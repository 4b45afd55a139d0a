"""Database infrastructure - engines, sessions and the declarative base."""
