"""Role-scoped campus notification delivery."""
