"""Infrastructure layer — runtime wiring and delivery storage."""
