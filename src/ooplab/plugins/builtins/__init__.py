"""Built-in plugins registered by every Lab."""
