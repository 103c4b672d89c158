"""Console adapters for plain text streams and Rich consoles."""
