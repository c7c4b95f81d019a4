"""Infrastructure layer - external API clients."""
