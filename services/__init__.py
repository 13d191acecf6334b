"""Business rules sitting between the blueprints and the repositories."""
