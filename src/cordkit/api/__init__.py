"""Discord API payload models and gateway events."""
