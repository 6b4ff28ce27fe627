"""Glimmer game-streaming client: decoder and audio settings engine."""
