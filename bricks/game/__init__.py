"""Bricks game core: entities, physics, HUD and level loading."""
